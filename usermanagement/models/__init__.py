"""Domain models shared by the store, the audit trail and the directory.

Contains the Pydantic models for every entity kind:
- User for the mutable user catalogue
- LogEntry for the append-only audit trail
"""

from usermanagement.models.entity import Entity
from usermanagement.models.log_entry import AuditAction, LogEntry, LogEntryWithUser
from usermanagement.models.user import User

__all__ = [
    "AuditAction",
    "Entity",
    "LogEntry",
    "LogEntryWithUser",
    "User",
]
