"""Audit trail: append-only log of actions performed on users."""

from usermanagement.audit.log import AuditLog, newest_first
from usermanagement.audit.views import join_users

__all__ = [
    "AuditLog",
    "join_users",
    "newest_first",
]
