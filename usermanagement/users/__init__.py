"""User catalogue: change detection and the audited user directory."""

from usermanagement.users.diff import FieldChange, diff_users, render_changes
from usermanagement.users.service import UserDirectory

__all__ = [
    "FieldChange",
    "UserDirectory",
    "diff_users",
    "render_changes",
]
