"""Exception hierarchy for the store and service layers.

All errors inherit from UserManagementError, which carries a
machine-readable error_code so an outer layer can map failures
without inspecting messages.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    """A record was absent or an identity cannot exist."""

    NOT_FOUND = "NOT_FOUND"
    """No record with the given identity exists for the entity kind."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class UserManagementError(Exception):
    """Base exception for all user management errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(UserManagementError):
    """Raised when a record is missing or an identity is unusable."""

    error_code = ErrorCode.INVALID_ARGUMENT


class NotFoundError(UserManagementError):
    """Raised when update/remove/lookup targets an unknown identity."""

    error_code = ErrorCode.NOT_FOUND

    def __init__(self, kind: str, entity_id: int) -> None:
        super().__init__(f"{kind} with id {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id
