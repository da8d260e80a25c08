"""Audit trail models."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from usermanagement.models.entity import Entity


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class AuditAction(str, Enum):
    """Conventional action tags written by the user directory."""

    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"


class LogEntry(Entity):
    """Immutable audit record of an action performed on a user.

    user_id is not a foreign key: the referenced user may be deleted
    later and the entry stays valid.
    """

    model_config = ConfigDict(frozen=True)

    user_id: int | None = Field(default=None, description="Subject user")
    action: str = Field(..., description="Action tag, e.g. Created/Updated/Deleted")
    details: str | None = Field(default=None, description="Human-readable description")
    actor: str | None = Field(default=None, description="Who performed the action")
    timestamp: datetime = Field(default_factory=utc_now, description="Event time")

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC so entries stay comparable."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class LogEntryWithUser(BaseModel):
    """Read-only projection of a log entry joined with its subject's name.

    forename and surname are None when the subject no longer exists.
    """

    model_config = ConfigDict(frozen=True)

    log_id: int
    action: str
    user_id: int | None = None
    forename: str | None = None
    surname: str | None = None
    details: str | None = None
    actor: str | None = None
    timestamp: datetime
