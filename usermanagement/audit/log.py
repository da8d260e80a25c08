"""Append-only audit log over the LogEntry repository."""

from datetime import datetime

from usermanagement.errors import InvalidArgumentError, NotFoundError
from usermanagement.models import LogEntry
from usermanagement.observability.logging import get_logger
from usermanagement.observability.metrics import AUDIT_ENTRIES
from usermanagement.storage.store import Repository

logger = get_logger(__name__)


def newest_first(entries: list[LogEntry]) -> list[LogEntry]:
    """Order entries by timestamp descending, later inserts first on ties."""
    return sorted(entries, key=lambda e: (e.timestamp, e.id or 0), reverse=True)


class AuditLog:
    """Insert-only view of the LogEntry repository.

    The underlying repository supports update and remove; this class
    deliberately exposes neither.
    """

    def __init__(self, entries: Repository[LogEntry]) -> None:
        self._entries = entries

    async def append(self, entry: LogEntry) -> LogEntry:
        """Persist an entry, returning it with its assigned identity."""
        if entry is None:
            raise InvalidArgumentError("entry must not be None")
        stored = await self._entries.add(entry)
        AUDIT_ENTRIES.labels(action=stored.action).inc()
        logger.info(
            "audit_entry_appended",
            log_id=stored.id,
            user_id=stored.user_id,
            action=stored.action,
        )
        return stored

    async def record(
        self,
        user_id: int | None,
        action: str,
        details: str | None = None,
        *,
        actor: str | None = None,
        timestamp: datetime | None = None,
    ) -> LogEntry:
        """Build and append an entry; timestamp defaults to now."""
        fields = {
            "user_id": user_id,
            "action": action,
            "details": details,
            "actor": actor,
        }
        if timestamp is not None:
            fields["timestamp"] = timestamp
        return await self.append(LogEntry(**fields))

    async def entries_for(self, user_id: int) -> list[LogEntry]:
        """All entries about a user, newest first."""
        entries = await self._entries.list_all()
        return newest_first([e for e in entries if e.user_id == user_id])

    async def entry_by_id(self, log_id: int | None) -> LogEntry:
        """Get a single entry.

        Raises:
            InvalidArgumentError: If log_id is missing or not positive
            NotFoundError: If no entry has that identity
        """
        if log_id is None or log_id <= 0:
            raise InvalidArgumentError(f"log entry identity must be positive, got {log_id!r}")
        entry = await self._entries.get(log_id)
        if entry is None:
            raise NotFoundError("LogEntry", log_id)
        return entry

    async def all_entries(self) -> list[LogEntry]:
        """Every entry, newest first."""
        return newest_first(await self._entries.list_all())
