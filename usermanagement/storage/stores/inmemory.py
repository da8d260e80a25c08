"""In-memory implementation of EntityStore."""

import asyncio
from collections.abc import Iterable

from usermanagement.errors import InvalidArgumentError, NotFoundError
from usermanagement.models import LogEntry, User
from usermanagement.observability.logging import get_logger
from usermanagement.observability.metrics import STORE_OPERATIONS
from usermanagement.storage.store import EntityStore, Repository, T

logger = get_logger(__name__)


class InMemoryRepository(Repository[T]):
    """Dict-backed repository for a single entity kind.

    Records are copied on the way in and on the way out, so callers
    never hold a live reference into the store. Identities come from a
    monotonically increasing counter and are never reused.
    """

    def __init__(self, kind: type[T], lock: asyncio.Lock | None = None) -> None:
        self.kind = kind
        self._lock = lock or asyncio.Lock()
        self._records: dict[int, T] = {}
        self._next_id = 1

    @property
    def kind_name(self) -> str:
        return self.kind.__name__

    def _check_kind(self, record: T) -> None:
        if record is None:
            raise InvalidArgumentError("record must not be None")
        if not isinstance(record, self.kind):
            raise InvalidArgumentError(
                f"Expected {self.kind_name}, got {type(record).__name__}"
            )

    def _require_identity(self, record: T) -> int:
        self._check_kind(record)
        if record.id is None or record.id <= 0:
            raise InvalidArgumentError(
                f"{self.kind_name} identity must be a positive integer, got {record.id!r}"
            )
        return record.id

    def _track(self, operation: str) -> None:
        STORE_OPERATIONS.labels(kind=self.kind_name, operation=operation).inc()

    async def list_all(self) -> list[T]:
        async with self._lock:
            snapshot = [record.model_copy(deep=True) for record in self._records.values()]
        self._track("list_all")
        return snapshot

    async def get(self, entity_id: int) -> T | None:
        async with self._lock:
            record = self._records.get(entity_id)
            return record.model_copy(deep=True) if record is not None else None

    async def add(self, record: T) -> T:
        """Insert a copy of record under the next identity.

        Any identity the record already carries is replaced.
        """
        self._check_kind(record)
        async with self._lock:
            entity_id = self._next_id
            self._next_id += 1
            stored = record.model_copy(update={"id": entity_id}, deep=True)
            self._records[entity_id] = stored
        self._track("add")
        logger.debug("entity_added", kind=self.kind_name, entity_id=entity_id)
        return stored.model_copy(deep=True)

    async def update(self, record: T) -> T:
        entity_id = self._require_identity(record)
        async with self._lock:
            if entity_id not in self._records:
                raise NotFoundError(self.kind_name, entity_id)
            self._records[entity_id] = record.model_copy(deep=True)
        self._track("update")
        logger.debug("entity_updated", kind=self.kind_name, entity_id=entity_id)
        return record.model_copy(deep=True)

    async def remove(self, record: T) -> None:
        entity_id = self._require_identity(record)
        async with self._lock:
            if entity_id not in self._records:
                raise NotFoundError(self.kind_name, entity_id)
            del self._records[entity_id]
        self._track("remove")
        logger.debug("entity_removed", kind=self.kind_name, entity_id=entity_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._records)

    async def clear(self) -> None:
        async with self._lock:
            self._records.clear()
        self._track("clear")

    def seed(self, records: Iterable[T]) -> None:
        """Load fixture records before the store is shared.

        Not guarded by the lock; call it only during construction.
        """
        for record in records:
            entity_id = self._require_identity(record)
            self._records[entity_id] = record.model_copy(deep=True)
            self._next_id = max(self._next_id, entity_id + 1)


class InMemoryEntityStore(EntityStore):
    """Process-lifetime store for users and audit entries.

    All repositories share one lock, so every mutation (and every
    identity assignment) is serialized across entity kinds.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._users: InMemoryRepository[User] = InMemoryRepository(User, self._lock)
        self._log_entries: InMemoryRepository[LogEntry] = InMemoryRepository(
            LogEntry, self._lock
        )

    @property
    def users(self) -> InMemoryRepository[User]:
        return self._users

    @property
    def log_entries(self) -> InMemoryRepository[LogEntry]:
        return self._log_entries
