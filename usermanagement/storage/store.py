"""Repository and EntityStore abstract interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar, cast

from usermanagement.errors import InvalidArgumentError
from usermanagement.models import Entity, LogEntry, User

T = TypeVar("T", bound=Entity)


class Repository(ABC, Generic[T]):
    """Abstract interface for CRUD over one entity kind.

    Records are keyed by a per-kind integer identity assigned on insert.
    Every operation is immediately visible to subsequent calls.
    """

    kind: type[T]

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Return a snapshot of every record of this kind."""
        pass

    @abstractmethod
    async def get(self, entity_id: int) -> T | None:
        """Get a record by identity."""
        pass

    @abstractmethod
    async def add(self, record: T) -> T:
        """Insert a record, returning a copy carrying the assigned identity."""
        pass

    @abstractmethod
    async def update(self, record: T) -> T:
        """Replace the stored record matching record.id."""
        pass

    @abstractmethod
    async def remove(self, record: T) -> None:
        """Delete the record matching record.id."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of records of this kind."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every record without resetting identity assignment."""
        pass

    @abstractmethod
    def seed(self, records: Iterable[T]) -> None:
        """Load fixture records that already carry their identities."""
        pass


class EntityStore(ABC):
    """A single store exposing one repository per entity kind.

    The uniform list_all/add/update/remove operations dispatch to the
    repository registered for the record's kind.
    """

    @property
    @abstractmethod
    def users(self) -> Repository[User]:
        pass

    @property
    @abstractmethod
    def log_entries(self) -> Repository[LogEntry]:
        pass

    def repositories(self) -> Sequence[Repository[Entity]]:
        return (
            cast(Repository[Entity], self.users),
            cast(Repository[Entity], self.log_entries),
        )

    def repository(self, kind: type[T]) -> Repository[T]:
        """Get the repository for an entity kind."""
        for repository in self.repositories():
            if repository.kind is kind:
                return cast(Repository[T], repository)
        raise InvalidArgumentError(f"No repository registered for {kind.__name__}")

    async def list_all(self, kind: type[T]) -> list[T]:
        return await self.repository(kind).list_all()

    async def add(self, record: T) -> T:
        if record is None:
            raise InvalidArgumentError("record must not be None")
        return await self.repository(type(record)).add(record)

    async def update(self, record: T) -> T:
        if record is None:
            raise InvalidArgumentError("record must not be None")
        return await self.repository(type(record)).update(record)

    async def remove(self, record: T) -> None:
        if record is None:
            raise InvalidArgumentError("record must not be None")
        await self.repository(type(record)).remove(record)
