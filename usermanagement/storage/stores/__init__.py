"""Entity store backends."""

from usermanagement.storage.stores.inmemory import (
    InMemoryEntityStore,
    InMemoryRepository,
)

__all__ = [
    "InMemoryEntityStore",
    "InMemoryRepository",
]
