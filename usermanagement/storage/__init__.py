"""Generic entity persistence.

One EntityStore serves every entity kind through a uniform
list_all/add/update/remove interface backed by a Repository per kind.
"""

from usermanagement.storage.factory import create_entity_store
from usermanagement.storage.seed import SEED_USERS
from usermanagement.storage.store import EntityStore, Repository
from usermanagement.storage.stores import InMemoryEntityStore, InMemoryRepository

__all__ = [
    "EntityStore",
    "InMemoryEntityStore",
    "InMemoryRepository",
    "Repository",
    "SEED_USERS",
    "create_entity_store",
]
