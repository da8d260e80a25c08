"""EntityStore factory for creating backend instances.

This module provides a factory function to create the appropriate
EntityStore implementation based on configuration.
"""

from usermanagement.config.models.storage import StorageConfig
from usermanagement.observability.logging import get_logger
from usermanagement.observability.metrics import USER_COUNT
from usermanagement.storage.seed import SEED_USERS
from usermanagement.storage.store import EntityStore
from usermanagement.storage.stores.inmemory import InMemoryEntityStore

logger = get_logger(__name__)


def create_entity_store(config: StorageConfig) -> EntityStore:
    """Create an EntityStore instance based on configuration.

    Args:
        config: Storage configuration from settings

    Returns:
        Configured EntityStore instance, seeded with the fixture users
        when config.seed_users is set

    Raises:
        ValueError: If backend type is not supported
    """
    backend = config.backend

    if backend == "inmemory":
        store = InMemoryEntityStore()
        seeded = SEED_USERS if config.seed_users else []
        store.users.seed(seeded)
        USER_COUNT.set(len(seeded))
        logger.info("creating_entity_store", backend="inmemory", seeded_users=len(seeded))
        return store

    raise ValueError(f"Unsupported entity store backend: {backend}")
