"""Application wiring.

Builds a ready-to-use UserDirectory from settings: configures logging
and metrics, creates the entity store and hands it to the directory.
"""

from usermanagement.config import Settings, get_settings
from usermanagement.observability.logging import get_logger, setup_logging
from usermanagement.observability.metrics import setup_metrics
from usermanagement.storage.factory import create_entity_store
from usermanagement.users.service import UserDirectory

logger = get_logger(__name__)


def create_directory(settings: Settings | None = None) -> UserDirectory:
    """Create a UserDirectory backed by a freshly created store.

    Args:
        settings: Settings to use; loaded via get_settings() when omitted

    Returns:
        UserDirectory wired to its own EntityStore
    """
    settings = settings or get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )
    if settings.observability.metrics.enabled:
        setup_metrics()

    store = create_entity_store(settings.storage)
    logger.info(
        "directory_created",
        app_name=settings.app_name,
        backend=settings.storage.backend,
    )
    return UserDirectory(store)
