"""Configuration loading.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from usermanagement.config import get_settings

    settings = get_settings()
    seed = settings.storage.seed_users
"""

from functools import lru_cache

from usermanagement.config.loader import load_config
from usermanagement.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The TOML files are read once and the result is cached for the
    lifetime of the process. Call `reload_settings()` (or
    `get_settings.cache_clear()`) to pick up changed files.

    Returns:
        Settings instance with all configuration loaded and validated
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
