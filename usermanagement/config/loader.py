"""TOML configuration loader.

Configuration files live in a single directory:

    config/default.toml          base values (required)
    config/{environment}.toml    per-environment overrides (optional)

Files are folded together with a recursive merge, later files winning.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "USERMANAGEMENT_CONFIG_DIR"
ENVIRONMENT_ENV = "USERMANAGEMENT_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_FILE = "default.toml"

# How many parent directories to search for config/default.toml
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the configuration directory.

    USERMANAGEMENT_CONFIG_DIR wins when set. Otherwise the current
    directory and its parents are searched for a config/ directory that
    holds a default.toml.

    Returns:
        Path to the configuration directory (``config`` relative to the
        working directory when nothing was found)

    Raises:
        FileNotFoundError: If USERMANAGEMENT_CONFIG_DIR points nowhere
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    start = Path.cwd()
    for candidate in [start, *start.parents][:SEARCH_DEPTH]:
        if (candidate / "config" / DEFAULT_FILE).is_file():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    """Name of the active environment (USERMANAGEMENT_ENV, default 'development')."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {file_path}") from None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base.

    Tables present on both sides are merged key by key; anything else
    in override replaces the base value. Neither input is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_files(config_dir: Path, environment: str) -> list[Path]:
    """Files to load for an environment, in merge order.

    Args:
        config_dir: Directory holding the TOML files
        environment: Environment name selecting the override file

    Returns:
        default.toml followed by {environment}.toml when it exists

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    default_path = config_dir / DEFAULT_FILE
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/{DEFAULT_FILE} or set {CONFIG_DIR_ENV}."
        )
    files = [default_path]
    env_path = config_dir / f"{environment}.toml"
    if env_path.is_file():
        files.append(env_path)
    return files


def load_config() -> dict[str, Any]:
    """Load and merge the configuration for the active environment."""
    config: dict[str, Any] = {}
    for path in config_files(get_config_dir(), get_environment()):
        config = deep_merge(config, load_toml(path))
    return config
