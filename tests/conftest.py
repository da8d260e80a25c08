"""Shared test fixtures for the user management test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from usermanagement.storage import SEED_USERS, InMemoryEntityStore
from usermanagement.users import UserDirectory


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "production.toml": "app_name = 'prod'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from usermanagement.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def empty_store() -> InMemoryEntityStore:
    """A store with no records."""
    return InMemoryEntityStore()


@pytest.fixture
def seeded_store() -> InMemoryEntityStore:
    """A store pre-populated with the fixture users 1..11."""
    store = InMemoryEntityStore()
    store.users.seed(SEED_USERS)
    return store


@pytest.fixture
def directory(seeded_store: InMemoryEntityStore) -> UserDirectory:
    """A directory over the seeded store."""
    return UserDirectory(seeded_store)


@pytest.fixture
def empty_directory(empty_store: InMemoryEntityStore) -> UserDirectory:
    """A directory over an empty store."""
    return UserDirectory(empty_store)
