"""Tests for application wiring."""

from pathlib import Path

import pytest
import structlog

from usermanagement.app import create_directory
from usermanagement.config import Settings
from usermanagement.config.models import ObservabilityConfig, StorageConfig
from usermanagement.users import UserDirectory


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestCreateDirectory:
    """Tests for create_directory."""

    @pytest.mark.asyncio
    async def test_seeded_directory(self) -> None:
        """Should build a directory over a seeded store."""
        directory = create_directory(Settings(storage=StorageConfig(seed_users=True)))

        assert isinstance(directory, UserDirectory)
        assert len(await directory.all_users()) == 11

    @pytest.mark.asyncio
    async def test_unseeded_directory(self) -> None:
        """Should honor seed_users = false."""
        settings = Settings(
            storage=StorageConfig(seed_users=False),
            observability=ObservabilityConfig.model_validate(
                {"logging": {"format": "console"}, "metrics": {"enabled": False}}
            ),
        )

        directory = create_directory(settings)

        assert await directory.all_users() == []

    @pytest.mark.asyncio
    async def test_loads_settings_when_omitted(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should fall back to get_settings()."""
        mock_toml_files({"default.toml": "[storage]\nseed_users = false\n"})
        monkeypatch.setenv("USERMANAGEMENT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("USERMANAGEMENT_ENV", "nonexistent")

        directory = create_directory()

        assert await directory.all_users() == []
