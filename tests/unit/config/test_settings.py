"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from usermanagement.config import get_settings, reload_settings
from usermanagement.config.settings import Settings, set_toml_config


@pytest.fixture(autouse=True)
def reset_toml_config():
    """Keep TOML state from leaking between tests."""
    set_toml_config({})
    yield
    set_toml_config({})


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "usermanagement"
        assert settings.observability.logging.level == "INFO"

    def test_nested_defaults(self) -> None:
        """Nested configuration has defaults."""
        settings = Settings()
        assert settings.storage.backend == "inmemory"
        assert settings.storage.seed_users is True
        assert settings.observability.logging.format == "json"
        assert settings.observability.logging.redact_pii is True
        assert settings.observability.metrics.enabled is True

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """USERMANAGEMENT_* variables override nested values."""
        monkeypatch.setenv("USERMANAGEMENT_STORAGE__SEED_USERS", "false")
        settings = Settings()
        assert settings.storage.seed_users is False


    def test_toml_values_used(self) -> None:
        """TOML tables feed nested sections; unknown tables are ignored."""
        set_toml_config({
            "storage": {"seed_users": False},
            "observability": {"logging": {"level": "DEBUG"}},
            "legacy": {"debug": True},
        })
        settings = Settings()
        assert settings.storage.seed_users is False
        assert settings.observability.logging.level == "DEBUG"
        assert not hasattr(settings, "legacy")

    def test_init_beats_toml(self) -> None:
        """Constructor arguments take priority over TOML values."""
        set_toml_config({"app_name": "from-toml"})
        assert Settings(app_name="explicit").app_name == "explicit"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_toml(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """get_settings reads values from the TOML files."""
        mock_toml_files({
            "default.toml": "app_name = 'test'\n[storage]\nseed_users = false\n",
        })
        monkeypatch.setenv("USERMANAGEMENT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("USERMANAGEMENT_ENV", "nonexistent")

        settings = get_settings()

        assert isinstance(settings, Settings)
        assert settings.app_name == "test"
        assert settings.storage.seed_users is False

    def test_settings_cached(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """get_settings returns the cached instance; reload_settings refreshes it."""
        mock_toml_files({"default.toml": "app_name = 'first'"})
        monkeypatch.setenv("USERMANAGEMENT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("USERMANAGEMENT_ENV", "nonexistent")

        first = get_settings()
        assert get_settings() is first

        mock_toml_files({"default.toml": "app_name = 'second'"})
        reloaded = reload_settings()
        assert reloaded is not first
        assert reloaded.app_name == "second"
