"""Root settings model for user management configuration.

Settings combine three layers, highest priority first:

1. Keyword arguments passed to ``Settings(...)``
2. ``USERMANAGEMENT_*`` environment variables (``__`` separates nested
   keys, e.g. ``USERMANAGEMENT_STORAGE__SEED_USERS=false``)
3. The merged TOML files handed over with ``set_toml_config``

Anything not supplied falls back to the model defaults.
"""

from typing import Any

from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from usermanagement.config.models.observability import ObservabilityConfig
from usermanagement.config.models.storage import StorageConfig

# Merged TOML tables read by TomlConfigSettingsSource
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Replace the TOML values seen by subsequently built Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the merged TOML configuration.

    Only top-level keys that name a settings field are passed on;
    unknown tables in the TOML files are ignored.
    """

    def get_field_value(
        self, field: FieldInfo, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for name, field in self.settings_cls.model_fields.items():
            value, key, found = self.get_field_value(field, name)
            if found:
                values[key] = value
        return values


class Settings(BaseSettings):
    """Root configuration for the user directory.

    Attributes:
        app_name: Name bound into startup log events
        storage: Which entity store backend to build and whether to seed it
        observability: Logging and metrics settings
    """

    model_config = SettingsConfigDict(
        env_prefix="USERMANAGEMENT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="usermanagement", description="Application name for logging")
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Entity store configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging and metrics configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use constructor arguments, then env vars, then TOML; no dotenv or secrets dir."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
