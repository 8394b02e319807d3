"""Application configuration using Pydantic V2 models and Settings."""

from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from public_api.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidConfigurationError,
)
from public_api.core.settings import BaseServerConfig, NullableStr

logger = structlog.get_logger()


class Configuration(BaseModel):
    """Public API configuration file contents.

    ``service_url`` is always written as ``gitpodServiceUrl``; ``server`` is
    left out of the encoded output when unset.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    service_url: NullableStr = Field(
        default="",
        alias="gitpodServiceUrl",
        description="URL of the Gitpod server API",
    )
    server: BaseServerConfig | None = Field(
        default=None,
        description="Base server settings, defaults apply when absent",
    )

    def to_dict(self) -> dict[str, Any]:
        """Encode to a JSON-compatible dict using the file key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        """Encode to JSON text using the file key names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Configuration":
        """Decode from JSON text."""
        return cls.model_validate_json(data)


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path = Field(
        default=Path("config.json"),
        description="Path to the JSON configuration file",
    )
    app_name: str = Field(
        default="public-api",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Debug mode",
    )


def load_configuration(path: str | Path) -> Configuration:
    """Read and decode a JSON configuration file."""
    config_path = Path(path)
    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise ConfigFileNotFoundError(str(config_path)) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration from {config_path}: {e}",
            code="CONFIG_FILE_UNREADABLE",
        ) from e

    try:
        config = Configuration.from_json(raw)
    except (ValidationError, UnicodeDecodeError) as e:
        raise InvalidConfigurationError(
            f"Failed to decode configuration from {config_path}: {e}"
        ) from e

    logger.info(
        "Loaded configuration",
        path=str(config_path),
        gitpod_service_url=config.service_url,
        has_server=config.server is not None,
    )
    return config


# Global settings instance
settings = Settings()
