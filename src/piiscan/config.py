"""
Configuration management for piiscan.

Configuration is loaded from:
1. Environment variables (highest priority), e.g. ``PIISCAN_DETECTION__MIN_SCORE=0.8``
2. piiscan.yaml or config/piiscan.yaml
3. Default values (lowest priority)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .core.constants import CONFIG_FILENAMES, DEFAULT_SCAN_WORKERS, ENV_PREFIX
from .core.detectors.config import DetectionConfig
from .core.types import parse_entity_type
from .exceptions import ConfigurationError


class DetectionSettings(BaseModel):
    """Scan engine configuration."""

    entity_types: list[str] | None = None
    exclude_types: list[str] = Field(default_factory=list)
    min_score: float = Field(default=0.0, ge=0.0, le=1.0)
    max_workers: int = Field(default=DEFAULT_SCAN_WORKERS, ge=1)
    parallel: bool = True
    catalog_file: str | None = None

    @field_validator("entity_types", "exclude_types", mode="before")
    @classmethod
    def split_type_list(cls, v: object) -> object:
        """Accept comma-separated strings from environment variables."""
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("entity_types", "exclude_types")
    @classmethod
    def check_type_names(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        return [parse_entity_type(name).value for name in v]

    def to_detection_config(self) -> DetectionConfig:
        """Build the engine's DetectionConfig from these settings."""
        return DetectionConfig(
            entity_types=frozenset(self.entity_types) if self.entity_types is not None else None,
            exclude_types=frozenset(self.exclude_types),
            min_score=self.min_score,
            max_workers=self.max_workers,
            parallel=self.parallel,
        )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    json_format: bool = False
    file: str | None = None


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    detection: DetectionSettings = Field(default_factory=DetectionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML values arrive as init kwargs; environment overrides them
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_yaml_config(path: Path | None = None) -> dict:
    """Load configuration from YAML file.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    if path is None:
        for candidate in (Path(name) for name in CONFIG_FILENAMES):
            if candidate.exists():
                path = candidate
                break

    if not path or not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}", details={"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping", details={"path": str(path)})
    return data


def load_settings(path: Path | None = None) -> Settings:
    """Build Settings from a YAML file merged with the environment.

    Raises:
        ConfigurationError: If a value fails validation
    """
    yaml_config = load_yaml_config(path)
    try:
        return Settings(**yaml_config)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()


def reload_settings() -> Settings:
    """Force reload of settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
