"""Pydantic settings and the layered configuration service.

Precedence, lowest first: built-in defaults, user file, project file,
environment variables, explicit overrides.
"""

from __future__ import annotations

import copy
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Type

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from permalert.config.defaults import (
    DEFAULT_CONFIG,
    ENV_NESTED_DELIMITER,
    ENV_PREFIX,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_PATH,
)
from permalert.errors import ConfigurationError

_VERBOSITY_LEVELS = {"debug", "info", "warning", "error", "critical"}
_OUTPUT_FORMATS = {"text", "json"}


class GeneralSettings(BaseModel):
    """Logging and console output."""

    verbosity: str = "info"
    output_format: str = "text"
    color_enabled: bool = True

    @field_validator("verbosity")
    @classmethod
    def _check_verbosity(cls, value: str) -> str:
        value = value.lower()
        if value not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {sorted(_VERBOSITY_LEVELS)}")
        return value

    @field_validator("output_format")
    @classmethod
    def _check_output_format(cls, value: str) -> str:
        value = value.lower()
        if value not in _OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {sorted(_OUTPUT_FORMATS)}")
        return value


class AlertSettings(BaseModel):
    """Alert content and which statuses get an alert."""

    app_name: str = Field(default="This app", min_length=1)
    locale: str = "en"
    settings_url: Optional[str] = None
    strings_file: Optional[Path] = None
    present_pre_permission_alert: bool = True
    present_denied_alert: bool = True
    present_disabled_alert: bool = True


class Settings(BaseSettings):
    """Top-level settings.

    Keyword arguments carry the merged config files. Environment variables
    such as ``PERMALERT_ALERTS__APP_NAME`` take precedence over them.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
        extra="ignore",
    )

    general: GeneralSettings = Field(default_factory=GeneralSettings)
    alerts: AlertSettings = Field(default_factory=AlertSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping from ``path``.

    Raises:
        ConfigurationError: If the file is unreadable or not a mapping
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read config file: {e}", str(path)) from e
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping", str(path))
    return data


class ConfigService:
    """Loads and caches ``Settings`` from the configuration layers."""

    def __init__(
        self,
        user_config_path: Path = USER_CONFIG_PATH,
        project_dir: Optional[Path] = None,
    ):
        self.user_config_path = user_config_path
        self.project_dir = project_dir
        self._settings: Optional[Settings] = None
        self._lock = threading.Lock()

    @property
    def project_config_path(self) -> Path:
        return (self.project_dir or Path.cwd()) / PROJECT_CONFIG_FILENAME

    def load(self, overrides: Optional[Mapping[str, Any]] = None) -> Settings:
        """Build settings from every layer, bypassing the cache."""
        data: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        for path in (self.user_config_path, self.project_config_path):
            if path.is_file():
                data = _deep_merge(data, load_yaml_file(path))
        try:
            settings = Settings(**data)
            if overrides:
                settings = Settings.model_validate(
                    _deep_merge(settings.model_dump(), overrides)
                )
            return settings
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def get(self) -> Settings:
        with self._lock:
            if self._settings is None:
                self._settings = self.load()
            return self._settings

    def reload(self) -> Settings:
        with self._lock:
            self._settings = self.load()
            return self._settings


config_service = ConfigService()


def get_settings() -> Settings:
    """Return the cached process settings."""
    return config_service.get()


def reload_settings() -> Settings:
    """Reload settings from disk and environment."""
    return config_service.reload()
