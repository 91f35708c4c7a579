"""
Configuration module for permalert.

Layered configuration loading (overrides > env > project > user > defaults)
with pydantic validation.
"""

from permalert.config.defaults import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_RELATIVE_PATH,
    ENV_PREFIX,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_PATH,
)

from permalert.config.settings import (
    # Settings classes
    Settings,
    GeneralSettings,
    AlertSettings,
    # Config service
    ConfigService,
    config_service,
    # Convenience functions
    get_settings,
    reload_settings,
    load_yaml_file,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_RELATIVE_PATH",
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAME",
    "USER_CONFIG_PATH",
    "Settings",
    "GeneralSettings",
    "AlertSettings",
    "ConfigService",
    "config_service",
    "get_settings",
    "reload_settings",
    "load_yaml_file",
]
