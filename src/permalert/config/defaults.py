"""Default configuration values and file locations."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

ENV_PREFIX = "PERMALERT_"
ENV_NESTED_DELIMITER = "__"

PROJECT_CONFIG_FILENAME = "permalert.yaml"
DEFAULT_CONFIG_RELATIVE_PATH = Path(".permalert") / "config.yaml"
USER_CONFIG_PATH = Path.home() / DEFAULT_CONFIG_RELATIVE_PATH

DEFAULT_CONFIG: Dict[str, Any] = {
    "general": {
        "verbosity": "info",
        "output_format": "text",
        "color_enabled": True,
    },
    "alerts": {
        "app_name": "This app",
        "locale": "en",
        "settings_url": None,
        "strings_file": None,
        "present_pre_permission_alert": True,
        "present_denied_alert": True,
        "present_disabled_alert": True,
    },
}
