"""Logging setup and configuration using structlog."""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from permalert.config.settings import Settings

_LEVEL_MAP = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _json_default(obj: Any) -> Any:
    """Fallback for values json.dumps cannot encode: enums, paths, callables."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, set):
        return sorted(obj, key=str)
    if callable(obj):
        return getattr(obj, "__qualname__", repr(obj))
    return str(obj)


def _sanitize_event_dict(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace enum members with their values so both renderers agree."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in event_dict.items()
    }


def _resolve_level(level: str) -> int:
    return _LEVEL_MAP.get(level.lower(), logging.INFO)


def configure_logging(
    *,
    level: str = "info",
    output_format: str = "text",
    color: bool = True,
    log_file: Path | None = None,
) -> None:
    """Configure structlog + stdlib logging.

    Parameters
    ----------
    level: str
            Minimum level (debug, info, warning, error, critical).
    output_format: str
            "text" for console-friendly rendering, "json" for machine parsing.
    color: bool
            Enable colored console output when using text mode.
    log_file: Optional[Path]
            If provided, also write logs to this file.
    """

    log_level = _resolve_level(level)
    is_json = output_format.lower() == "json"

    if is_json:
        renderer = structlog.processors.JSONRenderer(
            serializer=json.dumps,
            default=_json_default,
            sort_keys=True,
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=color)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _sanitize_event_dict,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # A running Textual app owns stdout, so the TUI passes a log file and
    # keeps stderr for everything else.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]

    root = logging.getLogger()
    root.handlers = []
    root.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    # Silence verbose third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def configure_from_settings(
    settings: Settings, *, log_file: Path | None = None
) -> None:
    """Configure logging using Settings values."""

    configure_logging(
        level=settings.general.verbosity,
        output_format=settings.general.output_format,
        color=settings.general.color_enabled,
        log_file=log_file,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a configured structlog logger."""

    return structlog.get_logger(name) if name else structlog.get_logger()
