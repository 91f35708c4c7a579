"""Exception types for permalert.

Dialog and settings-navigation failures are never raised to the host
application; they are logged and surfaced through the host's notifications.
The exceptions here cover loading configuration and string tables.
"""

from __future__ import annotations


class PermalertError(Exception):
    """Base class for all permalert errors."""


class ConfigurationError(PermalertError):
    """A configuration file or value could not be loaded."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class StringTableError(PermalertError):
    """A strings file is unreadable or has the wrong shape."""
