"""Styles for permalert dialogs."""

from .theme import AlertTheme, LIGHT_THEME, get_theme, set_theme

__all__ = ["AlertTheme", "LIGHT_THEME", "get_theme", "set_theme"]
