"""Alert dialog theme.

Colors used when rendering permission alerts with rich text.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class AlertTheme:
    """Palette for permission alert dialogs."""

    primary: str = "#FF00FF"          # Magenta
    fg_muted: str = "#B0B0B0"         # Message text

    warning: str = "#FFAA00"
    error: str = "#FF3333"
    info: str = "#00AAFF"

    def get_variant_color(self, variant: str) -> str:
        """Accent color for an alert variant value."""
        colors: Dict[str, str] = {
            "disabled": self.error,
            "denied": self.warning,
            "pre_permission": self.info,
        }
        return colors.get(variant, self.primary)


LIGHT_THEME = AlertTheme(
    primary="#AA00AA",
    fg_muted="#444444",
    warning="#CC8800",
    error="#AA2222",
    info="#0066CC",
)

_current_theme = AlertTheme()


def get_theme() -> AlertTheme:
    """Get the current theme instance."""
    return _current_theme


def set_theme(name: str) -> AlertTheme:
    """Switch between the dark and light themes by name."""
    global _current_theme
    _current_theme = LIGHT_THEME if name == "light" else AlertTheme()
    return _current_theme
