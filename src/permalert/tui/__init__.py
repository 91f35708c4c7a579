"""permalert TUI - Textual host for permission alerts.

Features:
- Modal permission alert screens with a preferred action
- Textual-backed host (UI scheduling, focus events, URL opening)
- Demo application driving a simulated permission
"""

from .app import PermissionDemoApp, launch
from .dialogs import BaseDialog, PermissionAlertScreen
from .host import TextualHost

__all__ = [
    "PermissionDemoApp",
    "launch",
    "BaseDialog",
    "PermissionAlertScreen",
    "TextualHost",
]
