"""permalert TUI Dialogs Package.

Contains the dialog screens used to present permission alerts.
"""

from .base import BaseDialog
from .permission_alert import PermissionAlertScreen, action_button_id

__all__ = [
    "BaseDialog",
    "PermissionAlertScreen",
    "action_button_id",
]
