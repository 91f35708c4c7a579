"""permalert - permission status alerts.

Modal dialogs that tell a user about the state of a device permission and
route their choice back into the permission's callback.
"""

from permalert.alerts import (
    AlertContent,
    AlertDialog,
    AlertVariant,
    DeniedAlert,
    DisabledAlert,
    PermissionAlert,
    PrePermissionAlert,
    build_dialog,
    present,
)
from permalert.host import ActivationBus, AlertHost, Subscription
from permalert.localization import Localizer, StringTable
from permalert.permissions import (
    Permission,
    PermissionStatus,
    PermissionType,
    SimulatedPermission,
)
from permalert.workflow import alert_for, request

__version__ = "0.1.0"

__all__ = [
    # Alerts
    "AlertContent",
    "AlertDialog",
    "AlertVariant",
    "PermissionAlert",
    "DisabledAlert",
    "DeniedAlert",
    "PrePermissionAlert",
    "build_dialog",
    "present",
    # Host
    "AlertHost",
    "ActivationBus",
    "Subscription",
    # Localization
    "Localizer",
    "StringTable",
    # Permissions
    "Permission",
    "PermissionStatus",
    "PermissionType",
    "SimulatedPermission",
    # Workflow
    "alert_for",
    "request",
]
