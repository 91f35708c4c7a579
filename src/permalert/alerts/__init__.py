"""Permission alerts.

Alert variants, their content tables, the dialog builder, the presenter and
the foreground-return bridge used by denied alerts.
"""

from .content import AlertContent, AlertVariant, content_for
from .builder import ActionRole, AlertAction, AlertDialog, AlertHandlers, build_dialog
from .bridge import BridgeState, ForegroundReturnBridge
from .variants import DeniedAlert, DisabledAlert, PermissionAlert, PrePermissionAlert
from .presenter import present

__all__ = [
    # Content
    "AlertContent",
    "AlertVariant",
    "content_for",
    # Builder
    "ActionRole",
    "AlertAction",
    "AlertDialog",
    "AlertHandlers",
    "build_dialog",
    # Bridge
    "BridgeState",
    "ForegroundReturnBridge",
    # Variants
    "PermissionAlert",
    "DisabledAlert",
    "DeniedAlert",
    "PrePermissionAlert",
    # Presenter
    "present",
]
