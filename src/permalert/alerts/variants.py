"""Permission alerts: one class per permission-status scenario.

The caller picks the variant from the permission's current status. Each
alert fills its text from the content tables at construction; any field can
be overridden before ``present()``. One alert serves one present request.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from permalert.alerts import presenter
from permalert.alerts.bridge import ForegroundReturnBridge
from permalert.alerts.builder import AlertDialog, AlertHandlers, build_dialog
from permalert.alerts.content import AlertContent, AlertVariant, content_for
from permalert.host import AlertHost
from permalert.localization import Localizer, StringTable
from permalert.permissions import Permission, PermissionStatus, type_name
from permalert.utils.logging import get_logger

log = get_logger(__name__)


class PermissionAlert:
    """Base alert: title, message and a cancel action.

    Used directly only through ``DisabledAlert``; the other variants add a
    secondary action.

    Args:
        permission: Permission the alert is about (not owned)
        host: Host application services
        localizer: String lookup; defaults to the English table
    """

    variant: ClassVar[AlertVariant] = AlertVariant.DISABLED

    def __init__(
        self,
        permission: Permission,
        host: AlertHost,
        localizer: Optional[Localizer] = None,
    ):
        self.permission = permission
        self.host = host
        self.localizer = localizer or StringTable()
        self.content: AlertContent = content_for(
            self.variant, permission, host.app_name, self.localizer
        )
        self._responded = False

    # Display fields

    @property
    def title(self) -> Optional[str]:
        return self.content.title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        self.content.title = value

    @property
    def message(self) -> Optional[str]:
        return self.content.message

    @message.setter
    def message(self, value: Optional[str]) -> None:
        self.content.message = value

    @property
    def cancel_label(self) -> Optional[str]:
        return self.content.cancel_label

    @cancel_label.setter
    def cancel_label(self, value: Optional[str]) -> None:
        self.content.cancel_label = value

    @property
    def primary_label(self) -> Optional[str]:
        """Label of the secondary action ("Settings" or "Allow")."""
        return self.content.primary_label

    @primary_label.setter
    def primary_label(self, value: Optional[str]) -> None:
        self.content.primary_label = value

    @property
    def status(self) -> PermissionStatus:
        return self.permission.status

    # Building and presenting

    def handlers(self) -> AlertHandlers:
        return AlertHandlers(cancel=self.cancel_handler)

    def build(self) -> AlertDialog:
        """Build the dialog for this alert without displaying it."""
        return build_dialog(self.variant, self.content, self.handlers())

    def present(self) -> None:
        """Schedule the alert for display; the result arrives via the callback."""
        presenter.present(self)

    # Handlers

    def _claim_response(self, action: str) -> bool:
        if self._responded:
            log.warning(
                "alert_action_ignored",
                variant=self.variant,
                permission=type_name(self.permission.type),
                action=action,
            )
            return False
        self._responded = True
        return True

    def cancel_handler(self) -> None:
        """Report the status as it is now."""
        if not self._claim_response("cancel"):
            return
        status = self.permission.status
        log.info(
            "alert_cancelled",
            variant=self.variant,
            permission=type_name(self.permission.type),
            status=status,
        )
        if self.permission.callback is not None:
            self.permission.callback(status)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(permission={self.permission!r})"


class DisabledAlert(PermissionAlert):
    """The capability is turned off for the whole device."""

    variant = AlertVariant.DISABLED


class DeniedAlert(PermissionAlert):
    """The user declined access; offers a way to the settings page.

    The callback fires when the app returns to the foreground after the
    settings visit, not when the dialog closes.
    """

    variant = AlertVariant.DENIED

    def __init__(
        self,
        permission: Permission,
        host: AlertHost,
        localizer: Optional[Localizer] = None,
    ):
        super().__init__(permission, host, localizer)
        self.bridge = ForegroundReturnBridge(permission, host)

    @property
    def settings_label(self) -> Optional[str]:
        return self.primary_label

    @settings_label.setter
    def settings_label(self, value: Optional[str]) -> None:
        self.primary_label = value

    def handlers(self) -> AlertHandlers:
        return AlertHandlers(cancel=self.cancel_handler, settings=self.settings_handler)

    def settings_handler(self) -> None:
        if not self._claim_response("settings"):
            return
        self.bridge.start()


class PrePermissionAlert(PermissionAlert):
    """Primes the user before the real OS prompt."""

    variant = AlertVariant.PRE_PERMISSION

    @property
    def confirm_label(self) -> Optional[str]:
        return self.primary_label

    @confirm_label.setter
    def confirm_label(self, value: Optional[str]) -> None:
        self.primary_label = value

    def handlers(self) -> AlertHandlers:
        return AlertHandlers(cancel=self.cancel_handler, confirm=self.confirm_handler)

    def confirm_handler(self) -> None:
        """Hand over to the OS prompt with the permission's own callback."""
        if not self._claim_response("confirm"):
            return
        log.info("authorization_requested", permission=type_name(self.permission.type))
        self.permission.request_authorization(self.permission.callback)
