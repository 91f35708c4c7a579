"""Permission request flow.

Picks the alert for a permission's current status and falls back to the
plain authorization request or an immediate callback when no alert applies.
The alert core itself never makes this choice.
"""

from __future__ import annotations

from typing import Optional

from permalert.alerts import DeniedAlert, DisabledAlert, PermissionAlert, PrePermissionAlert
from permalert.config.settings import AlertSettings
from permalert.host import AlertHost
from permalert.localization import Localizer
from permalert.permissions import Permission, PermissionCallback, PermissionStatus, type_name
from permalert.utils.logging import get_logger

log = get_logger(__name__)


def alert_for(
    permission: Permission,
    host: AlertHost,
    settings: Optional[AlertSettings] = None,
    localizer: Optional[Localizer] = None,
) -> Optional[PermissionAlert]:
    """Return the alert for the permission's current status, if any.

    Args:
        permission: Permission to inspect
        host: Host application services
        settings: Which statuses get an alert; all of them by default
        localizer: String lookup passed to the alert

    Returns:
        A new alert, or None when the status needs no alert
    """
    settings = settings or AlertSettings()
    status = permission.status

    if status is PermissionStatus.NOT_DETERMINED and settings.present_pre_permission_alert:
        return PrePermissionAlert(permission, host, localizer)
    if status is PermissionStatus.DENIED and settings.present_denied_alert:
        return DeniedAlert(permission, host, localizer)
    if status is PermissionStatus.DISABLED and settings.present_disabled_alert:
        return DisabledAlert(permission, host, localizer)
    return None


def request(
    permission: Permission,
    host: AlertHost,
    callback: PermissionCallback,
    settings: Optional[AlertSettings] = None,
    localizer: Optional[Localizer] = None,
) -> Optional[PermissionAlert]:
    """Run one request: install ``callback`` and resolve it once.

    Returns:
        The alert that was presented, or None if the request resolved
        without one
    """
    permission.callback = callback
    status = permission.status
    log.debug("permission_requested", permission=type_name(permission.type), status=status)

    if status is PermissionStatus.AUTHORIZED:
        callback(status)
        return None

    alert = alert_for(permission, host, settings, localizer)
    if alert is not None:
        alert.present()
        return alert

    if status is PermissionStatus.NOT_DETERMINED:
        permission.request_authorization(callback)
    else:
        callback(status)
    return None
