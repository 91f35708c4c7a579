"""Alert content model and the per-variant content tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from permalert.localization import Localizer
from permalert.permissions import Permission, PermissionType, type_name


class AlertVariant(Enum):
    """Permission-status scenario an alert is shown for."""

    DISABLED = "disabled"
    DENIED = "denied"
    PRE_PERMISSION = "pre_permission"


@dataclass
class AlertContent:
    """Text shown in a permission alert.

    ``primary_label`` is the one secondary action slot: it reads as
    "Settings" on denied alerts and as "Allow" on pre-permission alerts.
    Disabled alerts leave it unset.
    """

    title: Optional[str] = None
    message: Optional[str] = None
    cancel_label: Optional[str] = None
    primary_label: Optional[str] = None


# Types with their own copy; every other type uses the "default" branch.
_SPECIALIZED_TYPES: Dict[PermissionType, str] = {
    PermissionType.CONTACTS: "contacts",
    PermissionType.NOTIFICATIONS: "notifications",
}


def _branch(permission: Permission) -> str:
    if isinstance(permission.type, PermissionType):
        return _SPECIALIZED_TYPES.get(permission.type, "default")
    return "default"


def _disabled_content(permission: Permission, app: str, localizer: Localizer) -> AlertContent:
    branch = _branch(permission)
    params = {"app": app, "permission": type_name(permission.type)}
    return AlertContent(
        title=localizer.text(f"disabled.{branch}.title", **params),
        message=localizer.text(f"disabled.{branch}.message", **params),
        cancel_label=localizer.text("action.ok"),
    )


def _denied_content(permission: Permission, app: str, localizer: Localizer) -> AlertContent:
    branch = _branch(permission)
    params = {"app": app, "permission": type_name(permission.type)}
    return AlertContent(
        title=localizer.text(f"denied.{branch}.title", **params),
        message=localizer.text(f"denied.{branch}.message", **params),
        cancel_label=localizer.text("action.cancel"),
        primary_label=localizer.text("action.settings"),
    )


def _pre_permission_content(
    permission: Permission, app: str, localizer: Localizer
) -> AlertContent:
    params = {"app": app, "permission": type_name(permission.type)}
    # The OS prompt that follows carries the explanation.
    return AlertContent(
        title=localizer.text("pre_permission.default.title", **params),
        message=None,
        cancel_label=localizer.text("action.cancel"),
        primary_label=localizer.text("action.allow"),
    )


_CONTENT_TABLE: Dict[AlertVariant, Callable[[Permission, str, Localizer], AlertContent]] = {
    AlertVariant.DISABLED: _disabled_content,
    AlertVariant.DENIED: _denied_content,
    AlertVariant.PRE_PERMISSION: _pre_permission_content,
}


def content_for(
    variant: AlertVariant,
    permission: Permission,
    app_name: str,
    localizer: Localizer,
) -> AlertContent:
    """Return the localized content for ``variant`` and the permission's type.

    Args:
        variant: Alert scenario
        permission: Permission the alert is about
        app_name: Display name of the host application
        localizer: String lookup service

    Returns:
        Content with a non-empty title and cancel label
    """
    return _CONTENT_TABLE[variant](permission, app_name, localizer)
