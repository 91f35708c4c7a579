"""Presenter: defers alert display onto the host's UI scheduler."""

from __future__ import annotations

from typing import TYPE_CHECKING

from permalert.permissions import type_name
from permalert.utils.logging import get_logger

if TYPE_CHECKING:
    from permalert.alerts.variants import PermissionAlert

log = get_logger(__name__)


def present(alert: "PermissionAlert") -> None:
    """Schedule ``alert`` for display and return immediately.

    Display tasks run in the order ``present`` was called. Presenting a
    second alert before the first is closed stacks the dialogs; avoiding
    that is up to the caller.
    """
    host = alert.host

    def show() -> None:
        dialog = alert.build()
        host.show(dialog)
        log.info(
            "alert_presented",
            variant=alert.variant,
            permission=type_name(alert.permission.type),
            actions=[action.label for action in dialog.actions],
        )

    host.schedule(show)
