"""Foreground-return bridge for denied alerts.

After the user picks "Settings" the permission status can only change while
they are away in the settings page, so the callback waits for the
application to become active again. The wait has no timeout and no
cancellation path.

State machine::

    IDLE --start()--> AWAITING_FOREGROUND --became active--> FINISHED
      ^                    |
      +-- open failed -----+
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from permalert.host import AlertHost, Subscription
from permalert.permissions import Permission, type_name
from permalert.utils.logging import get_logger

log = get_logger(__name__)


class BridgeState(Enum):
    IDLE = "idle"
    AWAITING_FOREGROUND = "awaiting_foreground"
    FINISHED = "finished"


class ForegroundReturnBridge:
    """One-shot wait for the app's next foreground transition.

    Args:
        permission: Permission whose callback fires on return
        host: Host providing the settings URL and activation events
    """

    def __init__(self, permission: Permission, host: AlertHost):
        self.permission = permission
        self.host = host
        self.state = BridgeState.IDLE
        self._subscription: Optional[Subscription] = None

    @property
    def observing(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def start(self) -> bool:
        """Open the settings page and wait for the app to come back.

        Returns:
            True if the bridge is now awaiting the foreground event
        """
        if self.state is not BridgeState.IDLE:
            log.warning(
                "settings_bridge_already_started",
                permission=type_name(self.permission.type),
                state=self.state,
            )
            return False

        url = self.host.settings_url()
        if not url:
            self._fail("no settings URL is configured")
            return False

        self._subscription = self.host.subscribe_became_active(self._on_became_active)
        self.state = BridgeState.AWAITING_FOREGROUND
        if not self.host.open_url(url):
            self._subscription.unsubscribe()
            self._subscription = None
            self.state = BridgeState.IDLE
            self._fail(f"could not open {url}")
            return False

        log.info(
            "settings_opened",
            permission=type_name(self.permission.type),
            url=url,
        )
        return True

    def _fail(self, reason: str) -> None:
        log.warning(
            "settings_open_failed",
            permission=type_name(self.permission.type),
            reason=reason,
        )
        self.host.notify(f"Unable to open Settings: {reason}", severity="warning")

    def _on_became_active(self) -> None:
        if self.state is not BridgeState.AWAITING_FOREGROUND:
            return
        # Unsubscribe before the callback so a re-entrant activation
        # cannot fire it twice.
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self.state = BridgeState.FINISHED

        status = self.permission.status
        log.info(
            "foreground_returned",
            permission=type_name(self.permission.type),
            status=status,
        )
        if self.permission.callback is not None:
            self.permission.callback(status)
