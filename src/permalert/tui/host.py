"""Textual implementation of the alert host.

Dialogs are pushed as modal screens, scheduling goes through the app's
message queue, and the "became active" event is driven by the app's
``AppFocus`` handler calling ``app_became_active``.
"""

from __future__ import annotations

import webbrowser
from typing import Callable, Optional

from textual.app import App

from ..alerts.builder import AlertDialog
from ..config.settings import AlertSettings
from ..host import ActivationBus, ActivationCallback, Subscription
from ..utils.logging import get_logger
from .dialogs import PermissionAlertScreen

log = get_logger(__name__)

UrlOpener = Callable[[str], bool]


def _browser_open(url: str) -> bool:
    try:
        return webbrowser.open(url)
    except webbrowser.Error as e:
        log.warning("url_open_error", url=url, error=str(e))
        return False


class TextualHost:
    """``AlertHost`` backed by a running Textual app.

    Args:
        app: The Textual application that displays alerts
        settings: Alert settings (app name, settings URL)
        opener: Opens a URL and reports success; defaults to the system
            browser opener
    """

    def __init__(
        self,
        app: App,
        settings: Optional[AlertSettings] = None,
        opener: Optional[UrlOpener] = None,
    ):
        self.app = app
        self.settings = settings or AlertSettings()
        self.opener = opener or _browser_open
        self.bus = ActivationBus()

    @property
    def app_name(self) -> str:
        return self.settings.app_name

    def settings_url(self) -> Optional[str]:
        return self.settings.settings_url

    def open_url(self, url: str) -> bool:
        return bool(self.opener(url))

    def subscribe_became_active(self, callback: ActivationCallback) -> Subscription:
        return self.bus.subscribe(callback)

    def app_became_active(self) -> None:
        """Forward an ``AppFocus`` event to activation subscribers."""
        log.debug("app_became_active", subscribers=self.bus.subscriber_count)
        self.bus.emit()

    def schedule(self, task: Callable[[], None]) -> None:
        # call_later posts a Callback message, which is safe from any thread
        # and keeps FIFO order with other scheduled tasks.
        self.app.call_later(task)

    def show(self, dialog: AlertDialog) -> None:
        self.app.push_screen(PermissionAlertScreen(dialog))

    def notify(self, message: str, severity: str = "information") -> None:
        self.app.notify(message, severity=severity)
