"""Host environment interface consumed by the alert core.

The core never reaches for process-wide application state. Everything it
needs from the running application (display name, settings URL, the UI
scheduler, dialog display and the "became active" event) comes through an
``AlertHost`` handed to it at construction.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Optional, Protocol, TYPE_CHECKING

from permalert.utils.logging import get_logger

if TYPE_CHECKING:
    from permalert.alerts.builder import AlertDialog

log = get_logger(__name__)

ActivationCallback = Callable[[], None]


class Subscription:
    """Handle for one registered activation callback.

    ``unsubscribe`` is idempotent.
    """

    def __init__(self, bus: "ActivationBus", token: int):
        self._bus = bus
        self._token = token
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        self._bus._remove(self._token)


class ActivationBus:
    """Callback registry for the "application became active" event."""

    def __init__(self) -> None:
        self._subscribers: Dict[int, ActivationCallback] = {}
        self._next_token = 0
        self._lock = threading.Lock()

    def subscribe(self, callback: ActivationCallback) -> Subscription:
        """Register ``callback`` and return its unsubscribe handle."""
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._subscribers[token] = callback
        return Subscription(self, token)

    def _remove(self, token: int) -> None:
        with self._lock:
            self._subscribers.pop(token, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self) -> None:
        """Invoke every callback registered at the time of the call."""
        with self._lock:
            callbacks = list(self._subscribers.values())
        for callback in callbacks:
            try:
                callback()
            except Exception:
                log.exception("activation_callback_failed", callback=callback)


class AlertHost(Protocol):
    """What the alert core needs from the host application."""

    @property
    def app_name(self) -> str:
        ...

    def settings_url(self) -> Optional[str]:
        """URL of this application's settings page, if there is one."""
        ...

    def open_url(self, url: str) -> bool:
        """Open ``url`` and report whether it succeeded."""
        ...

    def subscribe_became_active(self, callback: ActivationCallback) -> Subscription:
        ...

    def schedule(self, task: Callable[[], None]) -> None:
        """Run ``task`` later on the UI thread, in call order."""
        ...

    def show(self, dialog: "AlertDialog") -> None:
        ...

    def notify(self, message: str, severity: str = "information") -> None:
        ...
