"""Shared fakes and fixtures for permalert tests."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest

from permalert.host import ActivationBus, ActivationCallback, Subscription
from permalert.permissions import (
    Permission,
    PermissionCallback,
    PermissionStatus,
    PermissionType,
    TypeTag,
)


# ── helpers ───────────────────────────────────────────────────────────

class FakeHost:
    """In-memory ``AlertHost`` that records everything the core asks of it.

    Scheduled tasks queue up until ``run_scheduled`` is called, standing in
    for the UI thread's message loop.
    """

    def __init__(
        self,
        app_name: str = "Widr",
        settings_url: Optional[str] = "app-settings:",
        open_result: bool = True,
    ):
        self._app_name = app_name
        self._settings_url = settings_url
        self.open_result = open_result
        self.bus = ActivationBus()
        self.scheduled: List[Callable[[], None]] = []
        self.shown: list = []
        self.opened: List[str] = []
        self.notifications: List[Tuple[str, str]] = []

    @property
    def app_name(self) -> str:
        return self._app_name

    def settings_url(self) -> Optional[str]:
        return self._settings_url

    def open_url(self, url: str) -> bool:
        self.opened.append(url)
        return self.open_result

    def subscribe_became_active(self, callback: ActivationCallback) -> Subscription:
        return self.bus.subscribe(callback)

    def schedule(self, task: Callable[[], None]) -> None:
        self.scheduled.append(task)

    def run_scheduled(self) -> None:
        while self.scheduled:
            self.scheduled.pop(0)()

    def show(self, dialog) -> None:
        self.shown.append(dialog)

    def notify(self, message: str, severity: str = "information") -> None:
        self.notifications.append((message, severity))

    def become_active(self) -> None:
        self.bus.emit()


class RecordingPermission(Permission):
    """Permission whose authorization requests are recorded, not answered."""

    def __init__(
        self,
        type: TypeTag = PermissionType.CONTACTS,
        status: PermissionStatus = PermissionStatus.DENIED,
        callback: Optional[PermissionCallback] = None,
    ):
        super().__init__(type, callback)
        self._status = status
        self.requests: List[Optional[PermissionCallback]] = []

    @property
    def status(self) -> PermissionStatus:
        return self._status

    @status.setter
    def status(self, value: PermissionStatus) -> None:
        self._status = value

    def request_authorization(self, callback: Optional[PermissionCallback]) -> None:
        self.requests.append(callback)


# ── fixtures ──────────────────────────────────────────────────────────

@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def callback() -> MagicMock:
    return MagicMock(name="permission_callback")


@pytest.fixture()
def make_permission(callback: MagicMock):
    """Factory for a ``RecordingPermission`` wired to the ``callback`` mock."""

    def _make(
        type: TypeTag = PermissionType.CONTACTS,
        status: PermissionStatus = PermissionStatus.DENIED,
    ) -> RecordingPermission:
        return RecordingPermission(type=type, status=status, callback=callback)

    return _make


@pytest.fixture()
def make_host():
    """Factory for a ``FakeHost`` with custom settings URL behaviour."""
    return FakeHost
