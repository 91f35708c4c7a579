"""Tests for deferred alert presentation."""

from __future__ import annotations

from permalert.alerts import DeniedAlert, DisabledAlert, PrePermissionAlert
from permalert.permissions import PermissionStatus, PermissionType


class TestPresent:

    def test_present_returns_before_display(self, host, make_permission):
        DisabledAlert(make_permission(), host).present()

        assert host.shown == []
        assert len(host.scheduled) == 1

    def test_scheduled_task_shows_built_dialog(self, host, make_permission):
        DeniedAlert(make_permission(PermissionType.NOTIFICATIONS), host).present()
        host.run_scheduled()

        assert len(host.shown) == 1
        assert [a.label for a in host.shown[0].actions] == ["Cancel", "Settings"]

    def test_display_order_follows_present_order(self, host, make_permission):
        first = DisabledAlert(make_permission(PermissionType.CONTACTS), host)
        second = PrePermissionAlert(make_permission(PermissionType.CAMERA), host)
        third = DeniedAlert(make_permission(PermissionType.PHOTOS), host)
        first.present()
        second.present()
        third.present()

        host.run_scheduled()

        assert [d.title for d in host.shown] == [first.title, second.title, third.title]

    def test_present_does_not_invoke_callback(self, host, make_permission, callback):
        DisabledAlert(make_permission(status=PermissionStatus.DISABLED), host).present()
        host.run_scheduled()
        callback.assert_not_called()

    def test_overrides_before_display_are_used(self, host, make_permission):
        alert = DisabledAlert(make_permission(), host)
        alert.present()
        alert.cancel_label = "Got it"
        host.run_scheduled()

        assert host.shown[0].actions[0].label == "Got it"
