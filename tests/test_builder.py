"""Tests for the dialog builder."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from permalert.alerts import (
    ActionRole,
    AlertContent,
    AlertHandlers,
    AlertVariant,
    DeniedAlert,
    DisabledAlert,
    PrePermissionAlert,
    build_dialog,
)
from permalert.permissions import PermissionType


def _content() -> AlertContent:
    return AlertContent(
        title="Title",
        message="Message",
        cancel_label="Cancel",
        primary_label="Primary",
    )


def _handlers() -> AlertHandlers:
    return AlertHandlers(cancel=MagicMock(), settings=MagicMock(), confirm=MagicMock())


class TestActionSets:

    def test_disabled_has_only_cancel(self):
        dialog = build_dialog(AlertVariant.DISABLED, _content(), _handlers())
        assert len(dialog.actions) == 1
        assert dialog.actions[0].role is ActionRole.CANCEL
        assert dialog.preferred_action is None

    @pytest.mark.parametrize("variant", [AlertVariant.DENIED, AlertVariant.PRE_PERMISSION])
    def test_secondary_action_is_second_and_preferred(self, variant):
        dialog = build_dialog(variant, _content(), _handlers())
        assert len(dialog.actions) == 2
        cancel, secondary = dialog.actions
        assert cancel.role is ActionRole.CANCEL
        assert not cancel.preferred
        assert secondary.role is ActionRole.DEFAULT
        assert secondary.preferred
        assert dialog.preferred_action is secondary
        assert secondary.label == "Primary"

    def test_denied_wires_settings_handler(self):
        handlers = _handlers()
        dialog = build_dialog(AlertVariant.DENIED, _content(), handlers)
        assert dialog.actions[1].handler is handlers.settings
        assert dialog.cancel_action.handler is handlers.cancel

    def test_pre_permission_wires_confirm_handler(self):
        handlers = _handlers()
        dialog = build_dialog(AlertVariant.PRE_PERMISSION, _content(), handlers)
        assert dialog.actions[1].handler is handlers.confirm

    def test_missing_secondary_handler_is_rejected(self):
        with pytest.raises(ValueError):
            build_dialog(AlertVariant.DENIED, _content(), AlertHandlers(cancel=MagicMock()))


class TestBuildIsSideEffectFree:

    def test_no_handler_runs_and_nothing_is_shown(self):
        handlers = _handlers()
        build_dialog(AlertVariant.DENIED, _content(), handlers)
        handlers.cancel.assert_not_called()
        handlers.settings.assert_not_called()

    def test_alert_build_does_not_touch_host(self, host, make_permission, callback):
        DeniedAlert(make_permission(), host).build()
        assert host.shown == []
        assert host.scheduled == []
        assert host.opened == []
        callback.assert_not_called()


class TestAlertDialogs:
    """Dialogs built from real alerts, across all permission types."""

    @pytest.mark.parametrize("alert_class", [DisabledAlert, DeniedAlert, PrePermissionAlert])
    @pytest.mark.parametrize("permission_type", list(PermissionType) + ["custom"])
    def test_title_and_cancel_label_non_empty(self, alert_class, permission_type, host, make_permission):
        dialog = alert_class(make_permission(type=permission_type), host).build()
        assert dialog.title
        assert dialog.cancel_action.label

    def test_disabled_contacts_single_ok(self, host, make_permission):
        dialog = DisabledAlert(make_permission(PermissionType.CONTACTS), host).build()
        assert [a.label for a in dialog.actions] == ["OK"]
        assert dialog.variant is AlertVariant.DISABLED

    def test_denied_notifications_actions(self, host, make_permission):
        dialog = DeniedAlert(make_permission(PermissionType.NOTIFICATIONS), host).build()
        assert [a.label for a in dialog.actions] == ["Cancel", "Settings"]
