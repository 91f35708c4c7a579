"""Permission alert demo application.

A small Textual app that hosts permission alerts for a simulated permission.
Terminals without focus reporting never send ``AppFocus``; press ``f`` to
simulate the return from the settings page.
"""

from typing import List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from ..alerts import DeniedAlert, DisabledAlert, PermissionAlert, PrePermissionAlert
from ..config.settings import Settings
from ..localization import Localizer, StringTable
from ..permissions import PermissionStatus, PermissionType, SimulatedPermission, type_name
from ..utils.logging import get_logger
from .. import workflow
from .host import TextualHost, UrlOpener

log = get_logger(__name__)

_STATUS_CYCLE: List[PermissionStatus] = list(PermissionStatus)


class PermissionDemoApp(App):
    """Demo host for permission alerts."""

    TITLE = "permalert"
    SUB_TITLE = "Permission alerts"

    CSS = """
    #status-panel {
        padding: 1 2;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("r", "request", "Request", show=True),
        Binding("p", "pre_permission", "Pre-permission", show=True),
        Binding("d", "denied", "Denied", show=True),
        Binding("x", "disabled", "Disabled", show=True),
        Binding("s", "cycle_status", "Cycle status", show=True),
        Binding("f", "simulate_foreground", "Foreground", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        permission: SimulatedPermission,
        settings: Optional[Settings] = None,
        localizer: Optional[Localizer] = None,
        opener: Optional[UrlOpener] = None,
    ):
        """Initialize the demo app.

        Args:
            permission: Permission the alerts are about
            settings: Application settings
            localizer: String lookup; built from settings when omitted
            opener: URL opener passed to the host
        """
        super().__init__()
        self.app_settings = settings or Settings()
        self.permission = permission
        self.localizer = localizer or StringTable.from_settings(self.app_settings.alerts)
        self.host = TextualHost(self, self.app_settings.alerts, opener=opener)
        self.callback_history: List[PermissionStatus] = []
        self._status_panel = Static(self._status_line(), id="status-panel")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield self._status_panel
        yield Footer()

    def _status_line(self) -> str:
        last = self.callback_history[-1].value if self.callback_history else "-"
        return (
            f"Permission: {type_name(self.permission.type)}\n"
            f"Status: {self.permission.status.value}\n"
            f"Last callback: {last} ({len(self.callback_history)} total)"
        )

    def _refresh_status(self) -> None:
        self._status_panel.update(self._status_line())

    def handle_permission_result(self, status: PermissionStatus) -> None:
        """Callback installed on the permission."""
        self.callback_history.append(status)
        log.info("permission_callback", permission=type_name(self.permission.type), status=status)
        self.notify(f"Permission callback: {status.value}")
        self._refresh_status()

    def on_app_focus(self, event: events.AppFocus) -> None:
        self.host.app_became_active()

    def _present(self, alert_class: type) -> PermissionAlert:
        self.permission.callback = self.handle_permission_result
        alert = alert_class(self.permission, self.host, self.localizer)
        alert.present()
        return alert

    def action_request(self) -> None:
        """Run the full request flow for the current status."""
        workflow.request(
            self.permission,
            self.host,
            self.handle_permission_result,
            settings=self.app_settings.alerts,
            localizer=self.localizer,
        )

    def action_pre_permission(self) -> None:
        self._present(PrePermissionAlert)

    def action_denied(self) -> None:
        self._present(DeniedAlert)

    def action_disabled(self) -> None:
        self._present(DisabledAlert)

    def action_cycle_status(self) -> None:
        index = _STATUS_CYCLE.index(self.permission.status)
        self.permission.status = _STATUS_CYCLE[(index + 1) % len(_STATUS_CYCLE)]
        self._refresh_status()

    def action_simulate_foreground(self) -> None:
        self.post_message(events.AppFocus())


def launch(permission: SimulatedPermission, settings: Optional[Settings] = None) -> None:
    """Launch the demo app.

    Args:
        permission: Simulated permission to drive the alerts
        settings: Application settings
    """
    app = PermissionDemoApp(permission, settings=settings)
    app.run()


if __name__ == "__main__":
    launch(SimulatedPermission(PermissionType.CONTACTS, PermissionStatus.DENIED))
