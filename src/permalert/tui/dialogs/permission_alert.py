"""Permission alert dialog for Textual apps.

Renders a built ``AlertDialog``: one button per action, the preferred
action focused so Enter triggers it, Escape mapped to the cancel action.
"""

from rich.text import Text
from textual.containers import Horizontal
from textual.widgets import Button, Static

from ...alerts.builder import AlertAction, AlertDialog
from ...utils.logging import get_logger
from ..styles.theme import get_theme
from .base import BaseDialog

log = get_logger(__name__)


def action_button_id(index: int) -> str:
    """DOM id of the button for the action at ``index``."""
    return f"alert-action-{index}"


class PermissionAlertScreen(BaseDialog):
    """Modal screen for a permission alert.

    The screen dismisses itself before running the chosen action's handler,
    and runs at most one handler.
    """

    # on_mount picks the focused button
    AUTO_FOCUS = None

    DEFAULT_CSS = """
    PermissionAlertScreen .dialog-message {
        margin: 1 0;
        text-align: center;
    }

    PermissionAlertScreen .buttons {
        layout: horizontal;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    PermissionAlertScreen .btn {
        margin: 0 1;
        min-width: 12;
    }
    """

    def __init__(self, dialog: AlertDialog, **kwargs):
        """Initialize the alert screen.

        Args:
            dialog: Built dialog model to render
        """
        super().__init__(**kwargs)
        self.dialog = dialog
        self._handled = False

    def dialog_title(self) -> Text:
        theme = get_theme()
        variant = self.dialog.variant.value if self.dialog.variant else ""
        return Text(self.dialog.title or "", style=f"bold {theme.get_variant_color(variant)}")

    def compose_content(self):
        if self.dialog.message:
            yield Static(self._render_message(self.dialog.message), classes="dialog-message")

        with Horizontal(classes="buttons"):
            for index, action in enumerate(self.dialog.actions):
                yield Button(
                    action.label or "",
                    id=action_button_id(index),
                    classes="btn",
                    variant="primary" if action.preferred else "default",
                )

    def _render_message(self, message: str) -> Text:
        theme = get_theme()
        return Text(message, style=theme.fg_muted)

    def on_mount(self) -> None:
        """Focus the preferred action, falling back to the cancel action."""
        preferred = self.dialog.preferred_action or self.dialog.cancel_action
        index = self.dialog.actions.index(preferred)
        self.query_one(f"#{action_button_id(index)}", Button).focus()

    def run_action(self, action: AlertAction) -> None:
        """Dismiss the dialog, then run ``action``'s handler."""
        if self._handled:
            return
        self._handled = True
        self.dismiss(None)
        log.debug("alert_action_selected", label=action.label, role=action.role)
        action.handler()

    def action_cancel(self) -> None:
        """Escape runs the cancel action."""
        self.run_action(self.dialog.cancel_action)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        event.stop()
        for index, action in enumerate(self.dialog.actions):
            if event.button.id == action_button_id(index):
                self.run_action(action)
                return
