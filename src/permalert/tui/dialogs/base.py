"""Base dialog class for permalert.

Provides the modal overlay and container styling shared by dialogs.
"""

from typing import Union

from rich.text import Text
from textual.screen import ModalScreen
from textual.containers import Vertical
from textual.widgets import Static


class BaseDialog(ModalScreen):
    """Base dialog with common styling and functionality.

    Subclasses get:
    - Modal overlay behavior
    - Escape bound to ``action_cancel``
    - Consistent container styling
    """

    DEFAULT_CSS = """
    BaseDialog {
        align: center middle;
    }

    BaseDialog > .dialog-container {
        padding: 1 2;
        border: thick $primary;
        background: $surface;
        height: auto;
        min-width: 50;
        max-width: 80;
    }

    BaseDialog > .dialog-container > .dialog-title {
        text-style: bold;
        color: $primary;
        text-align: center;
        margin-bottom: 1;
    }

    BaseDialog > .dialog-container > .dialog-content {
        margin: 1 0;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    # Override in subclasses
    DIALOG_TITLE = "Dialog"

    def dialog_title(self) -> Union[str, Text]:
        """Title shown at the top of the dialog."""
        return self.DIALOG_TITLE

    def compose(self):
        """Compose the dialog layout."""
        with Vertical(classes="dialog-container"):
            yield Static(self.dialog_title(), classes="dialog-title")
            yield from self.compose_content()

    def compose_content(self):
        """Compose the dialog content.

        Override in subclasses to provide dialog-specific content.
        """
        yield Vertical(classes="dialog-content")

    def action_cancel(self) -> None:
        """Close the dialog."""
        self.dismiss(None)
