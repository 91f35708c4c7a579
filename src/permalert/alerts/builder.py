"""Dialog builder: turns alert content into a presentable dialog model.

Building only wires handlers to actions; nothing is displayed here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from permalert.alerts.content import AlertContent, AlertVariant

ActionHandler = Callable[[], None]


class ActionRole(Enum):
    """How a dialog action is styled and triggered."""

    CANCEL = "cancel"
    DEFAULT = "default"


@dataclass
class AlertAction:
    """A button in an alert dialog."""

    label: Optional[str]
    role: ActionRole
    handler: ActionHandler
    preferred: bool = False


@dataclass
class AlertHandlers:
    """Handlers an alert exposes to the builder."""

    cancel: ActionHandler
    settings: Optional[ActionHandler] = None
    confirm: Optional[ActionHandler] = None


@dataclass
class AlertDialog:
    """Presentable dialog model."""

    title: Optional[str]
    message: Optional[str]
    actions: List[AlertAction] = field(default_factory=list)
    variant: Optional[AlertVariant] = None

    def add_action(self, action: AlertAction) -> None:
        self.actions.append(action)

    @property
    def cancel_action(self) -> AlertAction:
        for action in self.actions:
            if action.role is ActionRole.CANCEL:
                return action
        raise LookupError("dialog has no cancel action")

    @property
    def preferred_action(self) -> Optional[AlertAction]:
        for action in self.actions:
            if action.preferred:
                return action
        return None


def _secondary_handler(variant: AlertVariant, handlers: AlertHandlers) -> Optional[ActionHandler]:
    table: Dict[AlertVariant, Optional[ActionHandler]] = {
        AlertVariant.DISABLED: None,
        AlertVariant.DENIED: handlers.settings,
        AlertVariant.PRE_PERMISSION: handlers.confirm,
    }
    return table[variant]


def build_dialog(
    variant: AlertVariant,
    content: AlertContent,
    handlers: AlertHandlers,
) -> AlertDialog:
    """Build the dialog for ``variant``.

    The cancel action always comes first. Denied and pre-permission alerts
    get one more action, wired to the settings or confirm handler and
    marked preferred.

    Raises:
        ValueError: If the variant needs a secondary handler that is missing
    """
    dialog = AlertDialog(title=content.title, message=content.message, variant=variant)
    dialog.add_action(
        AlertAction(
            label=content.cancel_label,
            role=ActionRole.CANCEL,
            handler=handlers.cancel,
        )
    )

    if variant is AlertVariant.DISABLED:
        return dialog

    secondary = _secondary_handler(variant, handlers)
    if secondary is None:
        raise ValueError(f"{variant.value} alert needs a secondary action handler")
    dialog.add_action(
        AlertAction(
            label=content.primary_label,
            role=ActionRole.DEFAULT,
            handler=secondary,
            preferred=True,
        )
    )
    return dialog
