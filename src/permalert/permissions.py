"""Permission collaborator interface.

The alert core only talks to a permission through the narrow surface defined
here: its current status, its type tag, its single callback slot and an
asynchronous authorization request. Platform-specific implementations live
with the host application; ``SimulatedPermission`` is an in-memory one used
by the demo app and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Union


class PermissionStatus(Enum):
    """Authorization state of a permission."""

    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"
    DISABLED = "disabled"


class PermissionType(Enum):
    """Capability guarded by a permission."""

    CONTACTS = "contacts"
    NOTIFICATIONS = "notifications"
    LOCATION_ALWAYS = "location_always"
    LOCATION_WHEN_IN_USE = "location_when_in_use"
    CAMERA = "camera"
    MICROPHONE = "microphone"
    PHOTOS = "photos"
    REMINDERS = "reminders"
    EVENTS = "events"
    BLUETOOTH = "bluetooth"
    MOTION = "motion"
    SPEECH_RECOGNITION = "speech_recognition"
    MEDIA_LIBRARY = "media_library"
    SIRI = "siri"


#: A known ``PermissionType`` or a free-form tag for a custom capability.
TypeTag = Union[PermissionType, str]

PermissionCallback = Callable[[PermissionStatus], None]


def type_name(tag: TypeTag) -> str:
    """Return the raw identifier of a permission type tag."""
    if isinstance(tag, PermissionType):
        return tag.value
    return str(tag)


def coerce_type(value: str) -> TypeTag:
    """Map a string onto a ``PermissionType``, keeping unknown tags as-is."""
    try:
        return PermissionType(value)
    except ValueError:
        return value


class Permission(ABC):
    """A single OS-guarded capability.

    Args:
        type: Capability tag
        callback: Callback invoked with the resulting status once per
            user-facing decision sequence
    """

    def __init__(
        self,
        type: TypeTag,
        callback: Optional[PermissionCallback] = None,
    ):
        self.type = type
        self.callback = callback

    @property
    @abstractmethod
    def status(self) -> PermissionStatus:
        """Current authorization status."""

    @abstractmethod
    def request_authorization(self, callback: Optional[PermissionCallback]) -> None:
        """Ask the platform for authorization.

        Implementations trigger the OS-level prompt and invoke ``callback``
        with the resulting status once the user answers.
        """

    def __str__(self) -> str:
        return type_name(self.type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={type_name(self.type)!r})"


class SimulatedPermission(Permission):
    """In-memory permission with a settable status.

    ``request_authorization`` moves the status to ``grant_outcome`` and
    reports it, the way a user answering the OS prompt would.
    """

    def __init__(
        self,
        type: TypeTag,
        status: PermissionStatus = PermissionStatus.NOT_DETERMINED,
        callback: Optional[PermissionCallback] = None,
        grant_outcome: PermissionStatus = PermissionStatus.AUTHORIZED,
    ):
        super().__init__(type, callback)
        self._status = status
        self.grant_outcome = grant_outcome
        self.authorization_requests = 0

    @property
    def status(self) -> PermissionStatus:
        return self._status

    @status.setter
    def status(self, value: PermissionStatus) -> None:
        self._status = value

    def request_authorization(self, callback: Optional[PermissionCallback]) -> None:
        self.authorization_requests += 1
        self._status = self.grant_outcome
        if callback is not None:
            callback(self._status)
