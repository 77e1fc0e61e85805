"""In-memory channel that records what would have been shown."""

from __future__ import annotations

from toastcall.channels.base import BaseChannel
from toastcall.channels.events import Notification, Severity
from toastcall.errors import UnknownHandleError
from toastcall.types import Handle


class MemoryChannel(BaseChannel):
    """Record displayed notifications and dismissals in order."""

    name = "memory"

    def __init__(self) -> None:
        super().__init__()
        self.shown: list[tuple[Handle, Notification]] = []
        self.dismissed: list[Handle] = []
        self._active: set[Handle] = set()

    def render(self, handle: Handle, notification: Notification) -> None:
        self.shown.append((handle, notification))
        if notification.severity is Severity.LOADING:
            self._active.add(handle)

    def dismiss(self, handle: Handle) -> None:
        if handle not in self._active:
            raise UnknownHandleError(f"handle is not active: {handle!r}")
        self._active.remove(handle)
        self.dismissed.append(handle)

    @property
    def active(self) -> set[Handle]:
        return set(self._active)

    def notifications(self, severity: Severity | None = None) -> list[Notification]:
        return [item for _, item in self.shown if severity is None or item.severity is severity]

    def messages(self, severity: Severity | None = None) -> list[str]:
        return [item.message for item in self.notifications(severity)]
