"""Base channel interface."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod

from toastcall.channels.events import Notification, ToastAction
from toastcall.errors import UnknownHandleError
from toastcall.types import Handle


class BaseChannel(ABC):
    """Abstract base class for notification rendering backends."""

    name: str = "base"

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._actions: dict[Handle, ToastAction] = {}

    def next_id(self) -> Handle:
        return f"{self.name}-{next(self._ids)}"

    def display(self, notification: Notification) -> Handle:
        """Render one notification and return its handle."""
        handle = self.next_id()
        if notification.action is not None:
            self._actions[handle] = notification.action
        self.render(handle, notification)
        return handle

    def action(self, handle: Handle) -> ToastAction | None:
        return self._actions.get(handle)

    def click(self, handle: Handle) -> None:
        """Trigger the action attached to a displayed notification."""
        action = self.action(handle)
        if action is None:
            raise UnknownHandleError(f"no action for handle: {handle!r}")
        action.on_click()

    @abstractmethod
    def render(self, handle: Handle, notification: Notification) -> None:
        """Show a notification under an already allocated handle."""

    @abstractmethod
    def dismiss(self, handle: Handle) -> None:
        """Remove a displayed notification."""
