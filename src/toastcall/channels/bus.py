"""Signal-based notification bus."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from blinker import Signal

from toastcall.channels.base import BaseChannel
from toastcall.channels.events import Notification, ToastDismissed, ToastShown
from toastcall.types import Handle

ShownHandler = Callable[[ToastShown], None]
DismissedHandler = Callable[[ToastDismissed], None]


class NotificationBus:
    """In-process notification bus backed by blinker signals."""

    def __init__(self) -> None:
        self._shown = Signal("toastcall.shown")
        self._dismissed = Signal("toastcall.dismissed")

    def publish_shown(self, event: ToastShown) -> None:
        self._shown.send(self, event=event)

    def publish_dismissed(self, event: ToastDismissed) -> None:
        self._dismissed.send(self, event=event)

    def on_shown(self, handler: ShownHandler) -> Callable[[], None]:
        def _receiver(sender: Any, *, event: ToastShown) -> None:
            handler(event)

        self._shown.connect(_receiver, weak=False)
        return lambda: self._shown.disconnect(_receiver)

    def on_dismissed(self, handler: DismissedHandler) -> Callable[[], None]:
        def _receiver(sender: Any, *, event: ToastDismissed) -> None:
            handler(event)

        self._dismissed.connect(_receiver, weak=False)
        return lambda: self._dismissed.disconnect(_receiver)


class BusChannel(BaseChannel):
    """Channel that forwards notifications to bus subscribers."""

    name = "bus"

    def __init__(self, bus: NotificationBus) -> None:
        super().__init__()
        self.bus = bus

    def render(self, handle: Handle, notification: Notification) -> None:
        self.bus.publish_shown(ToastShown(handle=handle, notification=notification))

    def dismiss(self, handle: Handle) -> None:
        self.bus.publish_dismissed(ToastDismissed(handle=handle))
