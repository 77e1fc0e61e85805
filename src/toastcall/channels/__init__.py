"""Notification rendering channels."""

from .base import BaseChannel
from .bus import BusChannel, NotificationBus
from .console import ConsoleChannel
from .events import Notification, Severity, ToastAction, ToastDismissed, ToastShown
from .memory import MemoryChannel

__all__ = [
    "BaseChannel",
    "BusChannel",
    "ConsoleChannel",
    "MemoryChannel",
    "Notification",
    "NotificationBus",
    "Severity",
    "ToastAction",
    "ToastDismissed",
    "ToastShown",
]
