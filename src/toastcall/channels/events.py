"""Notification records and bus events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from toastcall.types import Handle


class Severity(StrEnum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ToastAction:
    """A button attached to a notification."""

    label: str
    on_click: Callable[[], None]


@dataclass(frozen=True)
class Notification:
    """One notification handed to a rendering channel.

    ``duration_ms`` is ``None`` for loading notifications, which stay
    visible until dismissed.
    """

    severity: Severity
    message: str
    description: str | None = None
    duration_ms: int | None = None
    action: ToastAction | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class ToastShown:
    """Published when a channel displays a notification."""

    handle: Handle
    notification: Notification


@dataclass(frozen=True)
class ToastDismissed:
    """Published when a loading notification is dismissed."""

    handle: Handle
