"""Terminal channel rendered with rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from toastcall.channels.base import BaseChannel
from toastcall.channels.events import Notification, Severity
from toastcall.types import Handle

_STYLES: dict[Severity, tuple[str, str]] = {
    Severity.SUCCESS: ("bold green", "OK"),
    Severity.ERROR: ("bold red", "Error"),
    Severity.WARNING: ("bold yellow", "Warning"),
    Severity.INFO: ("bold blue", "Info"),
}


class ConsoleChannel(BaseChannel):
    """Show loading notifications as one spinner and the rest as styled lines.

    rich allows a single live display per console, so concurrent loading
    notifications share the spinner, which shows every pending message.
    Durations are ignored: a terminal line stays in the scrollback.
    """

    name = "console"

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self._pending: dict[Handle, str] = {}
        self._status: Status | None = None

    def render(self, handle: Handle, notification: Notification) -> None:
        if notification.severity is Severity.LOADING:
            self._pending[handle] = notification.message
            self._refresh_status()
            return

        style, label = _STYLES[notification.severity]
        self.console.print(f"[{style}]{label}:[/{style}] {escape(notification.message)}", highlight=False)
        if notification.description:
            self.console.print(f"  [dim]{escape(notification.description)}[/dim]", highlight=False)
        if notification.action is not None:
            self.console.print(f"  [dim]\\[{escape(notification.action.label)}][/dim]", highlight=False)

    def dismiss(self, handle: Handle) -> None:
        if self._pending.pop(handle, None) is not None:
            self._refresh_status()

    @property
    def pending(self) -> list[str]:
        return list(self._pending.values())

    def _refresh_status(self) -> None:
        if not self._pending:
            if self._status is not None:
                self._status.stop()
                self._status = None
            return

        text = escape(" | ".join(self._pending.values()))
        if self._status is None:
            self._status = self.console.status(text)
            self._status.start()
        else:
            self._status.update(text)
