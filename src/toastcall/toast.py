"""Notification facade with severity shortcuts, copy action and promise helper."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Coroutine
from typing import Any, Protocol

from loguru import logger

from toastcall.channels.base import BaseChannel
from toastcall.channels.events import Notification, Severity, ToastAction
from toastcall.clipboard import Clipboard, SystemClipboard
from toastcall.config import Settings, load_settings
from toastcall.errors import ClipboardError
from toastcall.messages import PromiseMessages, describe_error
from toastcall.types import Handle


class NotificationChannel(Protocol):
    """Display primitives the invocation coordinator relies on."""

    def show_loading(self, message: str) -> Handle: ...

    def show_success(self, message: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_info(self, message: str) -> None: ...

    def show_error(self, message: str, detail: str | None = None) -> None: ...

    def dismiss(self, handle: Handle) -> None: ...


class Toaster:
    """Emit notifications on a rendering channel with per-severity durations."""

    def __init__(
        self,
        channel: BaseChannel,
        *,
        clipboard: Clipboard | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.channel = channel
        self.clipboard: Clipboard = clipboard or SystemClipboard()
        self.settings = settings or load_settings()
        self._tasks: set[asyncio.Task[None]] = set()

    def success(self, message: str, description: str | None = None) -> Handle:
        return self._show(Severity.SUCCESS, message, description, self.settings.success_duration_ms)

    def error(self, message: str, description: str | None = None) -> Handle:
        action = self._copy_action(description) if description else None
        return self._show(Severity.ERROR, message, description, self.settings.error_duration_ms, action)

    def warning(self, message: str, description: str | None = None) -> Handle:
        return self._show(Severity.WARNING, message, description, self.settings.warning_duration_ms)

    def info(self, message: str, description: str | None = None) -> Handle:
        return self._show(Severity.INFO, message, description, self.settings.info_duration_ms)

    def loading(self, message: str) -> Handle:
        return self._show(Severity.LOADING, message, None, None)

    def dismiss(self, handle: Handle) -> None:
        self.channel.dismiss(handle)

    # NotificationChannel
    def show_loading(self, message: str) -> Handle:
        return self.loading(message)

    def show_success(self, message: str) -> None:
        self.success(message)

    def show_warning(self, message: str) -> None:
        self.warning(message)

    def show_info(self, message: str) -> None:
        self.info(message)

    def show_error(self, message: str, detail: str | None = None) -> None:
        self.error(message, detail)

    def promise[T](self, operation: Awaitable[T], messages: PromiseMessages) -> asyncio.Task[None]:
        """Show a loading toast for a pending operation and settle it in the background.

        A failed operation is shown as an error toast and not re-raised, so
        the task resolves to ``None``. It still fails if a ``Computed``
        message raises or the task is cancelled; the loading toast is
        dismissed on cancellation. Await the task to wait for the terminal
        notification.
        """
        loop = asyncio.get_running_loop()
        handle = self.loading(messages.loading)
        task = loop.create_task(self._settle(handle, operation, messages))
        self._track(task)
        return task

    def pending_tasks(self) -> list[asyncio.Task[None]]:
        return [task for task in self._tasks if not task.done()]

    async def drain(self) -> None:
        """Wait for background copy and promise tasks to finish."""
        while pending := self.pending_tasks():
            await asyncio.gather(*pending, return_exceptions=True)

    def _show(
        self,
        severity: Severity,
        message: str,
        description: str | None,
        duration_ms: int | None,
        action: ToastAction | None = None,
    ) -> Handle:
        notification = Notification(
            severity=severity,
            message=message,
            description=description,
            duration_ms=duration_ms,
            action=action,
        )
        handle = self.channel.display(notification)
        logger.debug("toast.show severity={} handle={} message={!r}", severity, handle, message)
        return handle

    async def _settle[T](self, handle: Handle, operation: Awaitable[T], messages: PromiseMessages) -> None:
        try:
            value = await operation
        except asyncio.CancelledError:
            self.dismiss(handle)
            raise
        except Exception as exc:
            self.dismiss(handle)
            logger.debug("toast.promise.failed handle={} error={!r}", handle, exc)
            self.error(messages.error.resolve(exc), describe_error(exc))
            return
        self.dismiss(handle)
        self.success(messages.success.resolve(value))

    def _copy_action(self, text: str) -> ToastAction:
        def _on_click() -> None:
            self._spawn(self._copy_to_clipboard(text))

        return ToastAction(label=self.settings.copy_label, on_click=_on_click)

    async def _copy_to_clipboard(self, text: str) -> None:
        try:
            await self.clipboard.write(text)
        except ClipboardError as exc:
            logger.warning("toast.copy.failed error={}", exc)
            self.warning(self.settings.copy_failed_message, str(exc))
            return
        self.success(self.settings.copied_message)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop to hand the task to; finish the copy before returning.
            asyncio.run(coro)
            return
        self._track(loop.create_task(coro))

    def _track(self, task: asyncio.Task[None]) -> None:
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
