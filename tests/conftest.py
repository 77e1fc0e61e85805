from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from toastcall.channels.memory import MemoryChannel
from toastcall.clipboard import MemoryClipboard
from toastcall.config import Settings
from toastcall.toast import Toaster


class RecordingNotifier:
    """Notification channel that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._next = 0

    def show_loading(self, message: str) -> object:
        self._next += 1
        handle = f"h{self._next}"
        self.calls.append(("loading", message, handle))
        return handle

    def show_success(self, message: str) -> None:
        self.calls.append(("success", message))

    def show_warning(self, message: str) -> None:
        self.calls.append(("warning", message))

    def show_info(self, message: str) -> None:
        self.calls.append(("info", message))

    def show_error(self, message: str, detail: str | None = None) -> None:
        self.calls.append(("error", message, detail))

    def dismiss(self, handle: object) -> None:
        self.calls.append(("dismiss", handle))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


class FakeGateway:
    """Gateway resolving or failing with a preset outcome."""

    def __init__(self, *, value: Any = None, error: BaseException | None = None, notifier=None) -> None:
        self.value = value
        self.error = error
        self.notifier = notifier
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def invoke(self, command: str, args: Mapping[str, Any] | None = None) -> Any:
        self.calls.append((command, dict(args or {})))
        if self.notifier is not None:
            self.notifier.calls.append(("invoke", command))
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def channel() -> MemoryChannel:
    return MemoryChannel()


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def toaster(channel: MemoryChannel, clipboard: MemoryClipboard, settings: Settings) -> Toaster:
    return Toaster(channel, clipboard=clipboard, settings=settings)
