"""Clipboard writers used by the error toast copy action."""

from __future__ import annotations

import asyncio
import shutil
import sys
from typing import Protocol

from loguru import logger

from toastcall.errors import ClipboardError

# Tried in order; the first executable found on PATH wins.
_COPY_COMMANDS: dict[str, list[list[str]]] = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


class Clipboard(Protocol):
    async def write(self, text: str) -> None: ...


def find_copy_command(platform: str | None = None) -> list[str] | None:
    platform = platform or sys.platform
    key = "linux" if platform.startswith(("linux", "freebsd", "openbsd")) else platform
    for command in _COPY_COMMANDS.get(key, []):
        if shutil.which(command[0]):
            return command
    return None


class SystemClipboard:
    """Write text through the platform's copy command."""

    def __init__(self, command: list[str] | None = None) -> None:
        self._command = command

    async def write(self, text: str) -> None:
        command = self._command or find_copy_command()
        if command is None:
            raise ClipboardError(f"no clipboard command available on {sys.platform}")

        try:
            # Fixed argv from the table above; the text only goes to stdin.
            process = await asyncio.create_subprocess_exec(  # noqa: S603
                *command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ClipboardError(f"cannot start {command[0]}: {exc!s}") from exc

        _, stderr = await process.communicate(text.encode("utf-8"))
        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip() or "(empty)"
            raise ClipboardError(f"{command[0]} exited with {process.returncode}: {detail}")
        logger.debug("clipboard.write command={} chars={}", command[0], len(text))


class MemoryClipboard:
    """Clipboard that keeps written text in memory."""

    def __init__(self) -> None:
        self.contents: str | None = None
        self.writes: list[str] = []

    async def write(self, text: str) -> None:
        self.contents = text
        self.writes.append(text)
