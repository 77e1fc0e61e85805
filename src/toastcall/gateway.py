"""Remote call gateway and the in-process command registry."""

from __future__ import annotations

import builtins
import inspect
import json
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from loguru import logger

from toastcall.errors import UnknownCommandError

CommandHandler = Callable[..., Any]


class RemoteGateway[T](Protocol):
    """Asynchronous boundary that executes named commands and resolves with ``T``."""

    async def invoke(self, command: str, args: Mapping[str, Any] | None = None) -> T: ...


def _shorten_text(text: str, width: int = 30, placeholder: str = "...") -> str:
    if len(text) <= width:
        return text
    available = width - len(placeholder)
    if available <= 0:
        return placeholder
    return text[:available] + placeholder


@dataclass(frozen=True)
class CommandDescriptor:
    """Command metadata and handler."""

    name: str
    description: str
    handler: CommandHandler


class CommandRegistry:
    """Gateway that dispatches commands to registered Python handlers."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandDescriptor] = {}

    def register(self, name: str, *, description: str = "") -> Callable[[CommandHandler], CommandHandler]:
        def decorator(handler: CommandHandler) -> CommandHandler:
            self.add(CommandDescriptor(name=name, description=description or _first_line(handler), handler=handler))
            return handler

        return decorator

    def add(self, descriptor: CommandDescriptor) -> None:
        if descriptor.name in self._commands:
            raise ValueError(f"command already registered: {descriptor.name}")
        self._commands[descriptor.name] = descriptor

    def has(self, name: str) -> bool:
        return name in self._commands

    def get(self, name: str) -> CommandDescriptor | None:
        return self._commands.get(name)

    def descriptors(self) -> builtins.list[CommandDescriptor]:
        return sorted(self._commands.values(), key=lambda item: item.name)

    async def invoke(self, command: str, args: Mapping[str, Any] | None = None) -> Any:
        descriptor = self.get(command)
        if descriptor is None:
            raise UnknownCommandError(command)

        kwargs = dict(args or {})
        self._log_call(command, kwargs)
        start = time.monotonic()
        try:
            result = descriptor.handler(**kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception:
            logger.exception("command.call.error name={}", command)
            raise
        finally:
            duration = time.monotonic() - start
            logger.info("command.call.end name={} duration={:.3f}ms", command, duration * 1000)

    def _log_call(self, name: str, kwargs: dict[str, Any]) -> None:
        params: list[str] = []
        for key, value in kwargs.items():
            try:
                rendered = json.dumps(value, ensure_ascii=False)
            except TypeError:
                rendered = repr(value)
            params.append(f"{key}={_shorten_text(rendered)}")
        logger.info("command.call.start name={} {{ {} }}", name, ", ".join(params))


def _first_line(handler: CommandHandler) -> str:
    doc = inspect.getdoc(handler) or ""
    return doc.splitlines()[0] if doc else ""
