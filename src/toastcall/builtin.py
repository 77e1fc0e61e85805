"""Built-in commands served by the in-process gateway."""

from __future__ import annotations

import asyncio

from toastcall.errors import CommandFailedError
from toastcall.gateway import CommandRegistry


def register_builtin_commands(registry: CommandRegistry) -> CommandRegistry:
    """Register the demo commands used by the CLI."""

    @registry.register("ping")
    def ping() -> str:
        """Answer with pong."""
        return "pong"

    @registry.register("echo")
    def echo(*, message: str = "") -> str:
        """Return the given message."""
        return message

    @registry.register("sleep")
    async def sleep(*, seconds: float = 1.0) -> float:
        """Wait for a number of seconds."""
        if seconds < 0:
            raise CommandFailedError("seconds must be non-negative")
        await asyncio.sleep(seconds)
        return seconds

    @registry.register("fail")
    def fail(*, message: str = "boom") -> None:
        """Always fail with the given message."""
        raise CommandFailedError(message)

    return registry


_builtin_registry: CommandRegistry | None = None


def builtin_registry() -> CommandRegistry:
    """Get or create the shared registry holding the built-in commands."""
    global _builtin_registry
    if _builtin_registry is None:
        _builtin_registry = register_builtin_commands(CommandRegistry())
    return _builtin_registry
