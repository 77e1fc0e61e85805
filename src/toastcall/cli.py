"""toastcall command line interface."""

from __future__ import annotations

import asyncio
import json
from enum import StrEnum
from typing import Any

import typer
from rich.console import Console

from toastcall.builtin import builtin_registry
from toastcall.channels.console import ConsoleChannel
from toastcall.config import load_settings
from toastcall.coordinator import InvocationCoordinator
from toastcall.errors import ConfigurationError
from toastcall.logging_utils import configure_logging
from toastcall.messages import Directive
from toastcall.toast import Toaster
from toastcall.types import InvocationRequest

app = typer.Typer(
    name="toastcall",
    help="Run commands with loading, success and error notifications.",
    add_completion=False,
)


class NotifySeverity(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


def _build_toaster() -> Toaster:
    settings = load_settings()
    configure_logging(profile="console", level=settings.log_level)
    return Toaster(ConsoleChannel(), settings=settings)


def _parse_args(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"--args is not valid JSON: {exc.msg}") from exc
    if not isinstance(parsed, dict):
        raise ConfigurationError("--args must be a JSON object")
    return parsed


@app.command("invoke")
def invoke_command(
    name: str = typer.Argument(..., help="Command name, see `toastcall commands`"),
    args: str | None = typer.Option(None, "--args", "-a", help="Command arguments as a JSON object"),
    loading: str | None = typer.Option(None, "--loading", help="Loading message"),
    success: str | None = typer.Option(None, "--success", help="Success message"),
    error: str | None = typer.Option(None, "--error", help="Error message"),
    silent: bool = typer.Option(False, "--silent", help="Do not show notifications"),
) -> None:
    """Invoke one command through the notification coordinator."""
    try:
        arguments = _parse_args(args)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--args") from exc

    toaster = _build_toaster()
    coordinator = InvocationCoordinator(builtin_registry(), toaster, settings=toaster.settings)
    request = InvocationRequest(name=name, args=arguments)
    directive = Directive(loading=loading, success=success, error=error, silent=silent)

    try:
        result = asyncio.run(coordinator.execute_with_notification(request, directive))
    except Exception as exc:
        if silent:
            typer.echo(f"error: {exc!s}", err=True)
        raise typer.Exit(1) from exc
    typer.echo(json.dumps(result, ensure_ascii=False))


@app.command("notify")
def notify_command(
    severity: NotifySeverity = typer.Argument(..., help="Notification severity"),
    message: str = typer.Argument(..., help="Notification text"),
    detail: str | None = typer.Option(None, "--detail", "-d", help="Secondary text"),
    copy: bool = typer.Option(False, "--copy", help="Trigger the copy action of an error notification"),
) -> None:
    """Fire one notification."""
    toaster = _build_toaster()

    async def _notify() -> None:
        emit = getattr(toaster, severity.value)
        handle = emit(message, detail)
        if copy:
            if toaster.channel.action(handle) is None:
                raise typer.BadParameter("only error notifications with --detail have a copy action")
            toaster.channel.click(handle)
        await toaster.drain()

    asyncio.run(_notify())


@app.command("commands")
def commands_command() -> None:
    """List available commands."""
    console = Console()
    for descriptor in builtin_registry().descriptors():
        console.print(f"[bold]{descriptor.name}[/bold]: {descriptor.description}", highlight=False)


def main() -> None:
    app()
