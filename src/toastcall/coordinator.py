"""Run remote calls with a loading indicator and a terminal notification."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from loguru import logger

from toastcall.config import Settings, load_settings
from toastcall.gateway import RemoteGateway
from toastcall.logging_utils import invocation_scope
from toastcall.messages import Directive, MessageLike, Static, describe_error, resolve_message
from toastcall.toast import NotificationChannel
from toastcall.types import Failure, Handle, InvocationRequest, Outcome, Success


class InvocationState(StrEnum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED_SUCCESS = "resolved_success"
    RESOLVED_FAILURE = "resolved_failure"
    DISMISSED = "dismissed"


@dataclass
class InvocationTrace:
    """Lifecycle record of one non-silent invocation."""

    request: InvocationRequest
    state: InvocationState = InvocationState.IDLE
    handle: Handle | None = None
    outcome: Outcome[Any] | None = None
    history: list[InvocationState] = field(default_factory=lambda: [InvocationState.IDLE])

    def advance(self, state: InvocationState) -> None:
        self.state = state
        self.history.append(state)


SettledHook = Callable[[InvocationTrace], None]


class InvocationCoordinator:
    """Pair one gateway call with its loading, success and error notifications.

    The coordinator keeps no state between calls, so concurrent invocations
    each own their loading handle. Remote failures are observed for the
    error notification and then re-raised unchanged.
    """

    def __init__(
        self,
        gateway: RemoteGateway[Any],
        notifier: NotificationChannel,
        *,
        settings: Settings | None = None,
        on_settled: SettledHook | None = None,
    ) -> None:
        self.gateway = gateway
        self.notifier = notifier
        self.settings = settings or load_settings()
        self.on_settled = on_settled

    async def execute_with_notification[T](self, request: InvocationRequest, directive: Directive | None = None) -> T:
        directive = directive or Directive()
        with invocation_scope(request.name):
            if directive.silent:
                logger.debug("invocation.silent name={}", request.name)
                return await self.gateway.invoke(request.name, request.args)
            return await self._run(request, directive)

    async def _run[T](self, request: InvocationRequest, directive: Directive) -> T:
        trace = InvocationTrace(request=request)
        trace.handle = self.notifier.show_loading(directive.loading or self.settings.loading_message)
        trace.advance(InvocationState.PENDING)

        try:
            value: T = await self.gateway.invoke(request.name, request.args)
        except asyncio.CancelledError:
            self._dismiss(trace)
            logger.debug("invocation.cancelled name={}", request.name)
            raise
        except Exception as exc:
            trace.outcome = Failure(exc)
            trace.advance(InvocationState.RESOLVED_FAILURE)
            self._dismiss(trace)
            message = directive.error or Static(self.settings.error_message)
            self.notifier.show_error(resolve_message(message, exc), describe_error(exc))
            self._settled(trace)
            raise

        trace.outcome = Success(value)
        trace.advance(InvocationState.RESOLVED_SUCCESS)
        self._dismiss(trace)
        if directive.success is not None:
            self.notifier.show_success(resolve_message(directive.success, value))
        self._settled(trace)
        return value

    def _dismiss(self, trace: InvocationTrace) -> None:
        self.notifier.dismiss(trace.handle)
        trace.advance(InvocationState.DISMISSED)

    def _settled(self, trace: InvocationTrace) -> None:
        logger.debug(
            "invocation.settled name={} states={}",
            trace.request.name,
            "->".join(trace.history),
        )
        if self.on_settled is not None:
            self.on_settled(trace)


async def invoke_with_toast(
    command: str,
    args: Mapping[str, Any] | None = None,
    *,
    loading: str | None = None,
    success: MessageLike | None = None,
    error: MessageLike | None = None,
    silent: bool = False,
    gateway: RemoteGateway[Any] | None = None,
    notifier: NotificationChannel | None = None,
) -> Any:
    """Invoke ``command`` once with lifecycle notifications.

    Defaults to the built-in command registry and a console toaster.
    """
    if gateway is None:
        from toastcall.builtin import builtin_registry

        gateway = builtin_registry()
    if notifier is None:
        from toastcall.channels.console import ConsoleChannel
        from toastcall.toast import Toaster

        notifier = Toaster(ConsoleChannel())

    coordinator = InvocationCoordinator(gateway, notifier)
    request = InvocationRequest(name=command, args=args or {})
    directive = Directive(loading=loading, success=success, error=error, silent=silent)
    return await coordinator.execute_with_notification(request, directive)
