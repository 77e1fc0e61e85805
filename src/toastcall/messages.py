"""Message descriptors for lifecycle notifications.

A terminal message is either a fixed text or a function of the outcome.
Both shapes are modelled as a small tagged variant so the coordinator
resolves them with a single dispatch instead of inspecting types at call
sites.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Static:
    """A message used verbatim."""

    text: str

    def resolve(self, _subject: Any) -> str:
        return self.text


@dataclass(frozen=True)
class Computed[T]:
    """A message computed from the outcome value or error."""

    fn: Callable[[T], str]

    def resolve(self, subject: T) -> str:
        return str(self.fn(subject))


type Message = Static | Computed[Any]
type MessageLike = Message | str | Callable[[Any], str]


def as_message(value: MessageLike | None) -> Message | None:
    """Coerce a plain string or callable into a message descriptor."""
    if value is None or isinstance(value, (Static, Computed)):
        return value
    if isinstance(value, str):
        return Static(value)
    if callable(value):
        return Computed(value)
    raise TypeError(f"expected str or callable message, got {type(value).__name__}")


def resolve_message(message: Message, subject: Any) -> str:
    return message.resolve(subject)


@dataclass(frozen=True, init=False)
class Directive:
    """How to render the lifecycle of one invocation.

    Args:
        loading: Text of the pending notification; the configured default
            is used when omitted.
        success: Success message. No success notification is shown when
            omitted.
        error: Error message; the configured default is used when omitted.
        silent: Skip every notification and pass the call through.
    """

    loading: str | None
    success: Message | None
    error: Message | None
    silent: bool

    def __init__(
        self,
        loading: str | None = None,
        success: MessageLike | None = None,
        error: MessageLike | None = None,
        silent: bool = False,
    ) -> None:
        object.__setattr__(self, "loading", loading)
        object.__setattr__(self, "success", as_message(success))
        object.__setattr__(self, "error", as_message(error))
        object.__setattr__(self, "silent", silent)


@dataclass(frozen=True, init=False)
class PromiseMessages:
    """Fixed loading/success/error triple for ``Toaster.promise``."""

    loading: str
    success: Message
    error: Message

    def __init__(self, loading: str, success: MessageLike, error: MessageLike) -> None:
        success_message = as_message(success)
        error_message = as_message(error)
        if success_message is None or error_message is None:
            raise ValueError("promise messages require success and error descriptors")
        object.__setattr__(self, "loading", loading)
        object.__setattr__(self, "success", success_message)
        object.__setattr__(self, "error", error_message)


def describe_error(error: BaseException) -> str:
    """Render an error as ``Type: message`` for notification details."""
    text = str(error)
    name = type(error).__name__
    return f"{name}: {text}" if text else name
