"""Invocation data model."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

type Handle = Hashable


def _freeze(args: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(args or {}))


@dataclass(frozen=True)
class InvocationRequest:
    """One remote operation and its parameters."""

    name: str
    args: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("invocation name must not be empty")
        object.__setattr__(self, "args", _freeze(self.args))


@dataclass(frozen=True)
class Success[T]:
    """The remote call resolved with a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """The remote call failed with an error."""

    error: BaseException


type Outcome[T] = Success[T] | Failure
