"""Application-level exception types for toastcall."""

from __future__ import annotations


class ToastCallError(Exception):
    """Base exception for toastcall."""


class ConfigurationError(ToastCallError):
    """Raised when settings or CLI options cannot be used."""


class UnknownCommandError(ToastCallError, KeyError):
    """Raised when the gateway has no handler for a command name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown command: {self.name}"


class CommandFailedError(ToastCallError):
    """Raised by a command handler to report a failed remote operation."""


class ClipboardError(ToastCallError):
    """Raised when text cannot be written to the system clipboard."""


class UnknownHandleError(ToastCallError):
    """Raised when a channel is asked to dismiss a handle it does not own."""
