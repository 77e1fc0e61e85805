"""toastcall - remote calls with lifecycle notifications."""

from .coordinator import InvocationCoordinator, invoke_with_toast
from .gateway import CommandRegistry
from .messages import Computed, Directive, PromiseMessages, Static
from .toast import Toaster
from .types import InvocationRequest

__version__ = "0.1.0"

__all__ = [
    "CommandRegistry",
    "Computed",
    "Directive",
    "InvocationCoordinator",
    "InvocationRequest",
    "PromiseMessages",
    "Static",
    "Toaster",
    "invoke_with_toast",
]
