"""Named-register store for a multi-cursor text editor."""

from .buffer import Buffer, EditorContext
from .clipboard import ClipboardError, ClipboardType, get_clipboard_provider
from .registers import (
    ClipboardFailure,
    RegisterError,
    Registers,
    RegisterValues,
    UnsupportedOperation,
)

__all__ = [
    "Buffer",
    "ClipboardError",
    "ClipboardFailure",
    "ClipboardType",
    "EditorContext",
    "RegisterError",
    "RegisterValues",
    "Registers",
    "UnsupportedOperation",
    "get_clipboard_provider",
]

__version__ = "0.1.0"
