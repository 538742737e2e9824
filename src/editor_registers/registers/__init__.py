"""Named registers: classification, clipboard reconciliation, and the store."""

from .errors import ClipboardFailure, RegisterError, UnsupportedOperation
from .names import (
    SPECIAL_PREVIEWS,
    RegisterKind,
    classify,
    clipboard_type_for,
    is_special,
)
from .reconcile import contents_are_saved
from .store import EMPTY_PREVIEW, Registers
from .values import RegisterValues

__all__ = [
    "ClipboardFailure",
    "EMPTY_PREVIEW",
    "RegisterError",
    "RegisterKind",
    "RegisterValues",
    "Registers",
    "SPECIAL_PREVIEWS",
    "UnsupportedOperation",
    "classify",
    "clipboard_type_for",
    "contents_are_saved",
    "is_special",
]
