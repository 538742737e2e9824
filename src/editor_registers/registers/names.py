"""Register name classification."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from editor_registers.clipboard import ClipboardType


class RegisterKind(Enum):
    BLACK_HOLE = "black_hole"
    SELECTION_INDICES = "selection_indices"
    SELECTION_CONTENTS = "selection_contents"
    DOCUMENT_PATH = "document_path"
    CLIPBOARD = "clipboard"
    PLAIN = "plain"


_SPECIAL_KINDS: Mapping[str, RegisterKind] = MappingProxyType(
    {
        "_": RegisterKind.BLACK_HOLE,
        "#": RegisterKind.SELECTION_INDICES,
        ".": RegisterKind.SELECTION_CONTENTS,
        "%": RegisterKind.DOCUMENT_PATH,
        "*": RegisterKind.CLIPBOARD,
        "+": RegisterKind.CLIPBOARD,
    }
)

COMPUTED_KINDS = frozenset(
    {
        RegisterKind.SELECTION_INDICES,
        RegisterKind.SELECTION_CONTENTS,
        RegisterKind.DOCUMENT_PATH,
    }
)

# Shown by previews in place of whatever the special registers hold.
SPECIAL_PREVIEWS: tuple[tuple[str, str], ...] = (
    ("_", "<empty>"),
    ("#", "<selection indices>"),
    (".", "<selection contents>"),
    ("%", "<document path>"),
    ("*", "<selection clipboard>"),
    ("+", "<system clipboard>"),
)


def validate_name(name: str) -> str:
    if not isinstance(name, str) or len(name) != 1:
        raise ValueError(f"Register names are single characters, got {name!r}")
    return name


def classify(name: str) -> RegisterKind:
    return _SPECIAL_KINDS.get(validate_name(name), RegisterKind.PLAIN)


def is_special(name: str) -> bool:
    return classify(name) is not RegisterKind.PLAIN


def clipboard_type_for(name: str) -> ClipboardType:
    """``*`` is the primary selection, ``+`` the system clipboard."""

    if name == "*":
        return ClipboardType.SELECTION
    if name == "+":
        return ClipboardType.CLIPBOARD
    raise ValueError(f"Register {name} is not backed by a clipboard")


__all__ = [
    "COMPUTED_KINDS",
    "RegisterKind",
    "SPECIAL_PREVIEWS",
    "classify",
    "clipboard_type_for",
    "is_special",
    "validate_name",
]
