"""Reconciling cached clipboard fragments with the platform clipboard.

The platform clipboard holds one flat string while a register holds one
fragment per selection. Writes join the fragments with the line ending and
keep the fragments as a cache. Reads trust the cache only when joining it
reproduces the clipboard text exactly; otherwise something else changed the
clipboard and its text is handed back as a single fragment.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from editor_registers.clipboard import ClipboardError, ClipboardProvider, ClipboardType
from editor_registers.runtime import telemetry

from .errors import ClipboardFailure
from .values import RegisterValues


def join_values(values: Iterable[str], line_ending: str) -> str:
    return line_ending.join(values)


def contents_are_saved(
    saved_values: Optional[Sequence[str]], contents: str, line_ending: str
) -> bool:
    """Return whether ``contents`` is exactly the cached fragments joined.

    ``saved_values`` is newest-first storage. Fragments are matched greedily
    from the start of ``contents`` without backtracking.
    """

    if saved_values is None:
        return False
    values = reversed(saved_values)
    first = next(values, None)
    if first is None:
        return contents == ""
    if not contents.startswith(first):
        return False
    position = len(first)

    for value in values:
        if not contents.startswith(line_ending, position):
            return False
        position += len(line_ending)
        if not contents.startswith(value, position):
            return False
        position += len(value)

    return position == len(contents)


def read_from_clipboard(
    provider: ClipboardProvider,
    saved_values: Optional[Sequence[str]],
    kind: ClipboardType,
    line_ending: str,
    *,
    register: str,
    logger_name: Optional[str] = None,
) -> RegisterValues:
    try:
        contents = provider.get_contents(kind)
    except ClipboardError as exc:
        telemetry.record_event(
            "registers.clipboard_read_failed",
            level="error",
            data={
                "register": register,
                "clipboard": kind.label,
                "provider": provider.name,
                "reason": str(exc),
            },
            logger_name=logger_name,
        )
        return RegisterValues.empty()

    if saved_values is not None and contents_are_saved(
        saved_values, contents, line_ending
    ):
        return RegisterValues.from_stored(saved_values)
    return RegisterValues.single(contents)


def effective_values(
    provider: ClipboardProvider,
    saved_values: Optional[Sequence[str]],
    kind: ClipboardType,
    line_ending: str,
    *,
    register: str,
) -> List[str]:
    """Oldest-first fragments a push should extend.

    Unlike ``read_from_clipboard`` a failed fetch is an error here, since
    pushing onto an unknown clipboard would silently drop its contents.
    """

    try:
        contents = provider.get_contents(kind)
    except ClipboardError as exc:
        raise ClipboardFailure(
            f"Failed to read {kind.label} clipboard: {exc}", register=register
        ) from exc

    if saved_values is not None and contents_are_saved(
        saved_values, contents, line_ending
    ):
        return list(reversed(saved_values))
    if contents == "":
        return []
    return [contents]


__all__ = [
    "contents_are_saved",
    "effective_values",
    "join_values",
    "read_from_clipboard",
]
