"""Clipboard capability consumed by the register store."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class ClipboardType(Enum):
    """The two platform clipboard buffers."""

    CLIPBOARD = "clipboard"
    SELECTION = "selection"

    @property
    def label(self) -> str:
        return "system" if self is ClipboardType.CLIPBOARD else "primary"


class ClipboardError(RuntimeError):
    """Raised by providers when the platform clipboard call fails."""

    def __init__(self, message: str, *, kind: ClipboardType | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class ClipboardProvider(Protocol):
    """Get/set access to a named clipboard kind."""

    name: str

    def get_contents(self, kind: ClipboardType) -> str:
        """Return the current text of ``kind``; raise ``ClipboardError`` on failure."""
        ...

    def set_contents(self, text: str, kind: ClipboardType) -> None:
        """Replace the text of ``kind``; raise ``ClipboardError`` on failure."""
        ...
