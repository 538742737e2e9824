"""Document text storage backing the editor context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from editor_registers.runtime.settings import SCRATCH_BUFFER_NAME


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text plus the file it was loaded from, if any."""

    _lines: List[str] = field(default_factory=lambda: [""])
    path: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, *, path: Optional[str] = None) -> "BufferDocument":
        return cls(_lines=text.split("\n"), path=path)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def display_name(self, scratch_name: str = SCRATCH_BUFFER_NAME) -> str:
        """Return the document path, or ``scratch_name`` for unsaved buffers."""

        return self.path if self.path else scratch_name
