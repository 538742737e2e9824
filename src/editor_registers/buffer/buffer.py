"""Buffer façade combining a document with its multi-cursor state."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from editor_registers.runtime.settings import RegisterSettings

from .document import BufferDocument
from .state import BufferState, Cursor, Selection, ordered
from .validation import ensure_cursor


class Buffer:
    """In-process ``EditorContext`` over one document and one view."""

    def __init__(
        self,
        *,
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        scratch_name: Optional[str] = None,
    ) -> None:
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        if scratch_name is None:
            scratch_name = RegisterSettings.from_env().scratch_name
        self.scratch_name = scratch_name

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        path: Optional[str] = None,
        selections: Optional[Iterable[Selection]] = None,
    ) -> "Buffer":
        buffer = cls(document=BufferDocument.from_text(text, path=path))
        if selections is not None:
            buffer.set_selections(list(selections))
        return buffer

    def set_selections(
        self, selections: Sequence[Selection], *, primary: int = 0
    ) -> None:
        for anchor, head in selections:
            ensure_cursor(self.document, anchor)
            ensure_cursor(self.document, head)
        self.state.set_selections(selections, primary=primary)

    def add_selection(self, start: Cursor, end: Cursor) -> None:
        ensure_cursor(self.document, start)
        ensure_cursor(self.document, end)
        self.state.add_selection((start, end))

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        start_offset = _offset_for_cursor(self.document, start)
        end_offset = _offset_for_cursor(self.document, end)
        return self.document.text[start_offset:end_offset]

    # EditorContext

    def selection_count(self) -> int:
        return len(self.state)

    def selection_fragments(self) -> List[str]:
        return [
            self.get_text_range(*ordered(selection))
            for selection in self.state.selections
        ]

    def document_display_name(self) -> str:
        return self.document.display_name(self.scratch_name)


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    row, col = cursor
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    offset += col
    return offset
