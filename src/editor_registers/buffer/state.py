"""Multi-cursor selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]  # (anchor, head)


def ordered(selection: Selection) -> Selection:
    anchor, head = selection
    return (anchor, head) if anchor <= head else (head, anchor)


@dataclass(slots=True)
class BufferState:
    """Live selections of one view, kept in document order."""

    selections: List[Selection] = field(default_factory=lambda: [((0, 0), (0, 0))])
    primary_index: int = 0

    def set_selections(
        self, selections: Sequence[Selection], *, primary: int = 0
    ) -> None:
        if not selections:
            raise ValueError("a view needs at least one selection")
        if not 0 <= primary < len(selections):
            raise ValueError(f"primary index {primary} out of range")
        primary_selection = selections[primary]
        self.selections = sorted(selections, key=lambda sel: ordered(sel)[0])
        self.primary_index = self.selections.index(primary_selection)

    def add_selection(self, selection: Selection) -> None:
        self.set_selections(
            [*self.selections, selection], primary=len(self.selections)
        )

    @property
    def primary(self) -> Selection:
        return self.selections[self.primary_index]

    def __len__(self) -> int:
        return len(self.selections)
