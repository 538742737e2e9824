"""Read-only editor state the special registers are computed from."""

from __future__ import annotations

from typing import Protocol, Sequence


class EditorContext(Protocol):
    """What the register store needs to know about the current view."""

    def selection_count(self) -> int:
        """Number of live selections in the current view."""
        ...

    def selection_fragments(self) -> Sequence[str]:
        """Text under each selection, in selection order."""
        ...

    def document_display_name(self) -> str:
        """Path of the current document or the scratch placeholder."""
        ...
