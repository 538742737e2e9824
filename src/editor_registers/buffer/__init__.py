"""Editor context: documents, multi-cursor selections, and the buffer façade."""

from .buffer import Buffer
from .context import EditorContext
from .document import BufferDocument
from .state import BufferState, Cursor, Selection
from .validation import BufferValidationError, ensure_cursor

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "EditorContext",
    "Selection",
    "ensure_cursor",
]
