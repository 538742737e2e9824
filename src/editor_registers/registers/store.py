"""The named-register store."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, Iterator, List, Optional, Tuple

from editor_registers.buffer import EditorContext
from editor_registers.clipboard import (
    ClipboardError,
    ClipboardProvider,
    get_clipboard_provider,
)
from editor_registers.runtime import telemetry
from editor_registers.runtime.settings import RegisterSettings

from .errors import ClipboardFailure, UnsupportedOperation
from .names import (
    COMPUTED_KINDS,
    SPECIAL_PREVIEWS,
    RegisterKind,
    classify,
    clipboard_type_for,
    is_special,
)
from .reconcile import effective_values, join_values, read_from_clipboard
from .values import RegisterValues

EMPTY_PREVIEW = "<empty>"


def _first_line(value: str) -> Optional[str]:
    if not value:
        return None
    line = value.split("\n", 1)[0]
    return line[:-1] if line.endswith("\r") else line


class Registers:
    """Key-value store of fragment lists addressed by single characters.

    Most names are plain slots. ``_ # . %`` are computed from the editor
    context passed to ``read`` and ``* +`` are backed by the platform
    clipboard; see ``editor_registers.registers.names``.

    Stored lists are kept newest-first so ``push`` is an ``appendleft``; every
    read path hands them back oldest-first.
    """

    def __init__(
        self,
        clipboard_provider: Optional[ClipboardProvider] = None,
        *,
        line_ending: Optional[str] = None,
        settings: Optional[RegisterSettings] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        if settings is None and (clipboard_provider is None or line_ending is None):
            settings = RegisterSettings.from_env()
        self._values: Dict[str, Deque[str]] = {}
        self._clipboard = clipboard_provider or get_clipboard_provider(settings)
        self._line_ending = line_ending or settings.line_ending
        self._logger_name = logger_name

    @property
    def clipboard_provider_name(self) -> str:
        return self._clipboard.name

    @property
    def line_ending(self) -> str:
        return self._line_ending

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def read(
        self, name: str, editor: Optional[EditorContext] = None
    ) -> Optional[RegisterValues]:
        """Return the fragments held by ``name``, oldest first.

        ``None`` means a plain register that was never written. ``editor`` is
        required for ``#``, ``.`` and ``%``.
        """

        kind = classify(name)
        if kind is RegisterKind.BLACK_HOLE:
            return RegisterValues.empty()
        if kind is RegisterKind.CLIPBOARD:
            return read_from_clipboard(
                self._clipboard,
                self._values.get(name),
                clipboard_type_for(name),
                self._line_ending,
                register=name,
                logger_name=self._logger_name,
            )
        if kind is RegisterKind.PLAIN:
            stored = self._values.get(name)
            return None if stored is None else RegisterValues.from_stored(stored)

        if editor is None:
            raise ValueError(f"Register {name} needs an editor context to be read")
        if kind is RegisterKind.SELECTION_INDICES:
            count = editor.selection_count()
            return RegisterValues.computed(
                lambda: (str(index) for index in range(1, count + 1)), count
            )
        if kind is RegisterKind.SELECTION_CONTENTS:
            fragments = tuple(editor.selection_fragments())
            return RegisterValues.computed(lambda: fragments, len(fragments))
        return RegisterValues.single(editor.document_display_name())

    def write(self, name: str, values: Iterable[str]) -> None:
        """Replace everything ``name`` holds with ``values``."""

        kind = classify(name)
        if kind in COMPUTED_KINDS:
            raise UnsupportedOperation(name, "writing")
        with telemetry.span(
            "registers::write",
            logger_name=self._logger_name,
            component="registers",
            metadata={"register": name},
        ) as handle:
            if kind is RegisterKind.BLACK_HOLE:
                return

            fragments = list(values)
            handle.add_metadata("fragments", len(fragments))
            if kind is RegisterKind.CLIPBOARD:
                self._set_clipboard(name, fragments)
            self._values[name] = deque(reversed(fragments))

    def push(self, name: str, value: str) -> None:
        """Append ``value`` after the last fragment of ``name``."""

        kind = classify(name)
        if kind in COMPUTED_KINDS:
            raise UnsupportedOperation(name, "pushing")
        with telemetry.span(
            "registers::push",
            logger_name=self._logger_name,
            component="registers",
            metadata={"register": name},
        ):
            if kind is RegisterKind.BLACK_HOLE:
                return

            if kind is RegisterKind.CLIPBOARD:
                fragments = effective_values(
                    self._clipboard,
                    self._values.get(name),
                    clipboard_type_for(name),
                    self._line_ending,
                    register=name,
                )
                fragments.append(value)
                self._set_clipboard(name, fragments)
                self._values[name] = deque(reversed(fragments))
                return

            self._values.setdefault(name, deque()).appendleft(value)

    def _set_clipboard(self, name: str, fragments: List[str]) -> None:
        kind = clipboard_type_for(name)
        try:
            self._clipboard.set_contents(
                join_values(fragments, self._line_ending), kind
            )
        except ClipboardError as exc:
            raise ClipboardFailure(
                f"Failed to write {kind.label} clipboard: {exc}", register=name
            ) from exc

    def first(self, name: str, editor: Optional[EditorContext] = None) -> Optional[str]:
        values = self.read(name, editor)
        return None if values is None else values.first()

    def last(self, name: str, editor: Optional[EditorContext] = None) -> Optional[str]:
        values = self.read(name, editor)
        return None if values is None else values.last()

    def iter_preview(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, summary)`` for stored registers, then the special ones.

        Clipboard caches are left out; ``*`` and ``+`` only show their fixed
        summary.
        """

        for name, values in self._values.items():
            if classify(name) is RegisterKind.CLIPBOARD:
                continue
            line = _first_line(values[0]) if values else None
            yield name, EMPTY_PREVIEW if line is None else line
        yield from SPECIAL_PREVIEWS

    def preview(self) -> List[Tuple[str, str]]:
        return list(self.iter_preview())

    def clear(self) -> None:
        """Drop every stored register and clipboard cache."""

        self._values.clear()

    def remove(self, name: str) -> bool:
        if is_special(name):
            return False
        return self._values.pop(name, None) is not None


__all__ = ["EMPTY_PREVIEW", "Registers"]
