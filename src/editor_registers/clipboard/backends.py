"""Concrete clipboard providers for the hosts the editor runs on."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import pyperclip

from .provider import ClipboardError, ClipboardType

ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Argument vectors for one clipboard helper program.

    ``None`` means the helper has no way to address that clipboard kind.
    """

    name: str
    executable: str
    get_clipboard: Sequence[str]
    set_clipboard: Sequence[str]
    get_selection: Optional[Sequence[str]] = None
    set_selection: Optional[Sequence[str]] = None

    def get_command(self, kind: ClipboardType) -> Optional[Sequence[str]]:
        if kind is ClipboardType.CLIPBOARD:
            return self.get_clipboard
        return self.get_selection

    def set_command(self, kind: ClipboardType) -> Optional[Sequence[str]]:
        if kind is ClipboardType.CLIPBOARD:
            return self.set_clipboard
        return self.set_selection


COMMAND_SPECS: Sequence[CommandSpec] = (
    CommandSpec(
        name="wl-clipboard",
        executable="wl-copy",
        get_clipboard=("wl-paste", "--no-newline"),
        set_clipboard=("wl-copy", "--type", "text/plain"),
        get_selection=("wl-paste", "--no-newline", "--primary"),
        set_selection=("wl-copy", "--primary", "--type", "text/plain"),
    ),
    CommandSpec(
        name="xclip",
        executable="xclip",
        get_clipboard=("xclip", "-o", "-selection", "clipboard"),
        set_clipboard=("xclip", "-i", "-selection", "clipboard"),
        get_selection=("xclip", "-o"),
        set_selection=("xclip", "-i"),
    ),
    CommandSpec(
        name="xsel",
        executable="xsel",
        get_clipboard=("xsel", "-o", "-b"),
        set_clipboard=("xsel", "-i", "-b"),
        get_selection=("xsel", "-o"),
        set_selection=("xsel", "-i"),
    ),
    CommandSpec(
        name="pasteboard",
        executable="pbcopy",
        get_clipboard=("pbpaste",),
        set_clipboard=("pbcopy",),
    ),
    CommandSpec(
        name="tmux",
        executable="tmux",
        get_clipboard=("tmux", "save-buffer", "-"),
        set_clipboard=("tmux", "load-buffer", "-w", "-"),
    ),
)


class CommandProvider:
    """Reads and writes clipboards by shelling out to a helper program."""

    def __init__(self, spec: CommandSpec, *, timeout: float = 2.0) -> None:
        self.spec = spec
        self.name = spec.name
        self._timeout = timeout

    @classmethod
    def detect(
        cls, specs: Sequence[CommandSpec] = COMMAND_SPECS
    ) -> Optional["CommandProvider"]:
        for spec in specs:
            if shutil.which(spec.executable):
                return cls(spec)
        return None

    def _fail(self, kind: ClipboardType, exc: Exception) -> ClipboardError:
        return ClipboardError(
            f"{self.name} failed on the {kind.label} clipboard: {exc}", kind=kind
        )

    def get_contents(self, kind: ClipboardType) -> str:
        command = self.spec.get_command(kind)
        if command is None:
            raise ClipboardError(
                f"{self.name} has no {kind.label} clipboard", kind=kind
            )
        # bytes mode, so CR and CRLF come back untranslated
        try:
            result = subprocess.run(
                list(command),
                capture_output=True,
                check=True,
                timeout=self._timeout,
            )
            return result.stdout.decode(ENCODING)
        except (OSError, subprocess.SubprocessError, UnicodeDecodeError) as exc:
            raise self._fail(kind, exc) from exc

    def set_contents(self, text: str, kind: ClipboardType) -> None:
        command = self.spec.set_command(kind)
        if command is None:
            raise ClipboardError(
                f"{self.name} has no {kind.label} clipboard", kind=kind
            )
        # xclip and wl-copy fork a child that owns the selection; it must not
        # inherit pipes we wait on.
        try:
            subprocess.run(
                list(command),
                input=text.encode(ENCODING),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise self._fail(kind, exc) from exc


class FallbackProvider:
    """Keeps clipboard text inside the process when no platform clipboard exists."""

    name = "none"

    def __init__(self) -> None:
        self._buffers: Dict[ClipboardType, str] = {kind: "" for kind in ClipboardType}

    def get_contents(self, kind: ClipboardType) -> str:
        return self._buffers[kind]

    def set_contents(self, text: str, kind: ClipboardType) -> None:
        self._buffers[kind] = text


class PyperclipProvider:
    """System clipboard through ``pyperclip``.

    pyperclip only knows one clipboard, so the primary selection is kept in
    process like ``FallbackProvider`` does.
    """

    name = "pyperclip"

    def __init__(self) -> None:
        self._selection = FallbackProvider()

    def get_contents(self, kind: ClipboardType) -> str:
        if kind is ClipboardType.SELECTION:
            return self._selection.get_contents(kind)
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"pyperclip paste failed: {exc}", kind=kind) from exc

    def set_contents(self, text: str, kind: ClipboardType) -> None:
        if kind is ClipboardType.SELECTION:
            self._selection.set_contents(text, kind)
            return
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"pyperclip copy failed: {exc}", kind=kind) from exc


__all__ = [
    "COMMAND_SPECS",
    "CommandProvider",
    "CommandSpec",
    "FallbackProvider",
    "PyperclipProvider",
]
