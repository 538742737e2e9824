"""Clipboard providers and host detection."""

from __future__ import annotations

import sys
from typing import Optional

from editor_registers.runtime import telemetry
from editor_registers.runtime.settings import RegisterSettings

from .backends import (
    COMMAND_SPECS,
    CommandProvider,
    CommandSpec,
    FallbackProvider,
    PyperclipProvider,
)
from .provider import ClipboardError, ClipboardProvider, ClipboardType


def _detect_provider() -> ClipboardProvider:
    provider: Optional[ClipboardProvider] = CommandProvider.detect()
    if provider is None and sys.platform in {"darwin", "win32"}:
        provider = PyperclipProvider()
    return provider or FallbackProvider()


def get_clipboard_provider(
    settings: Optional[RegisterSettings] = None,
) -> ClipboardProvider:
    """Build the provider named by ``settings.clipboard_provider``.

    ``auto`` prefers a helper program on ``PATH``, then pyperclip on hosts
    where it talks to a native API, then the in-process fallback.
    """

    choice = (settings or RegisterSettings.from_env()).clipboard_provider
    provider: ClipboardProvider
    if choice == "none":
        provider = FallbackProvider()
    elif choice == "pyperclip":
        provider = PyperclipProvider()
    elif choice == "command":
        detected = CommandProvider.detect()
        if detected is None:
            raise ClipboardError("no clipboard helper program found on PATH")
        provider = detected
    else:
        provider = _detect_provider()

    telemetry.record_event(
        "clipboard.provider_selected",
        level="debug",
        data={"requested": choice, "provider": provider.name},
    )
    return provider


__all__ = [
    "COMMAND_SPECS",
    "ClipboardError",
    "ClipboardProvider",
    "ClipboardType",
    "CommandProvider",
    "CommandSpec",
    "FallbackProvider",
    "PyperclipProvider",
    "get_clipboard_provider",
]
