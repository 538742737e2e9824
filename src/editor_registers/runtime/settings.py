"""Environment-driven settings for the register store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "EDITOR_REGISTERS_"

CLIPBOARD_PROVIDERS = ("auto", "command", "pyperclip", "none")
LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n"}
SCRATCH_BUFFER_NAME = "[scratch]"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def resolve_line_ending(value: str) -> str:
    """Map ``native``/``lf``/``crlf`` to the separator used for clipboard text."""

    key = value.strip().lower()
    if key == "native":
        return os.linesep
    try:
        return LINE_ENDINGS[key]
    except KeyError as exc:
        raise ValueError(f"Unknown line ending '{value}'.") from exc


@dataclass(frozen=True, slots=True)
class RegisterSettings:
    clipboard_provider: str = "auto"
    line_ending: str = os.linesep
    scratch_name: str = SCRATCH_BUFFER_NAME

    def __post_init__(self) -> None:
        if self.clipboard_provider not in CLIPBOARD_PROVIDERS:
            raise ValueError(
                f"Unknown clipboard provider '{self.clipboard_provider}', "
                f"expected one of {', '.join(CLIPBOARD_PROVIDERS)}"
            )
        if not self.line_ending:
            raise ValueError("line_ending cannot be empty")

    @classmethod
    def from_env(cls) -> "RegisterSettings":
        return cls(
            clipboard_provider=(env("CLIPBOARD_PROVIDER") or "auto").strip().lower(),
            line_ending=resolve_line_ending(env("LINE_ENDING") or "native"),
            scratch_name=env("SCRATCH_NAME") or SCRATCH_BUFFER_NAME,
        )


__all__ = [
    "CLIPBOARD_PROVIDERS",
    "ENV_PREFIX",
    "RegisterSettings",
    "SCRATCH_BUFFER_NAME",
    "env",
    "env_flag",
    "resolve_line_ending",
]
