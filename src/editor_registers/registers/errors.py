"""Errors surfaced to the command layer by register operations."""

from __future__ import annotations


class RegisterError(RuntimeError):
    """Base class for failed register writes and pushes."""

    def __init__(self, message: str, *, register: str) -> None:
        super().__init__(message)
        self.register = register


class UnsupportedOperation(RegisterError):
    """Raised when writing or pushing to a computed register (``#``, ``.``, ``%``)."""

    def __init__(self, register: str, operation: str) -> None:
        super().__init__(
            f"Register {register} does not support {operation}", register=register
        )
        self.operation = operation


class ClipboardFailure(RegisterError):
    """Raised when the platform clipboard rejects a write or push."""
