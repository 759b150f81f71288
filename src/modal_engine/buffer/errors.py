"""Exception types raised by the buffer layer."""

from __future__ import annotations

from pathlib import Path

from .state import Cursor


class ModalEngineError(RuntimeError):
    """Base class for errors raised by the editing core."""


class BufferValidationError(ModalEngineError):
    """Raised when a cursor escapes the addressable range of its buffer."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class DocumentOpenError(ModalEngineError):
    """Raised when a document cannot be read into a buffer."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot open '{path}': {reason}")
        self.path = path
        self.reason = reason
