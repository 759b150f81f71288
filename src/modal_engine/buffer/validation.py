"""Invariant checks shared across buffer services."""

from __future__ import annotations

from .errors import BufferValidationError
from .rope import Rope
from .state import Cursor


def content_len(text: Rope, index: int) -> int:
    """Addressable length of line ``index``; interior lines drop the terminator."""

    length = text.line_len(index)
    if index < text.len_lines() - 1:
        length -= 1
    return length


def ensure_cursor(text: Rope, cursor: Cursor) -> Cursor:
    index, offset = cursor
    if index < 0 or index >= text.len_lines():
        raise BufferValidationError("Line index out of range", cursor=cursor)
    if offset < 0 or offset > content_len(text, index):
        raise BufferValidationError("Offset out of range", cursor=cursor)
    return cursor
