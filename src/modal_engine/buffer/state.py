"""Cursor coordinates and mode enumerations shared by buffers and modes."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

Cursor = Tuple[int, int]  # (line_index, offset)


class CursorMode(str, Enum):
    """Editing modes; the value doubles as the keymap mode name."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"


class CursorStyle(str, Enum):
    BLOCK = "block"
    BAR = "bar"
    UNDERLINE = "underline"


CURSOR_STYLES = {
    CursorMode.NORMAL: CursorStyle.BLOCK,
    CursorMode.INSERT: CursorStyle.BAR,
    CursorMode.VISUAL: CursorStyle.UNDERLINE,
}
