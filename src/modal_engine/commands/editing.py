"""Cursor motions and single-character edits applied directly to a buffer.

Every function here keeps the cursor within the addressable range of its line.
Content changes go through :meth:`Buffer.insert_char` and
:meth:`Buffer.remove_char` so they land in the pending transaction.
"""

from __future__ import annotations

from modal_engine.buffer import Buffer
from modal_engine.buffer.rope import LINE_BREAK


def cursor_line_bounds(buffer: Buffer) -> None:
    buffer.clamp_to_line()


def move_cursor_forward_by(buffer: Buffer, count: int) -> None:
    buffer.offset += count
    cursor_line_bounds(buffer)


def move_cursor_back_by(buffer: Buffer, count: int) -> None:
    buffer.offset = max(buffer.offset - count, 0)


def move_cursor_up_by(buffer: Buffer, count: int) -> None:
    buffer.index = max(buffer.index - count, 0)
    cursor_line_bounds(buffer)


def move_cursor_down_by(buffer: Buffer, count: int) -> None:
    buffer.index = min(buffer.index + count, buffer.len_lines() - 1)
    cursor_line_bounds(buffer)


def move_cursor_to_line_start(buffer: Buffer) -> None:
    buffer.offset = 0


def move_cursor_to_line_end(buffer: Buffer) -> None:
    buffer.offset = buffer.len_bytes(buffer.index)
    cursor_line_bounds(buffer)


def insert_char(buffer: Buffer, ch: str) -> None:
    if ch == LINE_BREAK:
        new_line(buffer)
        return
    buffer.insert_char(buffer.as_byte_pos(), ch)
    buffer.offset += 1


def new_line(buffer: Buffer) -> None:
    buffer.insert_char(buffer.as_byte_pos(), LINE_BREAK)
    buffer.offset = 0
    buffer.index += 1


def delete_char(buffer: Buffer) -> None:
    """Backspace: remove the character left of the cursor."""

    pos = buffer.as_byte_pos()
    if pos == 0:
        return
    if buffer.offset == 0:
        # Land past the previous line's terminator so stepping back one
        # character leaves the cursor where the lines join.
        move_cursor_up_by(buffer, 1)
        buffer.offset = buffer.len_bytes(buffer.index)
    buffer.remove_char(pos - 1)
    move_cursor_back_by(buffer, 1)
    cursor_line_bounds(buffer)


def open_line_below(buffer: Buffer) -> None:
    move_cursor_to_line_end(buffer)
    new_line(buffer)


def open_line_above(buffer: Buffer) -> None:
    if buffer.index == 0:
        move_cursor_to_line_start(buffer)
        new_line(buffer)
        move_cursor_up_by(buffer, 1)
    else:
        move_cursor_up_by(buffer, 1)
        open_line_below(buffer)


__all__ = [
    "cursor_line_bounds",
    "delete_char",
    "insert_char",
    "move_cursor_back_by",
    "move_cursor_down_by",
    "move_cursor_forward_by",
    "move_cursor_to_line_end",
    "move_cursor_to_line_start",
    "move_cursor_up_by",
    "new_line",
    "open_line_above",
    "open_line_below",
]
