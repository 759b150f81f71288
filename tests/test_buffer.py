from __future__ import annotations

import pytest

from modal_engine.buffer import (
    Buffer,
    BufferValidationError,
    CursorMode,
    CursorStyle,
    DocumentOpenError,
)
from modal_engine.buffer.history import UndoTimeline
from modal_engine.commands import CommandContext, CommandType, execute


def make_buffer(text: str, *, cursor: tuple[int, int] = (0, 0)) -> Buffer:
    buffer = Buffer.from_text(text)
    buffer.set_pos(cursor)
    return buffer


def test_scratch_buffer_defaults() -> None:
    buffer = Buffer()

    assert buffer.is_scratch
    assert buffer.name == "[scratch]"
    assert buffer.pos == (0, 0)
    assert buffer.mode is CursorMode.NORMAL
    assert buffer.len_lines() == 1


def test_cursor_coordinates_round_trip() -> None:
    buffer = make_buffer("alpha\nbe\n\ngamma")

    for index in range(buffer.len_lines()):
        for offset in range(buffer.line_content_len(index) + 1):
            buffer.set_pos((index, offset))
            assert buffer.as_curs_pos(buffer.as_byte_pos()) == (index, offset)


def test_interior_lines_exclude_terminator() -> None:
    buffer = make_buffer("ab\ncd")

    assert buffer.len_bytes(0) == 3
    assert buffer.line_content_len(0) == 2
    assert buffer.line_content_len(1) == 2


def test_set_pos_rejects_out_of_range() -> None:
    buffer = make_buffer("ab\ncd")

    with pytest.raises(BufferValidationError):
        buffer.set_pos((2, 0))
    with pytest.raises(BufferValidationError) as excinfo:
        buffer.set_pos((0, 3))
    assert excinfo.value.cursor == (0, 3)


@pytest.mark.parametrize("height", [1, 2, 5, 20])
def test_viewport_keeps_cursor_visible(height: int) -> None:
    buffer = make_buffer("\n".join(str(n) for n in range(30)))

    for index in list(range(30)) + list(range(29, -1, -3)):
        buffer.index = index
        buffer.update_vscroll(height)
        assert buffer.vscroll <= buffer.index <= buffer.vscroll + height - 1


def test_viewport_shifts_minimally() -> None:
    buffer = make_buffer("\n".join("x" * 10))
    buffer.index = 9
    buffer.update_vscroll(3)
    assert buffer.vscroll == 7

    buffer.index = 8
    buffer.update_vscroll(3)
    assert buffer.vscroll == 7

    buffer.index = 2
    buffer.update_vscroll(3)
    assert buffer.vscroll == 2


def test_snapshot_is_relative_to_viewport() -> None:
    buffer = make_buffer("a\nb\nc\nd", cursor=(3, 1))
    buffer.update_vscroll(2)

    snapshot = buffer.snapshot(2)

    assert snapshot.lines == ("c", "d")
    assert snapshot.cursor == (1, 1)
    assert snapshot.cursor_style is CursorStyle.BLOCK
    assert snapshot.mode is CursorMode.NORMAL


def test_commit_then_undo_and_redo() -> None:
    buffer = Buffer()
    for index, ch in enumerate("abc"):
        buffer.insert_char(index, ch)

    assert buffer.commit()
    assert not buffer.commit()
    assert len(buffer.history) == 1

    assert buffer.undo()
    assert str(buffer.text) == ""
    assert buffer.pos == (0, 0)

    assert buffer.redo()
    assert str(buffer.text) == "abc"
    assert buffer.pos == (0, 3)
    assert not buffer.redo()


def test_abort_discards_pending_edits() -> None:
    buffer = make_buffer("keep")
    buffer.insert_char(4, "!")
    assert buffer.remove_char(0) == "k"

    assert buffer.abort()

    assert str(buffer.text) == "keep"
    assert buffer.pending.is_empty
    assert len(buffer.history) == 0


def test_non_adjacent_edits_are_separated() -> None:
    buffer = make_buffer("abc")
    buffer.insert_char(0, "x")
    buffer.insert_char(4, "y")

    assert len(buffer.pending) == 3
    buffer.commit()
    buffer.undo()
    assert str(buffer.text) == "abc"


def test_from_path_reads_file(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")

    buffer = Buffer.from_path(path)

    assert buffer.name == "notes.txt"
    assert buffer.len_lines() == 3
    assert not buffer.is_scratch


def test_from_path_wraps_missing_file(tmp_path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(DocumentOpenError) as excinfo:
        Buffer.from_path(missing)

    assert excinfo.value.path == missing


def test_move_down_clamps_to_last_line() -> None:
    buffer = make_buffer("a\nbb\nccc", cursor=(0, 1))

    execute(CommandType.MOVE_DOWN, CommandContext(buffer=buffer, count=5))

    assert buffer.pos == (2, 1)


def test_explicit_empty_history_is_kept() -> None:
    history = UndoTimeline()

    buffer = Buffer(history=history)

    assert buffer.history is history
