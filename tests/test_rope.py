from __future__ import annotations

import pytest

from modal_engine.buffer import Rope
from modal_engine.buffer.rope import LEAF_CHUNK


def make_lines(count: int) -> str:
    return "\n".join(f"line {index}" for index in range(count))


def test_empty_rope_has_one_line() -> None:
    rope = Rope()

    assert rope.len_chars() == 0
    assert rope.len_lines() == 1
    assert rope.line(0) == ""
    assert str(rope) == ""


def test_line_metrics_follow_line_breaks() -> None:
    rope = Rope("ab\ncd\n")

    assert rope.len_lines() == 3
    assert rope.line(0) == "ab\n"
    assert rope.line(2) == ""
    assert rope.line_len(0) == 3
    assert rope.line_to_char(1) == 3
    assert rope.line_to_char(3) == rope.len_chars()
    assert rope.char_to_line(2) == 0
    assert rope.char_to_line(3) == 1
    assert rope.char_to_line(6) == 2


def test_insert_and_remove_edit_text() -> None:
    rope = Rope("hello")

    rope.insert(5, " world")
    rope.insert(0, ">")
    rope.remove(1, 7)

    assert rope == ">world"


def test_out_of_range_edits_raise() -> None:
    rope = Rope("abc")

    with pytest.raises(IndexError):
        rope.insert(4, "x")
    with pytest.raises(IndexError):
        rope.remove(2, 5)
    with pytest.raises(IndexError):
        rope.char(3)


def test_large_text_stays_consistent_across_leaves() -> None:
    text = make_lines(400)
    rope = Rope(text)
    assert rope.len_chars() > LEAF_CHUNK * 4

    middle = len(text) // 2
    rope.insert(middle, "XYZ\n")
    expected = text[:middle] + "XYZ\n" + text[middle:]

    assert str(rope) == expected
    assert rope.len_lines() == expected.count("\n") + 1
    for line in (0, 57, 200, 399):
        start = rope.line_to_char(line)
        assert rope.char_to_line(start) == line
        assert rope.line(line) == expected.splitlines(keepends=True)[line]

    rope.remove(middle, middle + 4)
    assert str(rope) == text


def test_slice_spans_chunks() -> None:
    text = "x" * (LEAF_CHUNK * 3) + "tail"
    rope = Rope(text)

    assert rope.slice(LEAF_CHUNK - 2, LEAF_CHUNK + 2) == "xxxx"
    assert rope.slice(len(text) - 4, len(text)) == "tail"
    assert "".join(rope.chunks()) == text
