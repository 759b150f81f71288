from __future__ import annotations

from modal_engine.buffer import Delete, Insert, Move, Rope, Transaction
from modal_engine.buffer.history import UndoTimeline


def typed(text: str, start: int = 0) -> Transaction:
    tx = Transaction()
    for index, ch in enumerate(text):
        tx.insert_char(start + index, ch)
    return tx


def test_consecutive_inserts_coalesce() -> None:
    tx = typed("test")

    assert tx.actions == (Insert("test", 0),)


def test_consecutive_deletes_coalesce_backwards() -> None:
    rope = Rope("test")
    tx = Transaction()
    tx.delete_char(3, "t")
    tx.delete_char(2, "s")

    assert len(tx) == 1
    (action,) = tx.actions
    assert isinstance(action, Delete)
    assert action.pos == 2
    assert action.text == "st"

    tx.apply(rope)
    assert rope == "te"


def test_shifts_collapse_into_one_move() -> None:
    tx = Transaction()
    tx.shift(3)
    tx.shift(1)

    assert tx.actions == (Move(1),)
    assert tx.tail_pos == 1


def test_mixed_edit_burst_produces_expected_text() -> None:
    tx = typed("test")
    tx.delete_char(3, "t")
    tx.delete_char(2, "s")
    tx.shift(1)
    tx.shift(0)
    tx.insert_char(0, " ")
    tx.shift(0)
    tx.insert_char(0, "t")
    tx.insert_char(1, "e")

    rope = Rope()
    tx.apply(rope)

    assert rope == "te te"

    tx.inverse().apply(rope)
    assert rope == ""


def test_inverse_twice_is_identity() -> None:
    tx = typed("abc")
    tx.delete_char(2, "c")
    tx.shift(0)

    assert tx.inverse().inverse() == tx


def test_merge_coalesces_across_transactions() -> None:
    tx = typed("ab")
    tx.merge(typed("cd", start=2))

    assert tx.actions == (Insert("abcd", 0),)

    deletes = Transaction()
    deletes.delete_char(3, "d")
    other = Transaction()
    other.delete_char(2, "c")
    deletes.merge(other)

    assert deletes.actions == (Delete("dc", 2),)


def test_delete_str_anchors_before_cursor() -> None:
    rope = Rope("hello")
    tx = Transaction()
    tx.delete_str(5, "llo")
    tx.apply(rope)

    assert rope == "he"
    assert tx.inverse().apply(rope) == 5
    assert rope == "hello"


def test_timeline_push_drops_redo_tail() -> None:
    timeline = UndoTimeline()
    first, second, third = typed("a"), typed("b", 1), typed("c", 1)
    timeline.push(first)
    timeline.push(second)

    assert timeline.undo() is second
    timeline.push(third)

    assert not timeline.can_redo()
    assert len(timeline) == 2
    assert timeline.undo() is third
    assert timeline.undo() is first
    assert timeline.undo() is None
