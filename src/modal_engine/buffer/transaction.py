"""Coalescing edit log that applies itself to a rope and inverts exactly.

A :class:`Transaction` is one undoable edit burst. Consecutive edits of the
same kind are folded into a single action, so typing ``abc`` is recorded as
one ``Insert`` and backspacing over it as one ``Delete``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .rope import Rope


@dataclass(slots=True)
class Insert:
    content: str
    pos: int


@dataclass(slots=True)
class Delete:
    """Removal of ``len(content)`` characters starting at ``pos``.

    ``content`` is kept in reverse order: each backspace appends the character
    it removed and moves ``pos`` one step to the left.
    """

    content: str
    pos: int

    @property
    def text(self) -> str:
        return self.content[::-1]


@dataclass(slots=True)
class Move:
    pos: int


Action = Union[Insert, Delete, Move]


class TransactionResult(str, Enum):
    """What a command wants done with the pending edit burst."""

    COMMIT = "commit"
    KEEP = "keep"
    ABORT = "abort"


def _end_pos(action: Action) -> int:
    match action:
        case Insert(content=content, pos=pos):
            return pos + len(content)
        case Delete(pos=pos) | Move(pos=pos):
            return pos


def _invert(action: Action) -> Action:
    match action:
        case Insert(content=content, pos=pos):
            return Delete(content[::-1], pos)
        case Delete(content=content, pos=pos):
            return Insert(content[::-1], pos)
        case Move(pos=pos):
            return Move(pos)


class Transaction:
    def __init__(self, actions: Iterable[Action] = ()) -> None:
        self._actions: list[Action] = list(actions)

    def __repr__(self) -> str:
        return f"Transaction({self._actions!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._actions == other._actions

    def __len__(self) -> int:
        return len(self._actions)

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def is_empty(self) -> bool:
        return not self._actions

    @property
    def tail_pos(self) -> Optional[int]:
        """Cursor position the last recorded action leaves behind."""

        if not self._actions:
            return None
        return _end_pos(self._actions[-1])

    def insert_char(self, pos: int, ch: str) -> None:
        self.insert_str(pos, ch)

    def insert_str(self, pos: int, text: str) -> None:
        if not text:
            return
        last = self._actions[-1] if self._actions else None
        if isinstance(last, Insert):
            last.content += text
        else:
            self._actions.append(Insert(text, pos))

    def delete_char(self, pos: int, ch: str) -> None:
        """Record removal of ``ch`` found at ``pos``."""

        self._delete(pos, ch)

    def delete_str(self, pos: int, text: str) -> None:
        """Record removal of ``text`` ending at cursor position ``pos``."""

        if not text:
            return
        self._delete(max(pos - len(text), 0), text[::-1])

    def _delete(self, pos: int, reversed_text: str) -> None:
        last = self._actions[-1] if self._actions else None
        if isinstance(last, Delete):
            last.pos = pos
            last.content += reversed_text
        else:
            self._actions.append(Delete(reversed_text, pos))

    def shift(self, pos: int) -> None:
        last = self._actions[-1] if self._actions else None
        if isinstance(last, Move):
            last.pos = pos
        else:
            self._actions.append(Move(pos))

    def merge(self, other: "Transaction") -> None:
        """Replay ``other`` through the coalescing entry points."""

        for action in other._actions:
            match action:
                case Insert(content=content, pos=pos):
                    self.insert_str(pos, content)
                case Delete(content=content, pos=pos):
                    self._delete(pos, content)
                case Move(pos=pos):
                    self.shift(pos)

    def apply(self, text: Rope) -> Optional[int]:
        last_pos: Optional[int] = None
        for action in self._actions:
            match action:
                case Insert(content=content, pos=pos):
                    text.insert(pos, content)
                case Delete(content=content, pos=pos):
                    text.remove(pos, pos + len(content))
            last_pos = _end_pos(action)
        return last_pos

    def inverse(self) -> "Transaction":
        return Transaction(_invert(action) for action in reversed(self._actions))


__all__ = [
    "Action",
    "Delete",
    "Insert",
    "Move",
    "Transaction",
    "TransactionResult",
]
