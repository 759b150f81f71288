"""Linear undo/redo history of committed transactions."""

from __future__ import annotations

from typing import List, Optional

from .transaction import Transaction


class UndoTimeline:
    """Committed edit bursts with a cursor separating undo from redo."""

    def __init__(self) -> None:
        self._entries: List[Transaction] = []
        self._index: int = -1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, transaction: Transaction) -> None:
        if self._index < len(self._entries) - 1:
            del self._entries[self._index + 1 :]
        self._entries.append(transaction)
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[Transaction]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[Transaction]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]
