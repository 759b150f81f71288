"""Document buffer: rope text, cursor coordinates, viewport, and edit history."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from modal_engine.runtime import telemetry

from .errors import DocumentOpenError
from .history import UndoTimeline
from .rope import LINE_BREAK, Rope
from .state import CURSOR_STYLES, Cursor, CursorMode, CursorStyle
from .transaction import Transaction
from .validation import content_len, ensure_cursor


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Read-only view handed to whatever draws the screen."""

    lines: Tuple[str, ...]
    cursor: Tuple[int, int]  # (column, row) relative to the viewport
    cursor_style: CursorStyle
    mode: CursorMode
    name: str


class Buffer:
    def __init__(
        self,
        *,
        text: Optional[Rope] = None,
        path: Optional[Path] = None,
        history: Optional[UndoTimeline] = None,
    ) -> None:
        self.text = text if text is not None else Rope()
        self.path = path
        self.history = history if history is not None else UndoTimeline()
        self.index = 0
        self.offset = 0
        self.vscroll = 0
        self.mode = CursorMode.NORMAL
        self._pending = Transaction()

    @classmethod
    def from_text(cls, text: str, *, path: Optional[Path] = None) -> "Buffer":
        return cls(text=Rope(text), path=path)

    @classmethod
    def from_path(cls, path: str | Path) -> "Buffer":
        target = Path(path)
        with telemetry.span(
            "buffer::open", component="buffer", metadata={"path": str(target)}
        ):
            try:
                content = target.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise DocumentOpenError(target, str(exc)) from exc
        return cls.from_text(content, path=target)

    @property
    def name(self) -> str:
        return self.path.name if self.path is not None else "[scratch]"

    @property
    def is_scratch(self) -> bool:
        return self.path is None

    @property
    def is_insert(self) -> bool:
        return self.mode is CursorMode.INSERT

    @property
    def pos(self) -> Cursor:
        return (self.index, self.offset)

    def set_pos(self, pos: Cursor) -> None:
        self.index, self.offset = ensure_cursor(self.text, pos)

    # -- coordinate model -------------------------------------------------

    def line_byte(self, index: int) -> int:
        return self.text.line_to_char(index)

    def as_byte_pos(self) -> int:
        return self.offset + self.text.line_to_char(self.index)

    def as_curs_pos(self, pos: int) -> Cursor:
        index = self.text.char_to_line(pos)
        return (index, pos - self.text.line_to_char(index))

    def len_bytes(self, index: int) -> int:
        return self.text.line_len(index)

    def line_content_len(self, index: int) -> int:
        return content_len(self.text, index)

    def len_lines(self) -> int:
        return self.text.len_lines()

    def len_chars(self) -> int:
        return self.text.len_chars()

    def char(self, pos: int) -> str:
        return self.text.char(pos)

    def clamp_to_line(self) -> None:
        limit = self.line_content_len(self.index)
        if self.offset > limit:
            self.offset = limit

    def update_vscroll(self, height: int) -> None:
        height = max(height, 1)
        upper_bound = self.vscroll + height - 1
        if self.index < self.vscroll:
            self.vscroll = self.index
        elif self.index > upper_bound:
            self.vscroll = self.index - height + 1

    def snapshot(self, height: int) -> RenderSnapshot:
        height = max(height, 1)
        last = min(self.vscroll + height, self.len_lines())
        lines = tuple(
            self.text.line(index).rstrip(LINE_BREAK)
            for index in range(self.vscroll, last)
        )
        return RenderSnapshot(
            lines=lines,
            cursor=(self.offset, self.index - self.vscroll),
            cursor_style=CURSOR_STYLES[self.mode],
            mode=self.mode,
            name=self.name,
        )

    # -- edits ------------------------------------------------------------

    @property
    def pending(self) -> Transaction:
        return self._pending

    def insert_char(self, pos: int, ch: str) -> None:
        tx = Transaction()
        tx.insert_char(pos, ch)
        self._record(tx, cursor=pos)

    def remove_char(self, pos: int) -> str:
        ch = self.text.char(pos)
        tx = Transaction()
        tx.delete_char(pos, ch)
        self._record(tx, cursor=pos + 1)
        return ch

    def _record(self, tx: Transaction, *, cursor: int) -> None:
        # Edits that do not continue the burst are separated by a Move so
        # coalescing never joins non-adjacent text.
        if not self._pending.is_empty and self._pending.tail_pos != cursor:
            self._pending.shift(cursor)
        tx.apply(self.text)
        self._pending.merge(tx)

    def commit(self) -> bool:
        if self._pending.is_empty:
            return False
        self.history.push(self._pending)
        telemetry.record_event(
            "history.commit",
            level="debug",
            data={"buffer": self.name, "actions": len(self._pending)},
        )
        self._pending = Transaction()
        return True

    def abort(self) -> bool:
        if self._pending.is_empty:
            return False
        pending, self._pending = self._pending, Transaction()
        self._place_cursor(pending.inverse().apply(self.text))
        return True

    def undo(self) -> bool:
        self.commit()
        entry = self.history.undo()
        if entry is None:
            return False
        self._place_cursor(entry.inverse().apply(self.text))
        telemetry.record_event("history.undo", level="debug", data={"buffer": self.name})
        return True

    def redo(self) -> bool:
        self.commit()
        entry = self.history.redo()
        if entry is None:
            return False
        self._place_cursor(entry.apply(self.text))
        telemetry.record_event("history.redo", level="debug", data={"buffer": self.name})
        return True

    def _place_cursor(self, pos: Optional[int]) -> None:
        if pos is None:
            return
        self.index, self.offset = self.as_curs_pos(min(pos, self.len_chars()))
        self.clamp_to_line()


__all__ = ["Buffer", "RenderSnapshot"]
