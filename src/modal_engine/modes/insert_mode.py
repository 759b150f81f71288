"""Insert mode: plain characters stream straight into the buffer."""

from __future__ import annotations

from modal_engine.buffer import Buffer, CursorMode, TransactionResult
from modal_engine.commands import editing
from modal_engine.keymaps import Input

from .base_mode import Mode, ModeContext, ModeResult

DEFAULT_EXIT_CHORD = Input.parse("ctrl+q")


class InsertMode(Mode):
    name = CursorMode.INSERT.value

    def __init__(
        self, context: ModeContext, *, exit_chord: Input = DEFAULT_EXIT_CHORD
    ) -> None:
        super().__init__(context)
        self.exit_chord = exit_chord

    def handle_key(self, key: Input, buffer: Buffer) -> ModeResult:
        if key.is_plain_char:
            self.context.state.pending = None
            editing.insert_char(buffer, key.key.name)
            return ModeResult(consumed=True, status="insert")

        if key == self.exit_chord:
            self.context.state.pending = None
            return ModeResult(
                consumed=True,
                status="exit",
                transaction=TransactionResult.COMMIT,
                exit=True,
            )

        # Named keys and modified chords (Escape, Backspace, Enter, ...) go
        # through the insert keymap; anything unbound is ignored.
        return self.resolve(key, buffer)
