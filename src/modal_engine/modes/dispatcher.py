"""Command dispatcher: routes input by cursor mode and settles the outcome."""

from __future__ import annotations

from typing import Dict, Optional

from modal_engine.buffer import Buffer, CursorMode, TransactionResult
from modal_engine.commands import DocumentSwitcher
from modal_engine.keymaps import Input, Keymap, KeymapResolver
from modal_engine.runtime import telemetry

from .base_mode import DispatchState, Mode, ModeBus, ModeContext, ModeResult
from .insert_mode import DEFAULT_EXIT_CHORD, InsertMode
from .normal_mode import NormalMode
from .visual_mode import VisualMode


class CommandDispatcher:
    """Owns the dispatch state and one mode object per :class:`CursorMode`.

    Each call to :meth:`handle_input` fully resolves one input: mode lookup,
    trie or character-stream dispatch, the transaction outcome, any mode
    switch, and the viewport refresh.
    """

    def __init__(
        self,
        keymap: Keymap,
        *,
        documents: Optional[DocumentSwitcher] = None,
        bus: Optional[ModeBus] = None,
        exit_chord: Input = DEFAULT_EXIT_CHORD,
    ) -> None:
        self.state = DispatchState()
        self.bus = bus or ModeBus()
        self.context = ModeContext(
            resolver=KeymapResolver(keymap, logger_name="modal_engine.keymaps"),
            state=self.state,
            bus=self.bus,
            documents=documents,
        )
        self._modes: Dict[CursorMode, Mode] = {
            CursorMode.NORMAL: NormalMode(self.context),
            CursorMode.INSERT: InsertMode(self.context, exit_chord=exit_chord),
            CursorMode.VISUAL: VisualMode(self.context),
        }

    @property
    def should_exit(self) -> bool:
        return self.state.should_exit

    @property
    def in_progress(self) -> bool:
        return self.state.in_progress

    def mode_for(self, buffer: Buffer) -> Mode:
        return self._modes[buffer.mode]

    def handle_input(
        self, key: Input, buffer: Buffer, *, height: Optional[int] = None
    ) -> ModeResult:
        mode = self.mode_for(buffer)
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.token, "mode": mode.name},
        ):
            result = mode.handle_key(key, buffer)
        self._settle(buffer, result)
        if height is not None:
            buffer.update_vscroll(height)
        return result

    def switch_mode(self, buffer: Buffer, mode: CursorMode) -> None:
        previous = buffer.mode
        if previous is mode:
            return
        buffer.mode = mode
        self.state.pending = None
        buffer.clamp_to_line()
        telemetry.record_event(
            "mode.switch",
            level="debug",
            data={"from": previous.value, "to": mode.value, "buffer": buffer.name},
        )
        self.bus.emit("mode.switch", mode)

    def _settle(self, buffer: Buffer, result: ModeResult) -> None:
        match result.transaction:
            case TransactionResult.COMMIT:
                buffer.commit()
            case TransactionResult.ABORT:
                buffer.abort()
            case TransactionResult.KEEP:
                pass
        if result.switch_to is not None:
            self.switch_mode(buffer, result.switch_to)
        if result.exit:
            self.state.should_exit = True
            self.bus.emit("session.exit", buffer.name)


__all__ = ["CommandDispatcher"]
