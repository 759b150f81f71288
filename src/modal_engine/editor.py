"""Document set and input entry point for hosts."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from modal_engine.buffer import Buffer, DocumentOpenError, RenderSnapshot
from modal_engine.config import EditorConfig
from modal_engine.keymaps import Input, Keymap, build_default_keymap
from modal_engine.modes import CommandDispatcher, ModeBus, ModeResult
from modal_engine.runtime import telemetry


class EventOutcome(str, Enum):
    RENDER = "render"
    IGNORE = "ignore"
    EXIT = "exit"


class Editor:
    """Owns every open buffer plus the index of the active one.

    Each buffer carries its own text and undo history; the active index is the
    only state the documents share. Input always goes to the active buffer.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        keymap: Optional[Keymap] = None,
        bus: Optional[ModeBus] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.width = self.config.width
        self.height = self.config.height
        self.documents: List[Buffer] = []
        self._active: Optional[int] = None
        self.bus = bus or ModeBus()
        self.dispatcher = CommandDispatcher(
            keymap
            or build_default_keymap(
                self.config.binding_overrides, logger_name="modal_engine.keymaps"
            ),
            documents=self,
            bus=self.bus,
            exit_chord=self.config.exit_input,
        )

    @property
    def active(self) -> Buffer:
        if self._active is None:
            self.open_scratch()
        assert self._active is not None
        return self.documents[self._active]

    @property
    def active_index(self) -> Optional[int]:
        return self._active

    @property
    def should_exit(self) -> bool:
        return self.dispatcher.should_exit

    # -- document lifecycle -----------------------------------------------

    def open_file(self, path: str | Path) -> Buffer:
        """Open ``path`` and make it active; raises :class:`DocumentOpenError`."""

        buffer = Buffer.from_path(path)
        self._add(buffer)
        telemetry.record_event("document.open", data={"path": str(buffer.path)})
        self.bus.emit("document.open", buffer)
        return buffer

    def open_scratch(self) -> Buffer:
        buffer = Buffer()
        self._add(buffer)
        self.bus.emit("document.open", buffer)
        return buffer

    def open_files(self, paths: Iterable[str | Path]) -> Tuple[int, int]:
        """Open every path, counting failures instead of stopping on them.

        Returns ``(opened, failed)``. The first document that opens becomes
        active; if none does, a scratch buffer is created.
        """

        opened = failed = 0
        first: Optional[int] = None
        for path in paths:
            try:
                self.open_file(path)
            except DocumentOpenError as exc:
                failed += 1
                telemetry.record_event(
                    "document.open_failed",
                    level="error",
                    data={"path": str(exc.path), "reason": exc.reason},
                )
                self.bus.emit("document.error", exc)
            else:
                opened += 1
                if first is None:
                    first = self._active

        if failed:
            telemetry.record_event(
                "document.open_summary", data={"opened": opened, "failed": failed}
            )
        if first is not None:
            self._active = first
        elif not self.documents:
            self.open_scratch()
        return opened, failed

    def close_document(self, index: Optional[int] = None) -> None:
        if not self.documents:
            return
        target = self._active if index is None else index
        assert target is not None
        del self.documents[target]
        if not self.documents:
            self._active = None
            self.open_scratch()
            return
        assert self._active is not None
        if self._active >= target:
            self._active = max(self._active - 1, 0)

    def switch_to(self, index: int) -> Buffer:
        if not 0 <= index < len(self.documents):
            raise IndexError(f"document index {index} out of range")
        self._active = index
        buffer = self.documents[index]
        buffer.update_vscroll(self.height)
        self.bus.emit("document.switch", buffer)
        return buffer

    def next_document(self) -> Buffer:
        if not self.documents:
            return self.active
        current = self._active or 0
        return self.switch_to((current + 1) % len(self.documents))

    def previous_document(self) -> Buffer:
        if not self.documents:
            return self.active
        current = self._active or 0
        return self.switch_to((current - 1) % len(self.documents))

    def _add(self, buffer: Buffer) -> None:
        self.documents.append(buffer)
        self._active = len(self.documents) - 1

    # -- input and rendering ------------------------------------------------

    def handle_input(self, key: Input) -> EventOutcome:
        result: ModeResult = self.dispatcher.handle_input(
            key, self.active, height=self.height
        )
        if self.dispatcher.should_exit:
            return EventOutcome.EXIT
        return EventOutcome.RENDER if result.consumed else EventOutcome.IGNORE

    def resize(self, width: int, height: int) -> None:
        self.width = max(width, 1)
        self.height = max(height, 1)
        self.active.update_vscroll(self.height)

    def snapshot(self) -> RenderSnapshot:
        return self.active.snapshot(self.height)

    def cursor(self) -> Tuple[int, int]:
        return self.snapshot().cursor


__all__ = ["Editor", "EventOutcome"]
