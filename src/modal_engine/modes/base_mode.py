"""Base classes and shared plumbing for editor modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from modal_engine.buffer import Buffer, CursorMode, TransactionResult
from modal_engine.commands import CommandContext, CommandType, DocumentSwitcher, execute
from modal_engine.keymaps import Input, KeymapResolver, Node, ResolutionStatus
from modal_engine.runtime import telemetry


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    status: str = "ok"
    command: Optional[CommandType] = None
    switch_to: Optional[CursorMode] = None
    transaction: TransactionResult = TransactionResult.KEEP
    exit: bool = False
    message: Optional[str] = None


@dataclass(slots=True)
class DispatchState:
    """Pending multi-key match and the exit flag, owned by one dispatcher."""

    pending: Optional[Node] = None
    should_exit: bool = False

    @property
    def in_progress(self) -> bool:
        return self.pending is not None


class ModeBus:
    """Minimal event bus letting hosts observe dispatcher signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Services every mode can reach."""

    resolver: KeymapResolver
    state: DispatchState
    bus: ModeBus
    documents: Optional[DocumentSwitcher] = None


class Mode:
    """Base class for concrete modes; resolves input through the mode's trie."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def handle_key(self, key: Input, buffer: Buffer) -> ModeResult:
        return self.resolve(key, buffer)

    def resolve(self, key: Input, buffer: Buffer) -> ModeResult:
        state = self.context.state
        result = self.context.resolver.resolve(self.name, key, state.pending)

        if result.status is ResolutionStatus.MATCH and result.command is not None:
            state.pending = None
            return self.execute(result.command, buffer)

        if result.status is ResolutionStatus.PENDING:
            state.pending = result.node
            return ModeResult(consumed=True, status="pending")

        state.pending = None
        if result.cancelled:
            self.context.bus.emit("sequence.cancelled", key)
            return ModeResult(consumed=True, status="miss", message="sequence_cancelled")
        return ModeResult(consumed=False, status="miss")

    def execute(self, command: CommandType, buffer: Buffer) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"command": command.value, "mode": self.name},
        ):
            outcome = execute(
                command, CommandContext(buffer=buffer, documents=self.context.documents)
            )
        return ModeResult(
            consumed=True,
            status="match",
            command=command,
            switch_to=outcome.switch_to,
            transaction=outcome.transaction,
            exit=outcome.exit,
            message=outcome.message,
        )
