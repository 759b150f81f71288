"""Command handlers executed when a key sequence resolves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

from modal_engine.buffer import Buffer, CursorMode, TransactionResult

from . import editing
from .types import CommandType


class DocumentSwitcher(Protocol):
    def next_document(self) -> Buffer: ...

    def previous_document(self) -> Buffer: ...


@dataclass(slots=True)
class CommandContext:
    buffer: Buffer
    documents: Optional[DocumentSwitcher] = None
    count: int = 1


@dataclass(slots=True)
class CommandResult:
    """What the dispatcher should do once a handler returns."""

    switch_to: Optional[CursorMode] = None
    transaction: TransactionResult = TransactionResult.COMMIT
    exit: bool = False
    message: Optional[str] = None


CommandHandler = Callable[[CommandContext], CommandResult]

_KEEP = TransactionResult.KEEP


def _edit_result(context: CommandContext) -> TransactionResult:
    # Edits outside insert mode are complete undo steps on their own.
    return _KEEP if context.buffer.is_insert else TransactionResult.COMMIT


def switch_to_insert_mode(context: CommandContext) -> CommandResult:
    return CommandResult(switch_to=CursorMode.INSERT, transaction=_KEEP)


def switch_to_normal_mode(context: CommandContext) -> CommandResult:
    return CommandResult(switch_to=CursorMode.NORMAL)


def switch_to_visual_mode(context: CommandContext) -> CommandResult:
    return CommandResult(switch_to=CursorMode.VISUAL)


def move_back(context: CommandContext) -> CommandResult:
    editing.move_cursor_back_by(context.buffer, context.count)
    return CommandResult()


def move_forward(context: CommandContext) -> CommandResult:
    editing.move_cursor_forward_by(context.buffer, context.count)
    return CommandResult()


def move_up(context: CommandContext) -> CommandResult:
    editing.move_cursor_up_by(context.buffer, context.count)
    return CommandResult()


def move_down(context: CommandContext) -> CommandResult:
    editing.move_cursor_down_by(context.buffer, context.count)
    return CommandResult()


def go_to_start_line(context: CommandContext) -> CommandResult:
    editing.move_cursor_to_line_start(context.buffer)
    return CommandResult()


def go_to_end_line(context: CommandContext) -> CommandResult:
    editing.move_cursor_to_line_end(context.buffer)
    return CommandResult()


def switch_to_insert_line_end(context: CommandContext) -> CommandResult:
    editing.move_cursor_to_line_end(context.buffer)
    return CommandResult(switch_to=CursorMode.INSERT, transaction=_KEEP)


def switch_to_insert_line_start(context: CommandContext) -> CommandResult:
    editing.move_cursor_to_line_start(context.buffer)
    return CommandResult(switch_to=CursorMode.INSERT, transaction=_KEEP)


def switch_to_insert_new_line_next(context: CommandContext) -> CommandResult:
    editing.open_line_below(context.buffer)
    return CommandResult(switch_to=CursorMode.INSERT, transaction=_KEEP)


def switch_to_insert_new_line_prev(context: CommandContext) -> CommandResult:
    editing.open_line_above(context.buffer)
    return CommandResult(switch_to=CursorMode.INSERT, transaction=_KEEP)


def delete_char(context: CommandContext) -> CommandResult:
    editing.delete_char(context.buffer)
    return CommandResult(transaction=_edit_result(context))


def new_line(context: CommandContext) -> CommandResult:
    editing.new_line(context.buffer)
    return CommandResult(transaction=_edit_result(context))


def undo(context: CommandContext) -> CommandResult:
    changed = context.buffer.undo()
    return CommandResult(message="undo" if changed else "nothing_to_undo")


def redo(context: CommandContext) -> CommandResult:
    changed = context.buffer.redo()
    return CommandResult(message="redo" if changed else "nothing_to_redo")


def abort_insert(context: CommandContext) -> CommandResult:
    return CommandResult(
        switch_to=CursorMode.NORMAL, transaction=TransactionResult.ABORT
    )


def next_document(context: CommandContext) -> CommandResult:
    if context.documents is None:
        return CommandResult(message="no_documents")
    return CommandResult(message=context.documents.next_document().name)


def previous_document(context: CommandContext) -> CommandResult:
    if context.documents is None:
        return CommandResult(message="no_documents")
    return CommandResult(message=context.documents.previous_document().name)


def quit_editor(context: CommandContext) -> CommandResult:
    return CommandResult(exit=True, message="quit")


COMMANDS: Dict[CommandType, CommandHandler] = {
    CommandType.SWITCH_TO_INSERT_MODE: switch_to_insert_mode,
    CommandType.SWITCH_TO_NORMAL_MODE: switch_to_normal_mode,
    CommandType.SWITCH_TO_VISUAL_MODE: switch_to_visual_mode,
    CommandType.MOVE_BACK: move_back,
    CommandType.MOVE_DOWN: move_down,
    CommandType.MOVE_UP: move_up,
    CommandType.MOVE_FORWARD: move_forward,
    CommandType.SWITCH_TO_INSERT_LINE_END: switch_to_insert_line_end,
    CommandType.SWITCH_TO_INSERT_LINE_START: switch_to_insert_line_start,
    CommandType.SWITCH_TO_INSERT_NEW_LINE_NEXT: switch_to_insert_new_line_next,
    CommandType.SWITCH_TO_INSERT_NEW_LINE_PREV: switch_to_insert_new_line_prev,
    CommandType.GO_TO_START_LINE: go_to_start_line,
    CommandType.GO_TO_END_LINE: go_to_end_line,
    CommandType.DELETE_CHAR: delete_char,
    CommandType.NEW_LINE: new_line,
    CommandType.UNDO: undo,
    CommandType.REDO: redo,
    CommandType.ABORT_INSERT: abort_insert,
    CommandType.NEXT_DOCUMENT: next_document,
    CommandType.PREVIOUS_DOCUMENT: previous_document,
    CommandType.QUIT: quit_editor,
}


def execute(command: CommandType, context: CommandContext) -> CommandResult:
    return COMMANDS[command](context)


__all__ = [
    "COMMANDS",
    "CommandContext",
    "CommandHandler",
    "CommandResult",
    "DocumentSwitcher",
    "execute",
]
