"""Rope text storage, coordinate model, and the undo/redo substrate."""

from .buffer import Buffer, RenderSnapshot
from .errors import BufferValidationError, DocumentOpenError, ModalEngineError
from .history import UndoTimeline
from .rope import Rope
from .state import Cursor, CursorMode, CursorStyle
from .transaction import (
    Action,
    Delete,
    Insert,
    Move,
    Transaction,
    TransactionResult,
)
from .validation import content_len, ensure_cursor

__all__ = [
    "Action",
    "Buffer",
    "BufferValidationError",
    "Cursor",
    "CursorMode",
    "CursorStyle",
    "Delete",
    "DocumentOpenError",
    "Insert",
    "ModalEngineError",
    "Move",
    "RenderSnapshot",
    "Rope",
    "Transaction",
    "TransactionResult",
    "UndoTimeline",
    "content_len",
    "ensure_cursor",
]
