"""Commands bound to key sequences, and the buffer edits behind them."""

from .types import CommandType
from .core import (
    COMMANDS,
    CommandContext,
    CommandHandler,
    CommandResult,
    DocumentSwitcher,
    execute,
)

__all__ = [
    "COMMANDS",
    "CommandContext",
    "CommandHandler",
    "CommandResult",
    "CommandType",
    "DocumentSwitcher",
    "execute",
]
