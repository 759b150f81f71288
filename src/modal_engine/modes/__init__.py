"""Mode state machine and command dispatch."""

from .base_mode import DispatchState, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode
from .insert_mode import DEFAULT_EXIT_CHORD, InsertMode
from .visual_mode import VisualMode
from .dispatcher import CommandDispatcher

__all__ = [
    "CommandDispatcher",
    "DEFAULT_EXIT_CHORD",
    "DispatchState",
    "InsertMode",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "VisualMode",
]
