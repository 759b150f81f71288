"""Static binding table, keymap tries, and multi-key resolution."""

from .models import Binding, Input, Key, KeySequence
from .registry import (
    BindingTable,
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    UnknownCommandError,
)
from .resolver import KeymapResolver, ResolutionResult, ResolutionStatus
from .trie import Keymap, KeymapNode, Leaf, Node
from .defaults import DEFAULT_BINDINGS, build_default_keymap, load_default_keymaps

__all__ = [
    "Binding",
    "BindingTable",
    "DEFAULT_BINDINGS",
    "Input",
    "Key",
    "KeySequence",
    "Keymap",
    "KeymapConflictError",
    "KeymapNode",
    "KeymapRegistry",
    "KeymapResolver",
    "Leaf",
    "Node",
    "RegistryStats",
    "ResolutionResult",
    "ResolutionStatus",
    "UnknownCommandError",
    "build_default_keymap",
    "load_default_keymaps",
]
