"""Built-in binding table seeding each mode."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from .registry import BindingTable, KeymapRegistry
from .trie import Keymap

DEFAULT_BINDINGS: BindingTable = MappingProxyType(
    {
        "normal": {
            "switch_to_insert_mode": "i",
            "switch_to_insert_line_end": "A",
            "switch_to_insert_line_start": "I",
            "switch_to_insert_new_line_next": "o",
            "switch_to_insert_new_line_prev": "O",
            "switch_to_visual_mode": "v",
            "move_back": ("h", "left"),
            "move_down": ("j", "down"),
            "move_up": ("k", "up"),
            "move_forward": ("l", "right"),
            "go_to_start_line": ("g h", "home"),
            "go_to_end_line": ("g l", "end"),
            "next_document": "g n",
            "previous_document": "g p",
            "undo": "u",
            "redo": "U",
            "delete_char": "backspace",
            "new_line": "enter",
            "quit": "ctrl+q",
        },
        "insert": {
            "switch_to_normal_mode": "esc",
            "abort_insert": "ctrl+c",
            "delete_char": "backspace",
            "new_line": "enter",
        },
        "visual": {
            "switch_to_normal_mode": "esc",
            "move_back": ("h", "left"),
            "move_down": ("j", "down"),
            "move_up": ("k", "up"),
            "move_forward": ("l", "right"),
            "go_to_start_line": "g h",
            "go_to_end_line": "g l",
            "quit": "ctrl+q",
        },
    }
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    overrides: Optional[BindingTable] = None,
) -> None:
    """Register the built-in table, then ``overrides`` replacing conflicts."""

    registry.load_table(DEFAULT_BINDINGS)
    if overrides:
        registry.load_table(overrides, replace=True)


def build_default_keymap(
    overrides: Optional[BindingTable] = None,
    *,
    logger_name: str | None = None,
) -> Keymap:
    registry = KeymapRegistry(logger_name=logger_name)
    load_default_keymaps(registry, overrides=overrides)
    return registry.build()


__all__ = ["DEFAULT_BINDINGS", "build_default_keymap", "load_default_keymaps"]
