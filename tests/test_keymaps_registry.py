from __future__ import annotations

import pytest

from modal_engine.commands import CommandType
from modal_engine.keymaps import (
    DEFAULT_BINDINGS,
    Binding,
    Input,
    KeySequence,
    KeymapConflictError,
    KeymapRegistry,
    Leaf,
    Node,
    UnknownCommandError,
    build_default_keymap,
)


def make_binding(
    notation: str, command: str = "move_back", *, mode: str = "normal"
) -> Binding:
    return Binding(mode, command, KeySequence.parse(notation))


def test_register_binding_tracks_stats() -> None:
    registry = KeymapRegistry()
    registry.register(make_binding("h"))
    registry.register(make_binding("esc", "switch_to_normal_mode", mode="insert"))

    stats = registry.stats()

    assert stats.binding_count == 2
    assert stats.modes == ("insert", "normal")


def test_unknown_command_is_rejected() -> None:
    registry = KeymapRegistry()

    with pytest.raises(UnknownCommandError) as excinfo:
        registry.register(make_binding("x", "delete_word"))

    assert excinfo.value.command == "delete_word"
    assert registry.stats().binding_count == 0


def test_prefix_conflict_is_rejected() -> None:
    registry = KeymapRegistry()
    registry.register(make_binding("g h", "go_to_start_line"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register(make_binding("g", "move_back"))

    assert [b.key_signature for b in excinfo.value.conflicts] == ["g h"]


def test_same_sequence_in_other_mode_is_allowed() -> None:
    registry = KeymapRegistry()
    registry.register(make_binding("h"))
    registry.register(make_binding("h", mode="visual"))

    assert registry.stats().binding_count == 2


def test_replace_drops_conflicting_bindings() -> None:
    registry = KeymapRegistry()
    registry.bind("normal", "go_to_start_line", "g h")
    registry.bind("normal", "go_to_end_line", "g l")

    registry.bind("normal", "move_down", "g", replace=True)

    signatures = sorted(b.key_signature for b in registry.iter_bindings("normal"))
    assert signatures == ["g"]


def test_build_produces_trie_per_mode() -> None:
    registry = KeymapRegistry()
    registry.bind("normal", "go_to_start_line", "g h")
    registry.bind("normal", "undo", "u")

    keymap = registry.build()
    root = keymap.root("normal")

    assert keymap.modes == ("normal",)
    assert root.get(Input.char("u")) == Leaf(CommandType.UNDO)
    g_node = root.get(Input.char("g"))
    assert isinstance(g_node, Node)
    assert g_node.next_tokens() == ("h",)
    assert keymap.root("visual").get(Input.char("u")) is None


def test_default_table_builds_without_conflicts() -> None:
    keymap = build_default_keymap()

    assert set(keymap.modes) == set(DEFAULT_BINDINGS)
    assert keymap.root("insert").get(Input.parse("esc")) == Leaf(
        CommandType.SWITCH_TO_NORMAL_MODE
    )


def test_overrides_replace_default_bindings() -> None:
    keymap = build_default_keymap({"normal": {"redo": "ctrl+r"}})
    root = keymap.root("normal")

    assert root.get(Input.parse("ctrl+r")) == Leaf(CommandType.REDO)
    assert root.get(Input.char("U")) == Leaf(CommandType.REDO)


def test_unregister_removes_binding() -> None:
    registry = KeymapRegistry()
    registry.bind("normal", "undo", "u")

    removed = registry.unregister("normal", KeySequence.parse("u"))

    assert removed is not None
    assert registry.unregister("normal", KeySequence.parse("u")) is None
