from __future__ import annotations

from modal_engine.commands import CommandType
from modal_engine.keymaps import (
    Input,
    KeymapRegistry,
    KeymapResolver,
    ResolutionStatus,
)


def make_resolver() -> KeymapResolver:
    registry = KeymapRegistry()
    registry.bind("normal", "go_to_start_line", "g h")
    registry.bind("normal", "go_to_end_line", "g l")
    registry.bind("normal", "undo", "u")
    registry.bind("normal", "redo", "ctrl+r")
    return KeymapResolver(registry.build())


def test_single_key_match() -> None:
    resolver = make_resolver()

    result = resolver.resolve("normal", Input.char("u"))

    assert result.status is ResolutionStatus.MATCH
    assert result.command is CommandType.UNDO
    assert result.node is None


def test_modified_chord_match() -> None:
    resolver = make_resolver()

    result = resolver.resolve("normal", Input.char("r", ctrl=True))

    assert result.command is CommandType.REDO


def test_two_key_sequence_resolves_through_pending_node() -> None:
    resolver = make_resolver()

    first = resolver.resolve("normal", Input.char("g"))
    assert first.status is ResolutionStatus.PENDING
    assert first.node is not None

    second = resolver.resolve("normal", Input.char("l"), first.node)
    assert second.status is ResolutionStatus.MATCH
    assert second.command is CommandType.GO_TO_END_LINE


def test_broken_sequence_reports_cancellation() -> None:
    resolver = make_resolver()
    pending = resolver.resolve("normal", Input.char("g")).node

    result = resolver.resolve("normal", Input.char("x"), pending)

    assert result.status is ResolutionStatus.MISS
    assert result.cancelled


def test_unbound_key_misses_without_cancellation() -> None:
    resolver = make_resolver()

    result = resolver.resolve("normal", Input.char("z"))

    assert result.status is ResolutionStatus.MISS
    assert not result.cancelled


def test_unknown_mode_misses() -> None:
    resolver = make_resolver()

    assert resolver.resolve("visual", Input.char("u")).status is ResolutionStatus.MISS


def test_parse_normalises_aliases() -> None:
    assert Input.parse("esc") == Input.named("escape")
    assert Input.parse("Return") == Input.named("enter")
    assert Input.parse("space") == Input.char(" ")
    assert Input.parse("ctrl+alt+x") == Input.char("x", ctrl=True, alt=True)
    assert Input.parse("ctrl+r").token == "ctrl+r"
