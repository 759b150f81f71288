"""Immutable per-mode keymap tries."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from modal_engine.commands.types import CommandType

from .models import Input


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal node: the full sequence has been typed."""

    command: CommandType


@dataclass(frozen=True, slots=True)
class Node:
    """Partial match; children map the next input to deeper nodes."""

    children: Mapping[Input, "KeymapNode"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, key: Input) -> Optional["KeymapNode"]:
        return self.children.get(key)

    def next_tokens(self) -> tuple[str, ...]:
        return tuple(sorted(key.token for key in self.children))


KeymapNode = Union[Leaf, Node]

EMPTY_NODE = Node()


class TrieBuilder:
    """Mutable staging tree frozen into :class:`Node` once complete."""

    def __init__(self) -> None:
        self._root: Dict[Input, object] = {}

    def add(self, inputs: tuple[Input, ...], command: CommandType) -> None:
        level = self._root
        for key in inputs[:-1]:
            nested = level.setdefault(key, {})
            if not isinstance(nested, dict):
                raise ValueError(f"{key.token} already terminates a binding")
            level = nested
        if inputs[-1] in level:
            raise ValueError(f"{inputs[-1].token} is already bound at this depth")
        level[inputs[-1]] = Leaf(command)

    def freeze(self) -> Node:
        return _freeze(self._root)


def _freeze(level: Dict[Input, object]) -> Node:
    children: Dict[Input, KeymapNode] = {}
    for key, value in level.items():
        if isinstance(value, Leaf):
            children[key] = value
        else:
            children[key] = _freeze(value)  # type: ignore[arg-type]
    return Node(MappingProxyType(children))


@dataclass(frozen=True, slots=True)
class Keymap:
    """Root node for every mode, built once at startup."""

    roots: Mapping[str, Node]

    def root(self, mode: str) -> Node:
        return self.roots.get(mode, EMPTY_NODE)

    @property
    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(self.roots))


__all__ = ["EMPTY_NODE", "Keymap", "KeymapNode", "Leaf", "Node", "TrieBuilder"]
