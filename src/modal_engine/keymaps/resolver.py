"""Stepwise resolution of key input against the per-mode keymap trie."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from modal_engine.commands.types import CommandType
from modal_engine.runtime import telemetry

from .models import Input
from .trie import Keymap, Leaf, Node


class ResolutionStatus(str, Enum):
    MATCH = "match"
    PENDING = "pending"
    MISS = "miss"


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of feeding one input to the resolver.

    ``node`` is set only for ``PENDING`` and is what the caller hands back on
    the next call; ``command`` is set only for ``MATCH``.
    """

    status: ResolutionStatus
    command: Optional[CommandType] = None
    node: Optional[Node] = None
    cancelled: bool = False


class KeymapResolver:
    """Walks a :class:`Keymap` one input at a time.

    The resolver keeps no state of its own: the caller owns the pending node
    and passes it back in, so several dispatchers can share one keymap.
    """

    def __init__(self, keymap: Keymap, *, logger_name: str | None = None) -> None:
        self._keymap = keymap
        self._logger_name = logger_name

    @property
    def keymap(self) -> Keymap:
        return self._keymap

    def resolve(
        self, mode: str, key: Input, pending: Optional[Node] = None
    ) -> ResolutionResult:
        scope = pending if pending is not None else self._keymap.root(mode)
        with telemetry.span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "key": key.token, "pending": pending is not None},
        ) as handle:
            match scope.get(key):
                case Leaf(command=command):
                    handle.add_metadata("status", "match")
                    handle.add_metadata("command", command.value)
                    return ResolutionResult(ResolutionStatus.MATCH, command=command)
                case Node() as node:
                    handle.add_metadata("status", "pending")
                    return ResolutionResult(ResolutionStatus.PENDING, node=node)
                case _:
                    handle.add_metadata("status", "miss")
                    telemetry.record_event(
                        "keymaps.miss",
                        level="debug",
                        data={"mode": mode, "key": key.token},
                        logger_name=self._logger_name,
                    )
                    return ResolutionResult(
                        ResolutionStatus.MISS, cancelled=pending is not None
                    )


__all__ = ["KeymapResolver", "ResolutionResult", "ResolutionStatus"]
