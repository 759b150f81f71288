"""Binding table registry that validates bindings and builds the keymap trie."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union

from modal_engine.buffer.errors import ModalEngineError
from modal_engine.commands.types import CommandType
from modal_engine.runtime.telemetry import span

from .models import Binding, KeySequence
from .trie import Keymap, TrieBuilder

BindingTable = Mapping[str, Mapping[str, Union[str, Iterable[str]]]]


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    modes: tuple[str, ...]


class UnknownCommandError(ModalEngineError):
    """Raised when a binding names a command that does not exist."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command '{command}'")
        self.command = command


class KeymapConflictError(ModalEngineError):
    """Raised when a sequence equals, or is a prefix of, an existing one."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.key_signature}' -> {binding.command} conflicts with "
            f"{[f'{b.key_signature} -> {b.command}' for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Collects bindings per mode; ``build`` freezes them into a :class:`Keymap`."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Dict[KeySequence, Binding]] = {}
        self._logger_name = logger_name

    def register(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": binding.mode, "command": binding.command},
        ) as handle:
            try:
                CommandType(binding.command)
            except ValueError:
                handle.add_metadata("unknown_command", binding.command)
                raise UnknownCommandError(binding.command) from None

            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(c.key_signature for c in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            bucket = self._bindings.setdefault(binding.mode, {})
            for conflict in conflicts:
                bucket.pop(conflict.sequence, None)
            bucket[binding.sequence] = binding
            return binding

    def bind(
        self, mode: str, command: str, *notations: str, replace: bool = False
    ) -> list[Binding]:
        return [
            self.register(
                Binding(mode, command, KeySequence.parse(notation)), replace=replace
            )
            for notation in notations
        ]

    def load_table(self, table: BindingTable, *, replace: bool = False) -> None:
        """Register every ``mode -> command -> sequences`` entry of ``table``."""

        for mode, commands in table.items():
            for command, notations in commands.items():
                if isinstance(notations, str):
                    notations = (notations,)
                self.bind(mode, command, *notations, replace=replace)

    def unregister(self, mode: str, sequence: KeySequence) -> Optional[Binding]:
        bucket = self._bindings.get(mode)
        if not bucket:
            return None
        return bucket.pop(sequence, None)

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            for bucket in self._bindings.values():
                yield from bucket.values()
            return
        yield from self._bindings.get(mode, {}).values()

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        sequence = binding.sequence
        return [
            existing
            for existing in self._bindings.get(binding.mode, {}).values()
            if existing.sequence.startswith(sequence)
            or sequence.startswith(existing.sequence)
        ]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=sum(len(bucket) for bucket in self._bindings.values()),
            modes=tuple(sorted(mode for mode, b in self._bindings.items() if b)),
        )

    def build(self) -> Keymap:
        with span(
            "keymaps::build",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"bindings": self.stats().binding_count},
        ):
            roots = {}
            for mode, bucket in self._bindings.items():
                builder = TrieBuilder()
                for binding in bucket.values():
                    builder.add(binding.sequence.inputs, CommandType(binding.command))
                roots[mode] = builder.freeze()
            return Keymap(roots)


__all__ = [
    "BindingTable",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "UnknownCommandError",
]
