"""Value types for key input and command bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_NAMED_ALIASES = {
    "esc": "escape",
    "return": "enter",
    "cr": "enter",
    "bs": "backspace",
    "del": "delete",
    "pgup": "page_up",
    "pgdown": "page_down",
}

_CHAR_ALIASES = {
    "space": " ",
    "plus": "+",
}


@dataclass(frozen=True, slots=True)
class Key:
    """A single character or a named key such as ``escape``."""

    name: str
    is_char: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("key cannot be empty")
        if self.is_char and len(self.name) != 1:
            raise ValueError(f"character key must be one character, got {self.name!r}")

    @classmethod
    def char(cls, ch: str) -> "Key":
        return cls(ch, True)

    @classmethod
    def named(cls, name: str) -> "Key":
        lowered = name.strip().lower()
        if lowered in _CHAR_ALIASES:
            return cls(_CHAR_ALIASES[lowered], True)
        return cls(_NAMED_ALIASES.get(lowered, lowered), False)

    @property
    def token(self) -> str:
        return self.name if self.is_char else f"<{self.name}>"


@dataclass(frozen=True, slots=True)
class Input:
    """One key press: key identity plus ctrl/alt flags."""

    key: Key
    ctrl: bool = False
    alt: bool = False

    @classmethod
    def char(cls, ch: str, *, ctrl: bool = False, alt: bool = False) -> "Input":
        return cls(Key.char(ch), ctrl, alt)

    @classmethod
    def named(cls, name: str, *, ctrl: bool = False, alt: bool = False) -> "Input":
        return cls(Key.named(name), ctrl, alt)

    @classmethod
    def parse(cls, chord: str) -> "Input":
        """Parse binding notation like ``ctrl+r``, ``alt+x``, ``esc`` or ``A``."""

        rest = chord.strip()
        if not rest:
            raise ValueError("chord cannot be empty")
        ctrl = alt = False
        while True:
            lowered = rest.lower()
            if lowered.startswith("ctrl+") and len(rest) > 5:
                ctrl, rest = True, rest[5:]
            elif lowered.startswith("alt+") and len(rest) > 4:
                alt, rest = True, rest[4:]
            else:
                break
        key = Key.char(rest) if len(rest) == 1 else Key.named(rest)
        return cls(key, ctrl, alt)

    @property
    def is_plain_char(self) -> bool:
        return self.key.is_char and not self.ctrl and not self.alt

    @property
    def token(self) -> str:
        prefix = ("ctrl+" if self.ctrl else "") + ("alt+" if self.alt else "")
        return prefix + self.key.token


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Ordered chords that together trigger one command."""

    inputs: tuple[Input, ...]

    def __post_init__(self) -> None:
        if not self.inputs:
            raise ValueError("KeySequence requires at least one input")

    def __len__(self) -> int:
        return len(self.inputs)

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(item.token for item in self.inputs)

    def startswith(self, other: "KeySequence") -> bool:
        return self.inputs[: len(other.inputs)] == other.inputs

    @classmethod
    def parse(cls, notation: str) -> "KeySequence":
        """Build a sequence from whitespace separated chords: ``"g h"``."""

        return cls(tuple(Input.parse(chord) for chord in notation.split()))

    @classmethod
    def of(cls, inputs: Iterable[Input]) -> "KeySequence":
        return cls(tuple(inputs))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence with a command in one mode."""

    mode: str
    command: str
    sequence: KeySequence

    def __post_init__(self) -> None:
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.command:
            raise ValueError("binding command cannot be empty")

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = ["Binding", "Input", "Key", "KeySequence"]
