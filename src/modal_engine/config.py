"""Editor configuration sourced from constructor arguments or the environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from modal_engine.keymaps import BindingTable, Input
from modal_engine.runtime.telemetry import env

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24
DEFAULT_EXIT_CHORD = "ctrl+q"


def _env_int(name: str, fallback: int) -> int:
    raw = env(name)
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


@dataclass(slots=True)
class EditorConfig:
    """Viewport size, session exit chord, and binding overrides."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    exit_chord: str = DEFAULT_EXIT_CHORD
    bindings: BindingTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("viewport dimensions must be positive")
        Input.parse(self.exit_chord)

    @property
    def exit_input(self) -> Input:
        return Input.parse(self.exit_chord)

    @property
    def binding_overrides(self) -> Optional[BindingTable]:
        return self.bindings or None

    @classmethod
    def from_env(cls, **overrides: object) -> "EditorConfig":
        values: dict[str, object] = {
            "width": _env_int("WIDTH", DEFAULT_WIDTH),
            "height": _env_int("HEIGHT", DEFAULT_HEIGHT),
            "exit_chord": env("EXIT_CHORD") or DEFAULT_EXIT_CHORD,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


__all__ = ["EditorConfig", "DEFAULT_EXIT_CHORD", "DEFAULT_HEIGHT", "DEFAULT_WIDTH"]
