"""Visual mode placeholder: entry and exit plus cursor motions."""

from __future__ import annotations

from modal_engine.buffer import CursorMode

from .base_mode import Mode


class VisualMode(Mode):
    name = CursorMode.VISUAL.value
