"""Normal mode: every input is resolved through the keymap trie."""

from __future__ import annotations

from modal_engine.buffer import CursorMode

from .base_mode import Mode


class NormalMode(Mode):
    name = CursorMode.NORMAL.value
