"""Host-side bridge translating Textual key events into editor input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from modal_engine.buffer import RenderSnapshot
from modal_engine.editor import Editor, EventOutcome
from modal_engine.keymaps import Input


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names that differ from the engine's named keys.
_TEXTUAL_NAMES = {
    "escape": "escape",
    "enter": "enter",
    "backspace": "backspace",
    "tab": "tab",
    "delete": "delete",
    "left": "left",
    "right": "right",
    "up": "up",
    "down": "down",
    "home": "home",
    "end": "end",
    "pageup": "page_up",
    "pagedown": "page_down",
}


def translate_key(key: str, character: Optional[str] = None) -> Optional[Input]:
    """Map a Textual ``events.Key`` (``key``/``character``) to an :class:`Input`.

    Textual spells modifier chords as ``ctrl+r`` or ``alt+x``; printable keys
    carry their text in ``character``.
    """

    parts = key.split("+")
    base = parts[-1] if parts[-1] else "+"
    modifiers = {part for part in parts[:-1] if part}
    ctrl = "ctrl" in modifiers
    alt = "alt" in modifiers or "meta" in modifiers

    if base in _TEXTUAL_NAMES:
        return Input.named(_TEXTUAL_NAMES[base], ctrl=ctrl, alt=alt)
    if character and len(character) == 1 and character.isprintable() and not ctrl:
        return Input.char(character, alt=alt)
    if len(base) == 1:
        return Input.char(base, ctrl=ctrl, alt=alt)
    if base == "space":
        return Input.char(" ", ctrl=ctrl, alt=alt)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to push state into widgets."""

    update_view: Callable[[RenderSnapshot], None]
    update_status: Callable[[str], None] = _noop
    request_exit: Callable[[], None] = _noop


class TextualEditorAdapter:
    """Feeds Textual keys to an :class:`Editor` and refreshes the view."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        for event in ("document.switch", "document.error"):
            editor.bus.subscribe(
                event, lambda payload, name=event: self._on_event(name, payload)
            )
        self.refresh()

    def handle_textual_key(
        self, key: str, character: Optional[str] = None
    ) -> EventOutcome:
        translated = translate_key(key, character)
        if translated is None:
            return EventOutcome.IGNORE
        outcome = self.editor.handle_input(translated)
        if outcome is EventOutcome.EXIT:
            self.hooks.request_exit()
        elif outcome is EventOutcome.RENDER:
            self.refresh()
        return outcome

    def resize(self, width: int, height: int) -> None:
        self.editor.resize(width, height)
        self.refresh()

    def refresh(self) -> None:
        snapshot = self.editor.snapshot()
        self.hooks.update_view(snapshot)
        self.hooks.update_status(self.status_line(snapshot))

    def status_line(self, snapshot: RenderSnapshot) -> str:
        buffer = self.editor.active
        pending = " …" if self.editor.dispatcher.in_progress else ""
        return (
            f"{snapshot.mode.value.upper()}  {snapshot.name}  "
            f"{buffer.index + 1}:{buffer.offset + 1}{pending}"
        )

    def _on_event(self, name: str, payload: object | None) -> None:
        if name == "document.error":
            self.hooks.update_status(str(payload))
        else:
            self.refresh()


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
