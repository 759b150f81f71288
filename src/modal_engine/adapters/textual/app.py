"""Executable Textual app hosting the editing core."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use modal_engine.adapters.textual.app"
    ) from exc

from modal_engine.buffer import CursorStyle, RenderSnapshot
from modal_engine.config import EditorConfig
from modal_engine.editor import Editor

from .controller import TextualEditorAdapter, TextualUIHooks

CURSOR_STYLES = {
    CursorStyle.BLOCK: "reverse",
    CursorStyle.BAR: "bold underline",
    CursorStyle.UNDERLINE: "underline",
}


def render_snapshot(snapshot: RenderSnapshot) -> Text:
    """Draw visible lines with the cursor cell highlighted."""

    column, row = snapshot.cursor
    text = Text(no_wrap=True)
    lines = snapshot.lines or ("",)
    for index, line in enumerate(lines):
        if index == row:
            text.append(line[:column])
            text.append(line[column : column + 1] or " ", CURSOR_STYLES[snapshot.cursor_style])
            text.append(line[column + 1 :])
        else:
            text.append(line)
        if index < len(lines) - 1:
            text.append("\n")
    return text


class ModalEditorApp(App[None]):
    """Full-screen editor; Textual owns the terminal session."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-view {
        height: 1fr;
        content-align: left top;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def __init__(
        self, paths: Sequence[str] = (), *, config: Optional[EditorConfig] = None
    ) -> None:
        super().__init__()
        self.editor = Editor(config or EditorConfig.from_env())
        self.adapter: TextualEditorAdapter | None = None
        self._paths = list(paths)
        self._view: Static | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        self._view = Static("", id="buffer-view")
        yield self._view
        self._status = Static("", id="status-line")
        yield self._status

    def on_mount(self) -> None:
        _, failed = self.editor.open_files(self._paths)
        self.editor.resize(self.size.width, max(self.size.height - 1, 1))
        self.adapter = TextualEditorAdapter(
            self.editor,
            TextualUIHooks(
                update_view=self._update_view,
                update_status=self._update_status,
                request_exit=self.exit,
            ),
        )
        if failed:
            self._update_status(f"Failed to open {failed} documents")

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, max(event.size.height - 1, 1))

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, event.character)
        event.stop()
        event.prevent_default()

    def _update_view(self, snapshot: RenderSnapshot) -> None:
        if self._view:
            self._view.update(render_snapshot(snapshot))

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the modal editor.")
    parser.add_argument("paths", nargs="*", help="Documents to open")
    parser.add_argument(
        "--exit-chord",
        default=None,
        help="Chord that ends the session from insert mode (default: ctrl+q)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    overrides = {"exit_chord": args.exit_chord} if args.exit_chord else {}
    app = ModalEditorApp(args.paths, config=EditorConfig.from_env(**overrides))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
