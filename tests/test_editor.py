from __future__ import annotations

from typing import List

import pytest

from modal_engine.buffer import DocumentOpenError
from modal_engine.config import EditorConfig
from modal_engine.editor import Editor
from modal_engine.keymaps import Input


def write_docs(tmp_path, *names: str) -> list:
    paths = []
    for name in names:
        path = tmp_path / name
        path.write_text(f"{name}\n", encoding="utf-8")
        paths.append(path)
    return paths


def test_open_files_counts_failures(tmp_path) -> None:
    good = write_docs(tmp_path, "a.txt", "b.txt")
    editor = Editor()

    opened, failed = editor.open_files([good[0], tmp_path / "nope.txt", good[1]])

    assert (opened, failed) == (2, 1)
    assert editor.active_index == 0
    assert editor.active.name == "a.txt"


def test_open_files_falls_back_to_scratch(tmp_path) -> None:
    editor = Editor()

    opened, failed = editor.open_files([tmp_path / "missing.txt"])

    assert (opened, failed) == (0, 1)
    assert editor.active.is_scratch
    assert len(editor.documents) == 1


def test_open_file_raises_for_missing(tmp_path) -> None:
    editor = Editor()

    with pytest.raises(DocumentOpenError):
        editor.open_file(tmp_path / "missing.txt")


def test_document_switching_wraps_and_emits(tmp_path) -> None:
    paths = write_docs(tmp_path, "a.txt", "b.txt", "c.txt")
    editor = Editor()
    editor.open_files(paths)
    switched: List[str] = []
    editor.bus.subscribe("document.switch", lambda buffer: switched.append(buffer.name))

    editor.handle_input(Input.char("g"))
    editor.handle_input(Input.char("p"))
    assert editor.active.name == "c.txt"

    editor.handle_input(Input.char("g"))
    editor.handle_input(Input.char("n"))
    assert editor.active.name == "a.txt"
    assert switched == ["c.txt", "a.txt"]


def test_documents_keep_separate_history(tmp_path) -> None:
    paths = write_docs(tmp_path, "a.txt", "b.txt")
    editor = Editor()
    editor.open_files(paths)

    for chord in ("i", "x", "esc", "g", "n"):
        editor.handle_input(Input.parse(chord))

    assert str(editor.active.text) == "b.txt\n"
    assert len(editor.active.history) == 0
    assert str(editor.documents[0].text) == "xa.txt\n"


def test_close_document_keeps_valid_active_index(tmp_path) -> None:
    paths = write_docs(tmp_path, "a.txt", "b.txt")
    editor = Editor()
    editor.open_files(paths)
    editor.switch_to(1)

    editor.close_document()
    assert editor.active.name == "a.txt"

    editor.close_document()
    assert editor.active.is_scratch


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("MODAL_ENGINE_HEIGHT", "12")
    monkeypatch.setenv("MODAL_ENGINE_WIDTH", "not-a-number")
    monkeypatch.setenv("MODAL_ENGINE_EXIT_CHORD", "ctrl+x")

    config = EditorConfig.from_env()

    assert config.height == 12
    assert config.width == 80
    assert config.exit_input == Input.char("x", ctrl=True)


def test_config_rejects_empty_viewport() -> None:
    with pytest.raises(ValueError):
        EditorConfig(height=0)


def test_custom_exit_chord_and_bindings() -> None:
    config = EditorConfig(
        exit_chord="ctrl+x", bindings={"normal": {"switch_to_insert_mode": "a"}}
    )
    editor = Editor(config)

    editor.handle_input(Input.char("a"))
    assert editor.active.is_insert

    editor.handle_input(Input.parse("ctrl+q"))
    assert not editor.should_exit
    editor.handle_input(Input.parse("ctrl+x"))
    assert editor.should_exit
