"""Command identifiers referenced by the binding table."""

from __future__ import annotations

from enum import Enum


class CommandType(str, Enum):
    """Every command a key sequence can resolve to, by snake_case name."""

    SWITCH_TO_INSERT_MODE = "switch_to_insert_mode"
    SWITCH_TO_NORMAL_MODE = "switch_to_normal_mode"
    SWITCH_TO_VISUAL_MODE = "switch_to_visual_mode"

    MOVE_BACK = "move_back"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    MOVE_FORWARD = "move_forward"

    SWITCH_TO_INSERT_LINE_END = "switch_to_insert_line_end"
    SWITCH_TO_INSERT_LINE_START = "switch_to_insert_line_start"
    SWITCH_TO_INSERT_NEW_LINE_NEXT = "switch_to_insert_new_line_next"
    SWITCH_TO_INSERT_NEW_LINE_PREV = "switch_to_insert_new_line_prev"

    GO_TO_START_LINE = "go_to_start_line"
    GO_TO_END_LINE = "go_to_end_line"

    DELETE_CHAR = "delete_char"
    NEW_LINE = "new_line"

    UNDO = "undo"
    REDO = "redo"
    ABORT_INSERT = "abort_insert"

    NEXT_DOCUMENT = "next_document"
    PREVIOUS_DOCUMENT = "previous_document"
    QUIT = "quit"
