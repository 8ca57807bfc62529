"""Cursor movement actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import KeyInput, KeyResult

if TYPE_CHECKING:  # pragma: no cover
    from sietor.session import EditorSession


def _moved(name: str) -> KeyResult:
    return KeyResult(consumed=True, message=name)


def move_left(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.move_cursor_relative(0, -1)
    return _moved("move_left")


def move_right(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.move_cursor_relative(0, 1)
    return _moved("move_right")


def move_up(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.move_cursor_relative(-1, 0)
    return _moved("move_up")


def move_down(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.move_cursor_relative(1, 0)
    return _moved("move_down")


def line_start(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.move_cursor_absolute(session.buffer.cursor.row, 0)
    return _moved("line_start")


def line_end(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    buffer = session.buffer
    if buffer.line_count:
        row = buffer.cursor.row
        buffer.move_cursor_absolute(row, len(buffer.get_line(row)))
    return _moved("line_end")


def buffer_start(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.move_cursor_absolute(0, 0)
    return _moved("buffer_start")


def buffer_end(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    buffer = session.buffer
    if buffer.line_count:
        last = buffer.line_count - 1
        buffer.move_cursor_absolute(last, len(buffer.get_line(last)))
    return _moved("buffer_end")


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
    "buffer_start",
    "buffer_end",
]
