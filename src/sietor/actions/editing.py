"""Actions that change buffer content."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sietor.buffer import Transaction

from .base import KeyInput, KeyResult

if TYPE_CHECKING:  # pragma: no cover
    from sietor.session import EditorSession


def insert_line_break(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.insert("\r")
    return KeyResult(consumed=True, message="insert_line_break")


def delete_backward(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.buffer.delete()
    return KeyResult(consumed=True, message="delete_backward")


def insert_text(session: "EditorSession", key: KeyInput) -> KeyResult:
    """Insert every character of ``key.text`` at the cursor, all or nothing."""

    text = key.text or ""
    with Transaction(session.buffer, "insert_text"):
        for char in text:
            session.buffer.insert(char)
    return KeyResult(consumed=bool(text), message="insert_text" if text else None)


__all__ = ["insert_line_break", "delete_backward", "insert_text"]
