"""Actions acting on the editor session rather than on buffer content."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import KeyInput, KeyResult

if TYPE_CHECKING:  # pragma: no cover
    from sietor.session import EditorSession


def toggle_wireframe(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.wireframe = not session.wireframe
    state = "on" if session.wireframe else "off"
    return KeyResult(consumed=True, message=f"wireframe_{state}")


def quit_editor(session: "EditorSession", key: KeyInput) -> KeyResult:
    del key
    session.running = False
    return KeyResult(consumed=True, status="quit", message="quit")


__all__ = ["toggle_wireframe", "quit_editor"]
