"""Built-in keymap seeding the editor with its default bindings."""

from __future__ import annotations

from typing import Iterable

from sietor.actions import editing as editing_actions
from sietor.actions import navigation as navigation_actions
from sietor.actions import session as session_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.insert_line_break",
        handler=editing_actions.insert_line_break,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.insert_text",
        handler=editing_actions.insert_text,
        description="Insert typed text at the cursor",
    ),
    ActionRef(
        id="nav.left", handler=navigation_actions.move_left, description="Move left"
    ),
    ActionRef(
        id="nav.right", handler=navigation_actions.move_right, description="Move right"
    ),
    ActionRef(id="nav.up", handler=navigation_actions.move_up, description="Move up"),
    ActionRef(
        id="nav.down", handler=navigation_actions.move_down, description="Move down"
    ),
    ActionRef(
        id="nav.line_start",
        handler=navigation_actions.line_start,
        description="Move to the start of the line",
    ),
    ActionRef(
        id="nav.line_end",
        handler=navigation_actions.line_end,
        description="Move to the end of the line",
    ),
    ActionRef(
        id="nav.buffer_start",
        handler=navigation_actions.buffer_start,
        description="Move to the start of the buffer",
    ),
    ActionRef(
        id="nav.buffer_end",
        handler=navigation_actions.buffer_end,
        description="Move to the end of the buffer",
    ),
    ActionRef(
        id="session.toggle_wireframe",
        handler=session_actions.toggle_wireframe,
        description="Toggle wireframe rendering",
    ),
    ActionRef(
        id="session.quit",
        handler=session_actions.quit_editor,
        description="Quit the editor",
    ),
)

DEFAULT_BINDINGS: tuple[tuple[str, str], ...] = (
    ("enter", "edit.insert_line_break"),
    ("backspace", "edit.delete_backward"),
    ("left", "nav.left"),
    ("right", "nav.right"),
    ("up", "nav.up"),
    ("down", "nav.down"),
    ("home", "nav.line_start"),
    ("end", "nav.line_end"),
    ("ctrl+home", "nav.buffer_start"),
    ("ctrl+end", "nav.buffer_end"),
    ("f11", "session.toggle_wireframe"),
    ("escape", "session.quit"),
    ("ctrl+q", "session.quit"),
)


def _default_bindings() -> Iterable[Binding]:
    for token, action_id in DEFAULT_BINDINGS:
        yield Binding(
            id=f"default.{token}",
            stroke=KeyStroke.parse(token),
            action_id=action_id,
            description=f"{token} -> {action_id}",
        )


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    """Register the default actions and bindings, replacing earlier copies."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in _default_bindings():
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
