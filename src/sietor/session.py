"""Editor session: the state an input/render loop carries between frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sietor.actions.base import KeyInput, KeyResult
from sietor.buffer import CursorRect, TextBuffer, TextBufferError
from sietor.fonts.metrics import FontMetrics
from sietor.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps
from sietor.runtime import telemetry

INSERT_TEXT_ACTION = "edit.insert_text"


@dataclass(slots=True)
class Viewport:
    """Drawable area in pixels."""

    width: int = 512
    height: int = 512

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport must be positive, got {self.width}x{self.height}"
            )


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key.key, key.modifiers).token


class EditorSession:
    """Routes key events into one buffer and tracks render-loop flags.

    ``wireframe`` and ``running`` live here rather than in module globals so
    several sessions never share them.
    """

    def __init__(
        self,
        buffer: Optional[TextBuffer] = None,
        *,
        registry: Optional[KeymapRegistry] = None,
        viewport: Optional[Viewport] = None,
        load_defaults: bool = True,
        font: Optional[FontMetrics] = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else TextBuffer.empty()
        self.font = font
        self.registry = registry or KeymapRegistry()
        if load_defaults:
            load_default_keymaps(self.registry)
        self.viewport = viewport or Viewport()
        self.wireframe = False
        self.running = True

    def handle_key(self, key: KeyInput) -> KeyResult:
        """Dispatch ``key`` to its bound action, or insert its text.

        Buffer contract violations raised by an action are logged and
        reported as an ``error`` result; the buffer is left unchanged.
        """

        token = key_to_token(key)
        found = self.registry.lookup(token)
        if found is not None:
            binding, action = found
            action_id = binding.action_id
        elif key.text and key.text.isprintable() and not _has_command_modifier(key):
            action = self.registry.get_action(INSERT_TEXT_ACTION)
            action_id = action.id
        else:
            return KeyResult(consumed=False)

        with telemetry.span(
            "session::dispatch",
            component="session",
            metadata={"key": token, "action": action_id},
        ) as handle:
            try:
                outcome = action(self, key)
            except TextBufferError as exc:
                handle.add_metadata("status", "error")
                telemetry.record_event(
                    "session.buffer_error",
                    level="warning",
                    data={"key": token, "action": action_id, "error": str(exc)},
                )
                return KeyResult(consumed=True, status="error", message=str(exc))

        if isinstance(outcome, KeyResult):
            return outcome
        return KeyResult(consumed=True)

    def resize(self, width: int, height: int) -> None:
        self.viewport = Viewport(width, height)

    def cursor_rect(self, font: Optional[FontMetrics] = None) -> CursorRect:
        font = font if font is not None else self.font
        if font is None:
            raise ValueError("No font metrics configured for this session")
        return self.buffer.calc_cursor_screen_position(
            font, self.viewport.width, self.viewport.height
        )


def _has_command_modifier(key: KeyInput) -> bool:
    return any(mod.lower() in {"ctrl", "alt", "meta"} for mod in key.modifiers)


__all__ = ["EditorSession", "Viewport", "KeyInput", "KeyResult", "key_to_token"]
