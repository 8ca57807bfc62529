"""Textual adapter that wires session results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from sietor.buffer import BufferView, ClearKind
from sietor.session import EditorSession, KeyInput, KeyResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferView], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


# Textual key names that differ from the keymap's tokens.
_KEY_ALIASES = {
    "return": "enter",
    "ctrl+h": "backspace",
}


class TextualEditorAdapter:
    """Bridges Textual key events to an ``EditorSession``."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> KeyResult:
        """Translate a Textual key event into a ``KeyInput`` and dispatch it."""

        key_input = self._normalize(key, text, modifiers)
        self._log_state("key ->", key=key_input.key, text=text, mods=key_input.modifiers)
        result = self.session.handle_key(key_input)
        self.refresh(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def refresh(self, result: Optional[KeyResult] = None) -> None:
        self.hooks.update_buffer(self.session.buffer.snapshot())
        self.hooks.update_status(self.status_line(result))

    def status_line(self, result: Optional[KeyResult] = None) -> str:
        buffer = self.session.buffer
        row, col = buffer.cursor.text_position
        kind = buffer.kind
        kind_label = "text" if isinstance(kind, ClearKind) else kind.lang.value
        parts = [f"{row + 1}:{col + 1}", kind_label]
        if self.session.font is not None and buffer.line_count:
            rect = self.session.cursor_rect()
            parts.append(f"caret {rect.x:+.2f},{rect.y:+.2f}")
        if self.session.wireframe:
            parts.append("wireframe")
        if buffer.dirty:
            parts.append("modified")
        if result is not None and result.status == "error" and result.message:
            parts.append(f"error: {result.message}")
        return "  ".join(parts)

    @staticmethod
    def _normalize(key: str, text: Optional[str], modifiers: Iterable[str]) -> KeyInput:
        name = _KEY_ALIASES.get(key.lower(), key.lower())
        mods = [str(mod).lower() for mod in modifiers]
        # Textual folds modifiers into the key name ("ctrl+home").
        if "+" in name:
            *prefix, name = name.split("+")
            mods.extend(prefix)
        return KeyInput(key=name, modifiers=tuple(dict.fromkeys(mods)), text=text)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "cursor": buffer.cursor.text_position,
            "lines": buffer.line_count,
            "buffer": buffer.name,
            "buffer_version": buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
