"""Key events and action results shared by the session and its actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed to the session."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class KeyResult:
    """Outcome of handling one ``KeyInput``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["KeyInput", "KeyResult"]
