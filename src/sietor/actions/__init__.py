"""Action handlers bound to keys by the default keymap."""

from .base import KeyInput, KeyResult

__all__ = ["KeyInput", "KeyResult", "editing", "navigation", "session"]
