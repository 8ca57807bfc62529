"""Failure classes raised by buffer operations."""

from __future__ import annotations

from typing import Optional, Tuple

TextPosition = Tuple[int, int]  # (row, column)


class TextBufferError(RuntimeError):
    """Base class for contract violations reported by a ``TextBuffer``."""

    def __init__(self, message: str, *, position: Optional[TextPosition] = None) -> None:
        super().__init__(message)
        self.position = position


class OutOfBoundsError(TextBufferError, IndexError):
    """A row or column does not address existing buffer content."""


class UnsupportedOperationError(TextBufferError, NotImplementedError):
    """The operation exists in the call contract but is not implemented."""


class EmptyBufferError(TextBufferError):
    """The buffer holds no lines and the operation needs at least one."""


__all__ = [
    "TextPosition",
    "TextBufferError",
    "OutOfBoundsError",
    "UnsupportedOperationError",
    "EmptyBufferError",
]
