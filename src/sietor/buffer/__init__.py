"""Text buffer, cursor and position types that make up the editing core."""

from .cursor import Cursor, CursorRect
from .errors import (
    EmptyBufferError,
    OutOfBoundsError,
    TextBufferError,
    TextPosition,
    UnsupportedOperationError,
)
from .origin import (
    BufferKind,
    BufferOrigin,
    ClearKind,
    EmptyOrigin,
    FileOrigin,
    Lang,
    SourceKind,
    TextOrigin,
    detect_kind,
    split_lines,
)
from .position import Absolute, Position, Relative, resolve
from .text_buffer import BufferView, TextBuffer, Transaction
from .validation import ensure_not_empty, ensure_position, ensure_row

__all__ = [
    "Absolute",
    "Relative",
    "Position",
    "resolve",
    "Cursor",
    "CursorRect",
    "TextBuffer",
    "BufferView",
    "Transaction",
    "BufferOrigin",
    "FileOrigin",
    "TextOrigin",
    "EmptyOrigin",
    "BufferKind",
    "SourceKind",
    "ClearKind",
    "Lang",
    "detect_kind",
    "split_lines",
    "TextPosition",
    "TextBufferError",
    "OutOfBoundsError",
    "UnsupportedOperationError",
    "EmptyBufferError",
    "ensure_not_empty",
    "ensure_row",
    "ensure_position",
]
