"""Line-oriented text buffer with a cursor, the core the editor mutates."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import IO, Any, ContextManager, List, Optional, Sequence, Tuple

from sietor.fonts.metrics import FontMetrics
from sietor.runtime import telemetry

from .cursor import Cursor, CursorRect, DEFAULT_FONT_SIZE
from .errors import OutOfBoundsError, TextPosition, UnsupportedOperationError
from .origin import (
    BufferKind,
    BufferOrigin,
    EmptyOrigin,
    FileOrigin,
    TextOrigin,
    origin_kind,
    read_origin,
)
from .position import Absolute, Relative
from .validation import ensure_not_empty, ensure_position, ensure_row

LINE_BREAKS = frozenset({"\r", "\n"})


@dataclass(slots=True)
class BufferView:
    """Read-only snapshot handed to renderers."""

    version: int
    lines: Tuple[str, ...]
    cursor: TextPosition
    view_origin: TextPosition


class TextBuffer:
    """Ordered lines, a cursor and a scroll offset for one open document.

    After every public operation on a non-empty buffer the cursor satisfies
    ``0 <= row < line_count`` and ``0 <= col <= len(lines[row])``. A buffer
    created from ``EmptyOrigin`` has zero lines until the first insert.
    """

    def __init__(
        self,
        origin: BufferOrigin | None = None,
        *,
        cursor: Optional[TextPosition] = None,
        view_origin: Optional[TextPosition] = None,
        scale_factor: float = 1.0,
        font_size: float = DEFAULT_FONT_SIZE,
        name: str = "default",
    ) -> None:
        origin = origin if origin is not None else EmptyOrigin()
        self.name = name
        self._lines: List[str] = read_origin(origin)
        self.kind: BufferKind = origin_kind(origin)
        self.backing_file: Optional[IO[Any]] = (
            origin.handle if isinstance(origin, FileOrigin) else None
        )
        self.cursor = Cursor(scale_factor=scale_factor, font_size=font_size)
        self.view_origin: TextPosition = view_origin or (0, 0)
        self.version = 0
        self.dirty = False
        if cursor is not None:
            self._place_initial_cursor(*cursor)

    @classmethod
    def from_text(cls, text: str, **kwargs: Any) -> "TextBuffer":
        return cls(TextOrigin(text), **kwargs)

    @classmethod
    def from_file(cls, handle: IO[Any], **kwargs: Any) -> "TextBuffer":
        return cls(FileOrigin(handle), **kwargs)

    @classmethod
    def empty(cls, **kwargs: Any) -> "TextBuffer":
        return cls(EmptyOrigin(), **kwargs)

    # -- read-only surface -------------------------------------------------

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def get_line(self, row: int) -> str:
        ensure_row(self._lines, row)
        return self._lines[row]

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.version,
            lines=self.lines,
            cursor=self.cursor.text_position,
            view_origin=self.view_origin,
        )

    # -- editing -----------------------------------------------------------

    def insert(self, character: str, position: Optional[TextPosition] = None) -> None:
        """Insert ``character`` at the cursor, or at ``position`` if given.

        A carriage return (or newline) splits the target line instead of
        being stored. Inserting at the cursor moves it past the new
        character (or to the start of the next row after a split);
        explicit-position inserts leave the cursor on the same character,
        re-indexing it when a split shifts that character to a new row.
        """

        if len(character) != 1:
            raise ValueError(f"insert expects a single character, got {character!r}")

        with Transaction(self, "insert"):
            if not self._lines:
                self._lines.append("")

            if position is None:
                row, col = self.cursor.text_position
                col = min(col, len(self._lines[row]))
            else:
                row, col = position
                ensure_row(self._lines, row)
                if col < 0:
                    raise OutOfBoundsError(
                        f"Column {col} is negative", position=position
                    )

            line = self._lines[row]
            if character in LINE_BREAKS:
                ensure_position(self._lines, (row, col))
                self._lines[row] = line[col:]
                self._lines.insert(row, line[:col])
                if position is None:
                    self.cursor.move_to(Relative(1), Absolute(0))
                else:
                    self._follow_split(row, col)
            else:
                col = min(col, len(line))
                self._lines[row] = line[:col] + character + line[col:]
                if position is None:
                    self.cursor.set(row, col + 1)

    def delete(
        self,
        start: Optional[TextPosition] = None,
        end: Optional[TextPosition] = None,
    ) -> None:
        """Delete the character before the cursor (backspace).

        At column 0 the current line is merged onto the previous one. At the
        very start of the buffer this is a no-op. Range deletion is not
        supported yet.
        """

        if start is not None or end is not None:
            raise UnsupportedOperationError(
                "Range deletion is not implemented", position=start or end
            )

        row, col = self.cursor.text_position
        if (row == 0 and col == 0) or not self._lines:
            return

        with Transaction(self, "delete"):
            col = min(col, len(self._lines[row]))
            self.move_cursor_relative(0, -1)
            if col != 0:
                line = self._lines[row]
                self._lines[row] = line[: col - 1] + line[col:]
            else:
                self._lines[row - 1] += self._lines[row]
                del self._lines[row]

    # -- navigation --------------------------------------------------------

    def move_cursor_absolute(self, row: int, col: int) -> None:
        """Move to ``(row, col)``, carrying column overflow into later rows.

        Each line boundary counts as one column, so an oversized column wraps
        into the following rows until it fits; on the last row it is clamped
        to the line length.
        """

        if not self._lines:
            return

        last = len(self._lines) - 1
        row = min(max(row, 0), last)
        col = max(col, 0)
        while col > len(self._lines[row]) and row < last:
            col -= len(self._lines[row]) + 1
            row += 1
        col = min(col, len(self._lines[row]))
        self.cursor.set(row, col)

    def move_cursor_relative(self, rows: int, cols: int) -> None:
        """Move by ``(rows, cols)`` from the cursor.

        Moving left past column 0 lands at the end of the previous row (or
        stays at 0 on the first row). A vertical move keeps the column,
        clamped to the target row; a purely horizontal move past the end of
        a row follows the same wrap rule as ``move_cursor_absolute``.
        """

        if not self._lines:
            return

        current_row, current_col = self.cursor.text_position
        new_row = min(max(current_row + rows, 0), len(self._lines) - 1)
        new_col = current_col + cols

        if new_col < 0:
            if new_row > 0:
                new_row -= 1
                new_col = len(self._lines[new_row])
            else:
                new_col = 0
        elif rows != 0:
            new_col = min(new_col, len(self._lines[new_row]))

        self.move_cursor_absolute(new_row, new_col)

    # -- view --------------------------------------------------------------

    def scroll_to(self, row: int, col: int) -> None:
        self.view_origin = (max(row, 0), max(col, 0))

    def scroll_cursor_into_view(self, rows: int, cols: int) -> TextPosition:
        """Shift the view-origin the least amount that shows the cursor.

        ``rows`` and ``cols`` describe the visible window in cells.
        """

        if rows <= 0 or cols <= 0:
            raise ValueError(f"Visible window must be positive, got {rows}x{cols}")
        top, left = self.view_origin
        row, col = self.cursor.text_position
        if row < top:
            top = row
        elif row >= top + rows:
            top = row - rows + 1
        if col < left:
            left = col
        elif col >= left + cols:
            left = col - cols + 1
        self.view_origin = (top, left)
        return self.view_origin

    def calc_cursor_screen_position(
        self, font: FontMetrics, width: int, height: int
    ) -> CursorRect:
        ensure_not_empty(self._lines)
        return self.cursor.calc_screen_position(font, self._lines, width, height)

    # -- internals ---------------------------------------------------------

    def _place_initial_cursor(self, row: int, col: int) -> None:
        if not self._lines:
            return
        row = min(max(row, 0), len(self._lines) - 1)
        col = min(max(col, 0), len(self._lines[row]))
        self.cursor.set(row, col)

    def _follow_split(self, row: int, col: int) -> None:
        # Re-index the cursor so it keeps pointing at the same character.
        cursor_row, cursor_col = self.cursor.text_position
        if cursor_row > row:
            self.cursor.set(cursor_row + 1, cursor_col)
        elif cursor_row == row and col <= cursor_col:
            self.cursor.set(row + 1, cursor_col - col)

    def _restore(self, lines: Sequence[str], cursor: TextPosition) -> None:
        self._lines = list(lines)
        self.cursor.text_position = cursor


class Transaction(AbstractContextManager["Transaction"]):
    """Run one mutation atomically: restore lines and cursor if it raises."""

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None
        self._before_lines: Tuple[str, ...] = ()
        self._before_cursor: TextPosition = (0, 0)

    def __enter__(self) -> "Transaction":
        self._before_lines = self.buffer.lines
        self._before_cursor = self.buffer.cursor.text_position
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "cursor": self._before_cursor},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self.buffer._restore(self._before_lines, self._before_cursor)
        elif self.buffer.lines != self._before_lines:
            self.buffer.version += 1
            self.buffer.dirty = True
        if self._handle is not None:
            self._handle.add_metadata("cursor_after", self.buffer.cursor.text_position)
            self._handle.add_metadata(
                "line_delta", self.buffer.line_count - len(self._before_lines)
            )
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["TextBuffer", "BufferView", "Transaction", "LINE_BREAKS"]
