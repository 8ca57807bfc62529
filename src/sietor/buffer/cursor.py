"""Cursor text position and the screen geometry derived from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from sietor.fonts.metrics import FontMetrics

from .errors import TextPosition
from .position import Absolute, Position, resolve

DEFAULT_FONT_SIZE = 24.0


@dataclass(frozen=True, slots=True)
class CursorRect:
    """Cursor placement in normalized device coordinates plus glyph size in pixels."""

    x: float
    y: float
    width: float
    height: float


class Cursor:
    """Logical (row, column) location plus its last computed screen geometry.

    The screen fields are pull-based: they go stale after any move or edit
    until ``calc_screen_position`` runs again.
    """

    def __init__(
        self,
        text_position: TextPosition = (0, 0),
        *,
        scale_factor: float = 1.0,
        font_size: float = DEFAULT_FONT_SIZE,
    ) -> None:
        self.text_position: TextPosition = text_position
        self.screen_position: Tuple[float, float] = (0.0, 0.0)
        self.glyph_width = 0.0
        self.glyph_height = 0.0
        self.scale_factor = scale_factor
        self.font_size = font_size

    @property
    def row(self) -> int:
        return self.text_position[0]

    @property
    def col(self) -> int:
        return self.text_position[1]

    @property
    def scale(self) -> float:
        return self.font_size * self.scale_factor

    def move_to(self, row: Position[int, int], col: Position[int, int]) -> None:
        current_row, current_col = self.text_position
        self.text_position = (resolve(row, current_row), resolve(col, current_col))

    def set(self, row: int, col: int) -> None:
        self.move_to(Absolute(row), Absolute(col))

    def calc_screen_position(
        self,
        font: FontMetrics,
        lines: Sequence[str],
        width: int,
        height: int,
    ) -> CursorRect:
        """Recompute screen position and glyph size for the current text position.

        ``width`` and ``height`` are the viewport size in pixels. The caret X
        is the sum of advances and pairwise kerning of the characters before
        the cursor; the glyph under the cursor gives the cursor width (the
        last character of the line past its end, a space on an empty line).
        """

        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")

        row, col = self.text_position
        line = lines[row]
        scale = self.scale

        caret_x = 0.0
        previous: Optional[str] = None
        for char in line[: min(col, len(line))]:
            if previous is not None:
                caret_x += font.pair_kerning(previous, char, scale)
            previous = char
            caret_x += font.advance_width(char, scale)

        if col < len(line):
            under = line[col]
        elif line:
            under = line[-1]
        else:
            under = " "

        line_height = font.v_metrics(scale).line_height

        self.screen_position = (
            caret_x / width * 2.0 - 1.0,
            1.0 - row * line_height / max(height // 2, 1),
        )
        self.glyph_width = font.advance_width(under, scale)
        self.glyph_height = line_height
        return self.rect

    @property
    def rect(self) -> CursorRect:
        x, y = self.screen_position
        return CursorRect(x=x, y=y, width=self.glyph_width, height=self.glyph_height)

    def __repr__(self) -> str:
        return f"Cursor(text_position={self.text_position!r})"


__all__ = ["Cursor", "CursorRect", "DEFAULT_FONT_SIZE"]
