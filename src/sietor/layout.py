"""Glyph placement for the visible part of a buffer.

Renderers call ``layout_lines`` each frame with the buffer's lines and draw
whatever it yields; nothing here touches buffer state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from sietor.fonts.metrics import FontMetrics
from sietor.runtime import telemetry


@dataclass(frozen=True, slots=True)
class PositionedGlyph:
    """One character placed in pixel space; ``y`` is the baseline."""

    char: str
    row: int
    col: int
    x: float
    y: float
    advance: float


def layout_lines(
    lines: Sequence[str],
    font: FontMetrics,
    scale: float,
    *,
    max_width: Optional[float] = None,
    first_row: int = 0,
    max_rows: Optional[int] = None,
) -> Iterator[PositionedGlyph]:
    """Lay out ``lines[first_row:first_row + max_rows]`` left to right.

    A glyph whose right edge would pass ``max_width`` starts a new visual
    line. Control characters produce no glyph; a stray ``\\n`` or ``\\r``
    inside a line is reported and breaks the visual line.
    """

    v_metrics = font.v_metrics(scale)
    line_height = v_metrics.line_height
    y = v_metrics.ascent
    end = len(lines) if max_rows is None else min(len(lines), first_row + max_rows)

    for row in range(max(first_row, 0), end):
        line = lines[row]
        x = 0.0
        previous: Optional[str] = None
        for col, char in enumerate(line):
            if not char.isprintable():
                if char in "\r\n":
                    telemetry.get_logger("sietor.layout").error(
                        f"Line {row} contains an embedded line break; it should be split"
                    )
                    x = 0.0
                    y += line_height
                    previous = None
                continue
            if previous is not None:
                x += font.pair_kerning(previous, char, scale)
            previous = char
            advance = font.advance_width(char, scale)
            if max_width is not None and x > 0 and x + advance > max_width:
                x = 0.0
                y += line_height
            yield PositionedGlyph(char=char, row=row, col=col, x=x, y=y, advance=advance)
            x += advance
        y += line_height


__all__ = ["PositionedGlyph", "layout_lines"]
