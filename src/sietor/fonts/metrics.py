"""Narrow font-metrics capability the editor core depends on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class VMetrics:
    """Vertical metrics at a given scale. ``descent`` is negative."""

    ascent: float
    descent: float
    line_gap: float

    @property
    def line_height(self) -> float:
        return self.ascent - self.descent + self.line_gap


class FontMetrics(Protocol):
    """What the core needs to know about a font, all in pixels at ``scale``."""

    def advance_width(self, char: str, scale: float) -> float:
        ...

    def pair_kerning(self, left: str, right: str, scale: float) -> float:
        ...

    def v_metrics(self, scale: float) -> VMetrics:
        ...


@dataclass(frozen=True, slots=True)
class MonospaceMetrics:
    """Fixed-pitch metrics expressed as fractions of the em size.

    Every glyph advances by ``advance * scale`` and kerning is always zero,
    which also models a terminal cell grid when ``scale`` is the cell width
    divided by ``advance``.
    """

    advance: float = 0.6
    ascent: float = 0.8
    descent: float = -0.2
    line_gap: float = 0.0

    def advance_width(self, char: str, scale: float) -> float:
        del char
        return self.advance * scale

    def pair_kerning(self, left: str, right: str, scale: float) -> float:
        del left, right, scale
        return 0.0

    def v_metrics(self, scale: float) -> VMetrics:
        return VMetrics(
            ascent=self.ascent * scale,
            descent=self.descent * scale,
            line_gap=self.line_gap * scale,
        )


__all__ = ["VMetrics", "FontMetrics", "MonospaceMetrics"]
