"""TrueType font metrics backed by Pillow's ``ImageFont``."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from PIL import ImageFont

from sietor.runtime import telemetry

from .metrics import VMetrics


class PillowFontMetrics:
    """``FontMetrics`` implementation for a font file on disk.

    Without a ``path`` Pillow's bundled default font is used. Fonts are
    loaded lazily, once per integer pixel size.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        self.logger = telemetry.get_logger("sietor.fonts")
        self._load = lru_cache(maxsize=16)(self._load_font)

    def _load_font(self, size: int) -> Any:
        if self.path:
            self.logger.debug(f"Loading font {self.path!r} at {size}px")
            return ImageFont.truetype(self.path, size)
        return ImageFont.load_default(size)

    def font(self, scale: float) -> Any:
        return self._load(max(1, round(scale)))

    def advance_width(self, char: str, scale: float) -> float:
        return float(self.font(scale).getlength(char))

    def pair_kerning(self, left: str, right: str, scale: float) -> float:
        font = self.font(scale)
        pair = font.getlength(left + right)
        return float(pair - font.getlength(left) - font.getlength(right))

    def v_metrics(self, scale: float) -> VMetrics:
        font = self.font(scale)
        if hasattr(font, "getmetrics"):
            ascent, descent = font.getmetrics()
            # Pillow reports descent as a positive distance below the baseline.
            return VMetrics(ascent=float(ascent), descent=-float(descent), line_gap=0.0)
        _, top, _, bottom = font.getbbox("Ay")
        return VMetrics(ascent=float(bottom - top), descent=0.0, line_gap=0.0)


__all__ = ["PillowFontMetrics"]
