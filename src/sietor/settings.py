"""Editor settings resolved from ``SIETOR_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from sietor.buffer.cursor import DEFAULT_FONT_SIZE
from sietor.fonts.pillow import PillowFontMetrics

ENV_PREFIX = "SIETOR_"


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(slots=True)
class EditorSettings:
    font_size: float = DEFAULT_FONT_SIZE
    scale_factor: float = 1.0
    font_path: Optional[str] = None
    viewport_width: int = 512
    viewport_height: int = 512

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        """Build settings from the environment, ignoring malformed values."""

        source = os.environ if env is None else env
        defaults = cls()
        return cls(
            font_size=_env_float(source, "FONT_SIZE", defaults.font_size),
            scale_factor=_env_float(source, "SCALE_FACTOR", defaults.scale_factor),
            font_path=source.get(f"{ENV_PREFIX}FONT_PATH") or None,
            viewport_width=_env_int(source, "VIEWPORT_WIDTH", defaults.viewport_width),
            viewport_height=_env_int(
                source, "VIEWPORT_HEIGHT", defaults.viewport_height
            ),
        )

    def load_font(self) -> PillowFontMetrics:
        return PillowFontMetrics(self.font_path)


__all__ = ["EditorSettings"]
