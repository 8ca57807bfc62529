"""Font-metrics providers consumed by cursor geometry and layout."""

from .metrics import FontMetrics, MonospaceMetrics, VMetrics
from .pillow import PillowFontMetrics

__all__ = ["FontMetrics", "MonospaceMetrics", "VMetrics", "PillowFontMetrics"]
