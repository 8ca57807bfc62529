"""Runtime services shared across the editor (telemetry, logging)."""

from . import telemetry

__all__ = ["telemetry"]
