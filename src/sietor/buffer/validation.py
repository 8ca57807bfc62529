"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from .errors import EmptyBufferError, OutOfBoundsError, TextPosition


def ensure_not_empty(lines: Sequence[str]) -> None:
    if not lines:
        raise EmptyBufferError("Buffer has no lines")


def ensure_row(lines: Sequence[str], row: int) -> int:
    ensure_not_empty(lines)
    if row < 0 or row >= len(lines):
        raise OutOfBoundsError(
            f"Row {row} out of range (0..{len(lines) - 1})", position=(row, 0)
        )
    return row


def ensure_position(lines: Sequence[str], position: TextPosition) -> TextPosition:
    row, col = position
    ensure_row(lines, row)
    if col < 0 or col > len(lines[row]):
        raise OutOfBoundsError(
            f"Column {col} out of range (0..{len(lines[row])}) on row {row}",
            position=position,
        )
    return position


__all__ = ["ensure_not_empty", "ensure_row", "ensure_position"]
