"""Absolute / relative coordinates used for row and column moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

A = TypeVar("A")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Absolute(Generic[A]):
    """A coordinate given directly."""

    value: A


@dataclass(frozen=True, slots=True)
class Relative(Generic[R]):
    """A coordinate given as an offset from the cursor."""

    delta: R


Position = Union[Absolute[A], Relative[R]]


def resolve(position: Position[int, int], current: int) -> int:
    """Turn ``position`` into an absolute coordinate against ``current``.

    No clamping happens here; callers own bounds policy.
    """

    if isinstance(position, Absolute):
        return position.value
    if isinstance(position, Relative):
        return current + position.delta
    raise TypeError(f"Expected Absolute or Relative, got {type(position).__name__}")


__all__ = ["Absolute", "Relative", "Position", "resolve"]
