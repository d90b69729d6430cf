"""Small integer and float 2D vectors with a few helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

_T = TypeVar("_T", int, float)


@dataclass(frozen=True)
class IVec2:
    """Integer 2D vector, used for indices into a sprite sheet grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: IVec2) -> IVec2:
        return IVec2(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class FVec2:
    """Float 2D vector, used for positions in the game window."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: FVec2) -> FVec2:
        return FVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: FVec2) -> FVec2:
        return FVec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> FVec2:
        return FVec2(self.x * factor, self.y * factor)


def clamp(x: _T, lo: _T, hi: _T) -> _T:
    """Limit ``x`` to the closed range ``[lo, hi]``."""
    return max(lo, min(x, hi))


def dot(a: FVec2, b: FVec2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def length(v: FVec2) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def normalize(v: FVec2) -> FVec2:
    """Unit vector pointing the same way as ``v``.

    Raises ZeroDivisionError for the zero vector.
    """
    size = length(v)
    return FVec2(v.x / size, v.y / size)