"""2D point value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate compared by exact equality."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def is_close(self, other: Point, tolerance: float = 0.0) -> bool:
        """Check coordinate match within an absolute tolerance.

        With the default tolerance of 0.0 this is plain equality.
        """
        if tolerance <= 0:
            return self == other
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    @classmethod
    def coerce(cls, value: PointLike) -> Point:
        """Build a Point from a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


PointLike = Union[Point, Sequence[float]]
