"""Convex hull construction with the monotone chain algorithm.

Points are sorted by x (ties by y), then a lower chain is built left to
right and an upper chain right to left. Any turn that is not strictly
counter-clockwise is popped, so collinear points never reach the hull.
"""

from __future__ import annotations

from typing import Sequence

from .point import Point


def cross(origin: Point, a: Point, b: Point) -> float:
    """Orientation of origin -> a -> b.

    Returns:
        Positive for a counter-clockwise turn, negative for clockwise,
        zero when the three points are collinear
    """
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def _half_chain(points: Sequence[Point]) -> list[Point]:
    chain: list[Point] = []
    for point in points:
        while len(chain) >= 2 and cross(chain[-2], chain[-1], point) <= 0:
            chain.pop()
        chain.append(point)
    return chain


def build_convex_hull(points: Sequence[Point]) -> list[Point]:
    """Compute the strictly convex hull of a point set.

    Args:
        points: Points in any order (not modified)

    Returns:
        Hull vertices in counter-clockwise order, starting from the
        lowest-x (then lowest-y) point. Fewer than 3 points are returned
        when the input is collinear.
    """
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    if len(ordered) < 3:
        return ordered

    lower = _half_chain(ordered)
    upper = _half_chain(list(reversed(ordered)))

    # Last point of each chain is the first point of the other
    lower.pop()
    upper.pop()
    return lower + upper
