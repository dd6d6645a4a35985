"""Line segment primitive used for polygon boundaries."""

from dataclasses import dataclass

from .point import Point


@dataclass(frozen=True)
class Segment:
    """Straight segment between two points."""

    a: Point
    b: Point

    def middle_point(self) -> Point:
        return Point((self.a.x + self.b.x) / 2, (self.a.y + self.b.y) / 2)

    def closest_point_to(self, point: Point) -> Point:
        """Project point onto the segment, clamped to its endpoints.

        Args:
            point: Query point

        Returns:
            Point on the segment nearest to the query point
        """
        dx = self.b.x - self.a.x
        dy = self.b.y - self.a.y
        length2 = dx * dx + dy * dy
        if length2 == 0:
            return self.a

        t = ((point.x - self.a.x) * dx + (point.y - self.a.y) * dy) / length2
        if t <= 0:
            return self.a
        if t >= 1:
            return self.b
        return Point(self.a.x + t * dx, self.a.y + t * dy)

    def distance2_to_point(self, point: Point) -> float:
        """Squared distance from point to the closest point on the segment."""
        closest = self.closest_point_to(point)
        dx = point.x - closest.x
        dy = point.y - closest.y
        return dx * dx + dy * dy
