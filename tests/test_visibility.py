"""Tests for segment crossing and line-of-sight checks.

Line of sight is checked against true boundary edges by default. The
legacy mode pairs each vertex with itself, so only the midpoint guard can
reject a line of sight; both behaviours are covered here.
"""

import pytest

from walkarea.geometry import (
    EdgeTestMode,
    GeometryConfig,
    Point,
    Polygon,
    crosses_boundary,
    segments_cross,
)


SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
L_SHAPE = [(0, 0), (10, 0), (10, 10), (5, 10), (5, 5), (0, 5)]

# Both points are inside the L and the midpoint is too, but the line
# leaves through the bottom of the notch and comes back through its side.
NOTCH_CUTTER = (Point(1, 4), Point(9.5, 9))


@pytest.fixture
def square():
    return Polygon(SQUARE)


@pytest.fixture
def l_shape():
    return Polygon(L_SHAPE)


@pytest.fixture
def legacy_l_shape():
    return Polygon(L_SHAPE, config=GeometryConfig(edge_test_mode=EdgeTestMode.LEGACY))


class TestSegmentsCross:
    """Test the parametric proper-crossing test."""

    def test_proper_crossing(self):
        """Diagonals of a square cross."""
        assert segments_cross(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))

    def test_disjoint(self):
        """Far apart segments do not cross."""
        assert not segments_cross(Point(0, 0), Point(1, 1), Point(5, 0), Point(6, 0))

    def test_parallel(self):
        """Parallel segments have a zero denominator."""
        assert not segments_cross(Point(0, 0), Point(10, 0), Point(0, 1), Point(10, 1))

    def test_collinear_overlap(self):
        """Overlapping collinear segments are not a proper crossing."""
        assert not segments_cross(Point(0, 0), Point(10, 0), Point(5, 0), Point(15, 0))

    def test_touching_endpoint(self):
        """Shared endpoint is not a crossing."""
        assert not segments_cross(Point(0, 0), Point(5, 5), Point(5, 5), Point(10, 0))

    def test_t_junction(self):
        """Endpoint resting on the other segment is not a crossing."""
        assert not segments_cross(Point(5, 0), Point(5, 5), Point(0, 0), Point(10, 0))

    def test_zero_length_edge_never_crosses(self):
        """Degenerate edge never crosses."""
        assert not segments_cross(Point(0, 0), Point(10, 10), Point(5, 5), Point(5, 5))


class TestCrossesBoundary:
    """Test edge sets used for line of sight."""

    def test_boundary_edges_detect_notch(self):
        """True edges catch the line through the notch."""
        a, b = NOTCH_CUTTER
        points = Polygon(L_SHAPE).points
        assert crosses_boundary(a, b, points, EdgeTestMode.BOUNDARY)

    def test_legacy_edges_never_cross(self):
        """Vertex-to-itself edges never report a crossing."""
        a, b = NOTCH_CUTTER
        points = Polygon(L_SHAPE).points
        assert not crosses_boundary(a, b, points, EdgeTestMode.LEGACY)


class TestPointsCanSeeEachOther:
    """Test mutual visibility."""

    def test_square_diagonal(self, square):
        """Opposite interior points of a square see each other."""
        assert square.points_can_see_each_other((1, 1), (9, 9))

    def test_same_point(self, square, l_shape):
        """A point inside always sees itself."""
        assert square.points_can_see_each_other((3, 3), (3, 3))
        assert l_shape.points_can_see_each_other((8, 8), (8, 8))

    def test_outside_point_never_visible(self, square):
        """An outside point sees nothing, not even itself."""
        assert not square.points_can_see_each_other((5, 5), (15, 15))
        assert not square.points_can_see_each_other((15, 15), (15, 15))

    def test_l_shape_across_notch(self, l_shape, legacy_l_shape):
        """Line across the notch is blocked in both modes."""
        assert not l_shape.points_can_see_each_other((1, 9), (9, 1))
        assert not legacy_l_shape.points_can_see_each_other((1, 9), (9, 1))

    def test_l_shape_within_bottom_strip(self, l_shape):
        """Points in the same arm see each other."""
        assert l_shape.points_can_see_each_other((1, 1), (9, 4))

    def test_l_shape_grazing_notch_corner(self, l_shape):
        """Touching the notch vertex is not a crossing."""
        assert l_shape.points_can_see_each_other((2, 2), (8, 8))

    def test_boundary_mode_blocks_notch_cutter(self, l_shape):
        """Inside endpoints and midpoint still do not give sight through the notch."""
        a, b = NOTCH_CUTTER
        assert l_shape.is_point_inside(a)
        assert l_shape.is_point_inside(b)
        assert not l_shape.points_can_see_each_other(a, b)

    def test_legacy_mode_misses_notch_cutter(self, legacy_l_shape):
        """Legacy edges never cross, so the inside midpoint lets it through."""
        a, b = NOTCH_CUTTER
        assert legacy_l_shape.points_can_see_each_other(a, b)

    def test_legacy_mode_midpoint_guard(self, legacy_l_shape):
        """Midpoint in the notch still blocks in legacy mode."""
        assert not legacy_l_shape.points_can_see_each_other((1, 4), (6, 9))

    def test_symmetric(self, l_shape):
        """Visibility does not depend on argument order."""
        pairs = [((1, 1), (9, 9)), (NOTCH_CUTTER[0], NOTCH_CUTTER[1]), ((2, 2), (8, 8))]
        for a, b in pairs:
            assert l_shape.points_can_see_each_other(a, b) == l_shape.points_can_see_each_other(b, a)
