"""Tests for arc-length addressing of curve chains."""

import math

import pytest
from fontTools.misc.bezierTools import calcCubicArcLength

from glyphwarp.core.arc_length import ArcLengthCurve
from glyphwarp.core.geometry import nearest_location
from glyphwarp.domain import Path, Point, Segment
from glyphwarp.exceptions import GeometryError


@pytest.fixture
def polyline() -> Path:
    """Open L-shaped polyline of length 30."""
    return Path.from_points([Point(0, 0), Point(10, 0), Point(10, 20)])


@pytest.fixture
def arc() -> Path:
    """Single cubic approximating a quarter circle of radius 100."""
    k = 55.228
    return Path(
        segments=[
            Segment(Point(100, 0), handle_out=Point(0, k)),
            Segment(Point(0, 100), handle_in=Point(k, 0)),
        ]
    )


class TestLengths:
    """Tests for measured lengths."""

    def test_polyline_length(self, polyline: Path) -> None:
        """Test that straight curves are measured exactly."""
        curve = ArcLengthCurve(polyline)
        assert curve.total_length == 30.0
        assert curve.length == 30.0

    def test_closed_path_includes_closing_curve(self) -> None:
        """Test that the closing curve of a closed path is measured."""
        square = Path.from_points(
            [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)], closed=True
        )
        assert ArcLengthCurve(square).total_length == 40.0

    def test_cubic_length_matches_fonttools(self, arc: Path) -> None:
        """Test cubic length against fontTools directly."""
        expected = calcCubicArcLength(
            (100, 0), (100, 55.228), (55.228, 100), (0, 100), tolerance=0.005
        )
        assert ArcLengthCurve(arc).total_length == pytest.approx(expected)
        assert ArcLengthCurve(arc).total_length == pytest.approx(math.pi * 50, rel=1e-3)

    def test_empty_path_raises(self) -> None:
        """Test that a path without segments cannot be measured."""
        with pytest.raises(GeometryError):
            ArcLengthCurve(Path())

    def test_single_point_path(self) -> None:
        """Test that a single-point path has zero length and returns its point."""
        curve = ArcLengthCurve(Path.from_points([Point(3, 4)]))
        assert curve.length == 0.0
        assert curve.point_at(5.0) == Point(3, 4)


class TestPointAt:
    """Tests for point_at."""

    def test_endpoints_are_exact(self, polyline: Path) -> None:
        """Test that 0 and the full length return the exact end points."""
        curve = ArcLengthCurve(polyline)
        assert curve.point_at(0.0) == Point(0, 0)
        assert curve.point_at(curve.length) == Point(10, 20)

    def test_interior_of_polyline(self, polyline: Path) -> None:
        """Test sampling across a vertex of a polyline."""
        curve = ArcLengthCurve(polyline)
        assert curve.point_at(5.0) == Point(5, 0)
        assert curve.point_at(10.0) == Point(10, 0)
        assert curve.point_at(20.0) == Point(10, 10)

    def test_clamped_outside_window(self, polyline: Path) -> None:
        """Test that distances outside the window are clamped."""
        curve = ArcLengthCurve(polyline)
        assert curve.point_at(-5.0) == Point(0, 0)
        assert curve.point_at(1000.0) == Point(10, 20)

    def test_point_lies_on_cubic(self, arc: Path) -> None:
        """Test that sampled points lie on the curve itself."""
        curve = ArcLengthCurve(arc)
        for fraction in (0.1, 0.25, 0.5, 0.9):
            point = curve.point_at(curve.length * fraction)
            _, _, distance = nearest_location(arc, point, steps=256)
            assert distance < 1e-2

    def test_distance_is_arc_length(self, arc: Path) -> None:
        """Test that the midpoint by distance is the symmetric midpoint of the arc."""
        curve = ArcLengthCurve(arc)
        mid = curve.point_at(curve.length / 2)
        assert mid.x == pytest.approx(mid.y, abs=0.05)
        assert mid.length() == pytest.approx(100.0, rel=1e-3)


class TestWindow:
    """Tests for offset and length windows."""

    def test_offset_window(self, polyline: Path) -> None:
        """Test that the window starts at the offset."""
        curve = ArcLengthCurve(polyline, offset=10.0, length=10.0)
        assert curve.length == 10.0
        assert curve.point_at(0.0) == Point(10, 0)
        assert curve.point_at(10.0) == Point(10, 10)
        assert curve.point_at(50.0) == Point(10, 10)

    def test_window_clamped_to_path(self, polyline: Path) -> None:
        """Test that a window longer than the path is clamped to it."""
        curve = ArcLengthCurve(polyline, offset=25.0, length=100.0)
        assert curve.length == 5.0
        assert curve.point_at(curve.length) == Point(10, 20)

    def test_location_at(self, polyline: Path) -> None:
        """Test curve index and parameter lookup."""
        curve = ArcLengthCurve(polyline)
        assert curve.location_at(5.0) == (0, 0.5)
        index, t = curve.location_at(20.0)
        assert index == 1
        assert t == pytest.approx(0.5)
