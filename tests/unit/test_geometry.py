"""Tests for geometry utilities."""

import pytest
from fontTools.pens.recordingPen import RecordingPen

from glyphwarp.core._bezier import cubic_point_at
from glyphwarp.core.geometry import (
    artwork_bounds,
    draw_path,
    lerp,
    nearest_location,
    nearest_point_on_segment,
    split_curve,
)
from glyphwarp.domain import CompoundPath, Path, Point, Rect, Segment


@pytest.fixture
def wave() -> Path:
    """Open path of one S-shaped cubic."""
    return Path(
        segments=[
            Segment(Point(0, 0), handle_out=Point(30, -40)),
            Segment(Point(100, 0), handle_in=Point(-30, 40)),
        ]
    )


class TestLerp:
    """Tests for lerp."""

    def test_endpoints_exact(self) -> None:
        """Test that t=0 and t=1 reproduce the end points."""
        a, b = Point(0.1, 0.7), Point(3.3, -2.9)
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b

    def test_midpoint(self) -> None:
        """Test interpolation halfway."""
        assert lerp(Point(0, 0), Point(10, 20), 0.5) == Point(5, 10)


class TestDrawing:
    """Tests for drawing through the pen protocol."""

    def test_closed_polygon(self) -> None:
        """Test that a straight closing curve is left to closePath."""
        path = Path.from_points([Point(0, 0), Point(10, 0), Point(10, 10)], closed=True)
        pen = RecordingPen()
        draw_path(path, pen)
        assert pen.value == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("lineTo", ((10, 10),)),
            ("closePath", ()),
        ]

    def test_open_cubic(self, wave: Path) -> None:
        """Test that curved segments become curveTo."""
        pen = RecordingPen()
        draw_path(wave, pen)
        assert pen.value == [
            ("moveTo", ((0, 0),)),
            ("curveTo", ((30, -40), (70, 40), (100, 0))),
            ("endPath", ()),
        ]


class TestBounds:
    """Tests for artwork_bounds."""

    def test_includes_curve_extrema(self, wave: Path) -> None:
        """Test that bounds cover the curve, not just its anchors."""
        bounds = artwork_bounds(wave)
        assert bounds is not None
        assert bounds.x == 0
        assert bounds.right == 100
        assert bounds.y < -5
        assert bounds.bottom > 5
        assert bounds.y > -40

    def test_compound(self, curved_artwork: CompoundPath) -> None:
        """Test bounds of a multi-contour artwork."""
        assert artwork_bounds(curved_artwork) == Rect(0, 0, 100, 50)

    def test_empty(self) -> None:
        """Test that empty artwork has no bounds."""
        assert artwork_bounds(CompoundPath()) is None


class TestNearest:
    """Tests for nearest-location search."""

    def test_nearest_point_on_segment(self) -> None:
        """Test projection onto a line segment, clamped to its ends."""
        assert nearest_point_on_segment(Point(5, 3), Point(0, 0), Point(10, 0)) == (0.5, 3.0)
        t, dist = nearest_point_on_segment(Point(-4, 3), Point(0, 0), Point(10, 0))
        assert t == 0.0
        assert dist == 5.0

    def test_nearest_location_picks_curve(self) -> None:
        """Test that the closest of several curves is found."""
        path = Path.from_points([Point(0, 0), Point(10, 0), Point(10, 10)])
        index, t, dist = nearest_location(path, Point(12, 4))
        assert index == 1
        assert t == pytest.approx(0.4)
        assert dist == pytest.approx(2.0)

    def test_nearest_location_on_cubic(self, wave: Path) -> None:
        """Test that a point on a cubic is found at distance zero."""
        on_curve = cubic_point_at(wave.curves[0].points(), 0.3)
        _, t, dist = nearest_location(wave, on_curve, steps=128)
        assert t == pytest.approx(0.3, abs=1e-3)
        assert dist < 1e-2

    def test_nearest_location_needs_curves(self) -> None:
        """Test that a single-point path cannot be searched."""
        with pytest.raises(ValueError):
            nearest_location(Path.from_points([Point(0, 0)]), Point(1, 1))


class TestSplitCurve:
    """Tests for split_curve."""

    def test_split_straight(self) -> None:
        """Test splitting a straight curve."""
        path = Path.from_points([Point(0, 0), Point(10, 0)])
        middle = split_curve(path, 0, 0.25)
        assert path.points == [Point(0, 0), Point(2.5, 0), Point(10, 0)]
        assert path.segments[1] is middle
        assert not middle.has_handles()

    def test_split_preserves_shape(self, wave: Path) -> None:
        """Test that the two halves trace the original cubic."""
        original = wave.curves[0].points()
        split_curve(wave, 0, 0.5)
        left, right = wave.curves
        for s in (0.0, 0.3, 0.7, 1.0):
            assert cubic_point_at(left.points(), s).is_close(
                cubic_point_at(original, s * 0.5), 1e-9
            )
            assert cubic_point_at(right.points(), s).is_close(
                cubic_point_at(original, 0.5 + s * 0.5), 1e-9
            )

    def test_split_closing_curve(self) -> None:
        """Test that splitting the closing curve appends the new vertex."""
        path = Path.from_points([Point(0, 0), Point(10, 0), Point(10, 10)], closed=True)
        split_curve(path, 2, 0.5)
        assert path.points[-1] == Point(5, 5)
        assert len(path.curves) == 4

    def test_split_parameter_must_be_interior(self, wave: Path) -> None:
        """Test that splitting at an end point is refused."""
        with pytest.raises(ValueError):
            split_curve(wave, 0, 1.0)
