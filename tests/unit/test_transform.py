"""Tests for point-mapping transforms of artworks."""

import math

import pytest

from glyphwarp.core.transform import PathTransform
from glyphwarp.domain import CompoundPath, Path, Point, Rect, Segment


def _stretch(point: Point) -> Point:
    return Point(point.x * 2.0, point.y)


def _shear(point: Point) -> Point:
    return Point(point.x + 0.5 * point.y, point.y)


def _bend(point: Point) -> Point:
    return Point(point.x, point.y + 0.01 * point.x * point.x)


class TestTopology:
    """Tests that transforms never change artwork structure."""

    def test_structure_preserved(self, curved_artwork: CompoundPath) -> None:
        """Test contour count, vertex counts and closed flags."""
        result = PathTransform(_bend).transform_compound(curved_artwork)
        assert len(result.children) == len(curved_artwork.children)
        for before, after in zip(curved_artwork.children, result.children):
            assert len(after.segments) == len(before.segments)
            assert after.closed == before.closed

    def test_handle_topology_preserved(self, curved_artwork: CompoundPath) -> None:
        """Test that zero handles stay zero and non-zero handles stay non-zero."""
        result = PathTransform(_bend).transform_compound(curved_artwork)
        for before, after in zip(curved_artwork.children, result.children):
            for s_before, s_after in zip(before.segments, after.segments):
                assert s_after.handle_in.is_zero() == s_before.handle_in.is_zero()
                assert s_after.handle_out.is_zero() == s_before.handle_out.is_zero()

    def test_empty_and_single_point_contours_kept(self) -> None:
        """Test that degenerate contours are carried through."""
        artwork = CompoundPath(children=[Path(), Path.from_points([Point(1, 1)])])
        result = PathTransform(_stretch).transform(artwork)
        assert isinstance(result, CompoundPath)
        assert [len(c.segments) for c in result.children] == [0, 1]
        assert result.children[1].segments[0].point == Point(2, 1)

    def test_source_not_modified(self, curved_artwork: CompoundPath) -> None:
        """Test that the input artwork is left alone."""
        before = curved_artwork.to_dict()
        PathTransform(_bend).transform(curved_artwork)
        assert curved_artwork.to_dict() == before

    def test_transform_dispatches_on_path(self) -> None:
        """Test that a single path comes back as a path."""
        path = Path.from_points([Point(0, 0), Point(1, 0)])
        result = PathTransform(_stretch).transform(path)
        assert isinstance(result, Path)
        assert result.points == [Point(0, 0), Point(2, 0)]


class TestHandles:
    """Tests for Jacobian-derived handles."""

    def test_linear_map_applies_exactly(self) -> None:
        """Test that handles of a linear map are mapped by the map itself."""
        segment = Segment(Point(10, 10), Point(-3, 1), Point(3, -1))
        result = PathTransform(_shear, step=1e-3).transform_segment(segment)
        assert result.point == Point(15, 10)
        assert result.handle_out.x == pytest.approx(2.5)
        assert result.handle_out.y == pytest.approx(-1.0)
        assert result.handle_in.x == pytest.approx(-2.5)
        assert result.handle_in.y == pytest.approx(1.0)

    def test_smooth_vertex_stays_smooth(self) -> None:
        """Test that opposite collinear handles remain opposite and collinear."""
        segment = Segment(Point(30, 5), Point(-4, -2), Point(8, 4))
        result = PathTransform(_bend).transform_segment(segment)
        h_in, h_out = result.handle_in, result.handle_out
        cross = h_in.x * h_out.y - h_in.y * h_out.x
        dot = h_in.x * h_out.x + h_in.y * h_out.y
        assert cross == pytest.approx(0.0, abs=1e-6)
        assert dot < 0

    def test_handle_follows_local_stretch(self) -> None:
        """Test that a handle grows with the local scale of the map."""
        segment = Segment(Point(0, 0), handle_out=Point(1, 0))
        result = PathTransform(_stretch).transform_segment(segment)
        assert result.handle_out.length() == pytest.approx(2.0)

    def test_jacobian_of_bend(self) -> None:
        """Test the finite difference Jacobian against the analytic one."""
        a, b, c, d = PathTransform(_bend, step=1e-4).jacobian(Point(10, 3))
        assert a == pytest.approx(1.0)
        assert b == pytest.approx(0.0, abs=1e-9)
        assert c == pytest.approx(0.2, rel=1e-4)
        assert d == pytest.approx(1.0)

    def test_one_sided_probes_at_domain_edge(self) -> None:
        """Test that probes never leave the domain."""
        probed: list[Point] = []

        def fn(point: Point) -> Point:
            probed.append(point)
            return Point(math.sqrt(point.x), point.y)

        domain = Rect(0.0, 0.0, 10.0, 10.0)
        PathTransform(fn, step=0.5, domain=domain).jacobian(Point(0.0, 10.0))
        assert all(domain.contains(p) for p in probed)
