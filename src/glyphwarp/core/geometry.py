"""Geometric operations on paths and artworks.

This module provides the vector-engine primitives the warp relies on:
- Linear interpolation between points
- Drawing paths through the fontTools pen protocol
- Exact bounds of curved artwork
- Nearest location on a path to a point
- Splitting a curve while preserving its shape

All functions are pure except :func:`split_curve`, which inserts a segment
into the path it is given.
"""

import math
from typing import Any

from fontTools.pens.boundsPen import BoundsPen

from glyphwarp.core._bezier import cubic_point_at, split_cubic
from glyphwarp.domain import CompoundPath, Path, Point, Rect, Segment


def lerp(a: Point, b: Point, t: float) -> Point:
    """Linearly interpolate between two points.

    Written as ``a * (1 - t) + b * t`` so that t=0 and t=1 reproduce the
    endpoints exactly.

    Args:
        a: Point at t=0
        b: Point at t=1
        t: Interpolation factor (not clamped)

    Returns:
        Interpolated point
    """
    return Point(a.x * (1.0 - t) + b.x * t, a.y * (1.0 - t) + b.y * t)


def draw_path(path: Path, pen: Any) -> None:
    """Draw a path onto a fontTools pen.

    Straight curves become ``lineTo``, curved ones ``curveTo``. A closed
    path with a straight closing curve relies on ``closePath`` for the
    closing line.

    Args:
        path: Path to draw
        pen: Any object implementing the fontTools pen protocol
    """
    if not path.segments:
        return

    pen.moveTo(path.segments[0].point.to_tuple())
    curves = path.curves
    for i, curve in enumerate(curves):
        closing = path.closed and i == len(curves) - 1
        if curve.is_straight():
            if closing:
                break
            pen.lineTo(curve.segment2.point.to_tuple())
        else:
            _, p1, p2, p3 = curve.points()
            pen.curveTo(p1.to_tuple(), p2.to_tuple(), p3.to_tuple())

    if path.closed:
        pen.closePath()
    else:
        pen.endPath()


def draw_artwork(artwork: CompoundPath, pen: Any) -> None:
    """Draw every contour of an artwork onto a fontTools pen.

    Args:
        artwork: Artwork to draw
        pen: Any object implementing the fontTools pen protocol
    """
    for child in artwork.children:
        draw_path(child, pen)


def artwork_bounds(artwork: CompoundPath | Path) -> Rect | None:
    """Calculate the exact bounds of an artwork, curve extrema included.

    Args:
        artwork: Artwork or single path

    Returns:
        Bounding rectangle, or None if there is nothing to measure
    """
    pen = BoundsPen(None)
    if isinstance(artwork, Path):
        draw_path(artwork, pen)
    else:
        draw_artwork(artwork, pen)

    if pen.bounds is None:
        return None
    return Rect.from_bounds(pen.bounds)


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[float, float]:
    """Find the parameter of the closest point on a line segment.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (t, distance) where t in [0, 1] locates the nearest point
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-20:
        return 0.0, math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest_x = seg_start.x + t * dx
    nearest_y = seg_start.y + t * dy
    return t, math.hypot(point.x - nearest_x, point.y - nearest_y)


def _nearest_t_on_cubic(
    points: tuple[Point, Point, Point, Point],
    target: Point,
    steps: int,
) -> tuple[float, float]:
    # Coarse scan over the whole curve, then one refinement pass around the
    # best sample.
    def scan(lo: float, hi: float) -> tuple[float, float]:
        best_t = lo
        best_dist = math.inf
        for step in range(steps + 1):
            t = lo + (hi - lo) * step / steps
            p = cubic_point_at(points, t)
            dist = math.hypot(p.x - target.x, p.y - target.y)
            if dist < best_dist:
                best_t, best_dist = t, dist
        return best_t, best_dist

    t, _ = scan(0.0, 1.0)
    width = 1.0 / steps
    return scan(max(0.0, t - width), min(1.0, t + width))


def nearest_location(path: Path, point: Point, steps: int = 64) -> tuple[int, float, float]:
    """Find the curve and parameter on a path closest to a point.

    Args:
        path: Path to search
        point: Point to locate
        steps: Samples per curve for curved segments

    Returns:
        Tuple of (curve_index, t, distance)

    Raises:
        ValueError: If the path has no curves
    """
    curves = path.curves
    if not curves:
        raise ValueError("Path must have at least one curve")

    best = (0, 0.0, math.inf)
    for index, curve in enumerate(curves):
        points = curve.points()
        if curve.is_straight():
            t, dist = nearest_point_on_segment(point, points[0], points[3])
        else:
            t, dist = _nearest_t_on_cubic(points, point, steps)
        if dist < best[2]:
            best = (index, t, dist)
    return best


def split_curve(path: Path, curve_index: int, t: float) -> Segment:
    """Insert a segment into a path, splitting one curve without changing its shape.

    Handles of the neighbouring segments are shortened so that the two
    halves together trace exactly the original curve.

    Args:
        path: Path to modify in place
        curve_index: Index of the curve in ``path.curves``
        t: Split parameter, strictly between 0 and 1

    Returns:
        The inserted segment

    Raises:
        ValueError: If t is not strictly inside the curve
    """
    if not 0.0 < t < 1.0:
        raise ValueError(f"Split parameter must be inside (0, 1), got {t}")

    curve = path.curves[curve_index]
    start, end = curve.segment1, curve.segment2

    if curve.is_straight():
        middle = Segment(lerp(start.point, end.point, t))
    else:
        left, right = split_cubic(curve.points(), t)
        mid_point = left[3]
        start.handle_out = left[1] - left[0]
        end.handle_in = right[2] - right[3]
        middle = Segment(mid_point, left[2] - mid_point, right[1] - mid_point)

    path.segments.insert(curve_index + 1, middle)
    return middle
