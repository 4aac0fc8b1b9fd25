"""Internal cubic Bezier helpers built on fontTools.

This is an internal module containing helper functions for arc-length
sampling and curve splitting. Not intended for public use.
"""

import math
from bisect import bisect_left

from fontTools.misc.bezierTools import calcCubicArcLength, cubicPointAtT, splitCubicAtT

from glyphwarp.domain import Point

CubicPoints = tuple[Point, Point, Point, Point]


def _tuples(points: CubicPoints) -> tuple[tuple[float, float], ...]:
    return tuple(p.to_tuple() for p in points)


def cubic_length(points: CubicPoints, tolerance: float) -> float:
    """Measure the arc length of a cubic Bezier curve.

    Args:
        points: Control points (p0, p1, p2, p3)
        tolerance: Measuring tolerance passed to fontTools

    Returns:
        Arc length of the curve
    """
    p0, p1, p2, p3 = points
    if p1 == p0 and p2 == p3:
        return math.hypot(p3.x - p0.x, p3.y - p0.y)
    return calcCubicArcLength(*_tuples(points), tolerance=tolerance)


def cubic_point_at(points: CubicPoints, t: float) -> Point:
    """Evaluate a cubic Bezier curve at parameter t.

    Args:
        points: Control points (p0, p1, p2, p3)
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    x, y = cubicPointAtT(*_tuples(points), t)
    return Point(x, y)


def split_cubic(points: CubicPoints, t: float) -> tuple[CubicPoints, CubicPoints]:
    """Split a cubic Bezier curve at parameter t (De Casteljau).

    Args:
        points: Control points (p0, p1, p2, p3)
        t: Split parameter strictly between 0 and 1

    Returns:
        Control points of the left and right halves
    """
    left, right = splitCubicAtT(*_tuples(points), t)
    return (
        tuple(Point(x, y) for x, y in left),  # type: ignore[return-value]
        tuple(Point(x, y) for x, y in right),
    )


def length_table(points: CubicPoints, samples: int, tolerance: float) -> list[float]:
    """Build cumulative arc lengths at evenly spaced parameters.

    Entry ``i`` is the arc length from t=0 to t=i/samples.

    Args:
        points: Control points (p0, p1, p2, p3)
        samples: Number of pieces the curve is split into
        tolerance: Measuring tolerance for each piece

    Returns:
        List of ``samples + 1`` non-decreasing lengths starting at 0.0
    """
    ts = [i / samples for i in range(1, samples)]
    pieces = splitCubicAtT(*_tuples(points), *ts)

    table = [0.0]
    total = 0.0
    for piece in pieces:
        total += calcCubicArcLength(*piece, tolerance=tolerance)
        table.append(total)
    return table


def t_at_length(table: list[float], distance: float) -> float:
    """Invert a length table into a curve parameter.

    Args:
        table: Cumulative lengths from :func:`length_table`
        distance: Arc length from the start of the curve

    Returns:
        Parameter t whose arc length is approximately ``distance``
    """
    samples = len(table) - 1
    if distance <= 0.0 or table[-1] <= 0.0:
        return 0.0
    if distance >= table[-1]:
        return 1.0

    i = bisect_left(table, distance)
    lower = table[i - 1]
    upper = table[i]
    fraction = (distance - lower) / (upper - lower) if upper > lower else 0.0
    return (i - 1 + fraction) / samples
