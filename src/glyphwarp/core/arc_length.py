"""Arc-length addressing of a chain of curves.

Boundary sides of different physical length are sampled at matching
*fractions* of their own length, so a stretch is distributed by distance
along each side rather than by vertex count.
"""

from bisect import bisect_right
from dataclasses import dataclass

from glyphwarp.core._bezier import (
    CubicPoints,
    cubic_length,
    cubic_point_at,
    length_table,
    t_at_length,
)
from glyphwarp.domain import Path, Point
from glyphwarp.exceptions import GeometryError


@dataclass
class _MeasuredCurve:
    points: CubicPoints
    length: float
    table: list[float] | None


class ArcLengthCurve:
    """A window of a path addressed by distance along the path.

    The window starts ``offset`` units along the path and spans ``length``
    units. Queries are clamped to the window and to the true length of the
    path, so the result always lies on the path.

    Example:
        side = ArcLengthCurve(path)
        halfway = side.point_at(side.length / 2)
    """

    def __init__(
        self,
        path: Path,
        offset: float = 0.0,
        length: float | None = None,
        tolerance: float = 0.005,
        samples: int = 32,
    ) -> None:
        """Measure a path and set up the window.

        Args:
            path: Path whose curves form the chain
            offset: Start of the window along the path
            length: Length of the window (None = rest of the path)
            tolerance: Arc-length measuring tolerance
            samples: Lookup table pieces per curved segment

        Raises:
            GeometryError: If the path has no segments
        """
        if not path.segments:
            raise GeometryError("Cannot measure a path without segments")

        self._anchor = path.segments[0].point
        self._curves: list[_MeasuredCurve] = []
        self._starts: list[float] = []

        total = 0.0
        for curve in path.curves:
            points = curve.points()
            curve_length = cubic_length(points, tolerance)
            table = None if curve.is_straight() else length_table(points, samples, tolerance)
            self._starts.append(total)
            self._curves.append(_MeasuredCurve(points, curve_length, table))
            total += curve_length

        self.total_length = total
        self.offset = min(max(offset, 0.0), total)
        available = total - self.offset
        self.length = available if length is None else min(max(length, 0.0), available)

    def location_at(self, distance: float) -> tuple[int, float]:
        """Find the curve index and curve parameter at a window distance.

        Args:
            distance: Distance from the start of the window

        Returns:
            Tuple of (curve_index, t); (0, 0.0) for a single-point path
        """
        if not self._curves:
            return 0, 0.0

        absolute = self.offset + min(max(distance, 0.0), self.length)
        index = max(0, min(bisect_right(self._starts, absolute) - 1, len(self._curves) - 1))
        curve = self._curves[index]
        local = absolute - self._starts[index]

        if local <= 0.0 or curve.length <= 0.0:
            return index, 0.0
        if local >= curve.length:
            return index, 1.0
        if curve.table is None:
            return index, local / curve.length
        return index, t_at_length(curve.table, local)

    def point_at(self, distance: float) -> Point:
        """Point at a distance from the start of the window.

        Args:
            distance: Distance along the window, clamped to [0, length]

        Returns:
            Point on the path
        """
        if not self._curves:
            return self._anchor

        index, t = self.location_at(distance)
        points = self._curves[index].points
        p0, p3 = points[0], points[3]
        if t <= 0.0:
            return p0
        if t >= 1.0:
            return p3
        if self._curves[index].table is None:
            return p0 + (p3 - p0) * t
        return cubic_point_at(points, t)

    def __repr__(self) -> str:
        return (
            f"ArcLengthCurve(curves={len(self._curves)}, offset={self.offset:g}, "
            f"length={self.length:g})"
        )
