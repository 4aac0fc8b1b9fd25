"""Sandwich projection between two boundary sides.

A sandwich projection maps the unit square onto the ruled surface between
a top and a bottom side. Both sides are addressed by arc length at the same
normalized fraction ``u``; ``v`` blends along the straight line between the
two sampled points:

    project(u, v) = lerp(top.point_at(u * top_length),
                         bottom.point_at(u * bottom_length), v)

The left and right sides only matter through the corners they share with
top and bottom.
"""

from collections.abc import Callable

from glyphwarp.core.arc_length import ArcLengthCurve
from glyphwarp.core.geometry import lerp
from glyphwarp.domain import Path, Point, Rect
from glyphwarp.exceptions import DegenerateProjectionError

ProjectionFunction = Callable[[float, float], Point]


class SandwichProjection:
    """Projection of unit-square coordinates between a top and bottom side.

    The bottom side must already run in the same direction as the top side;
    reversing it is the caller's job.

    Example:
        projection = SandwichProjection(top, bottom.reversed())
        point = projection(0.5, 0.5)
    """

    def __init__(
        self,
        top: Path,
        bottom: Path,
        degenerate_length: float = 1e-9,
        tolerance: float = 0.005,
        samples: int = 32,
    ) -> None:
        """Measure both sides.

        Args:
            top: Side mapped to v=0
            bottom: Side mapped to v=1, same direction as top
            degenerate_length: Length at or below which a side is unusable
            tolerance: Arc-length measuring tolerance
            samples: Lookup table pieces per curved segment

        Raises:
            DegenerateProjectionError: If either side has no usable length
        """
        self.top = ArcLengthCurve(top, tolerance=tolerance, samples=samples)
        self.bottom = ArcLengthCurve(bottom, tolerance=tolerance, samples=samples)

        if self.top.length <= degenerate_length:
            raise DegenerateProjectionError("top", self.top.length)
        if self.bottom.length <= degenerate_length:
            raise DegenerateProjectionError("bottom", self.bottom.length)

    def __call__(self, u: float, v: float) -> Point:
        """Project a unit-square coordinate.

        Args:
            u: Fraction along the sides (clamped to [0, 1] by arc length)
            v: Blend from top (0) to bottom (1)

        Returns:
            World-space point
        """
        upper = self.top.point_at(u * self.top.length)
        lower = self.bottom.point_at(u * self.bottom.length)
        return lerp(upper, lower, v)


def sandwich_projection(
    top: Path,
    bottom: Path,
    degenerate_length: float = 1e-9,
    tolerance: float = 0.005,
    samples: int = 32,
) -> ProjectionFunction:
    """Build a sandwich projection function.

    Args:
        top: Side mapped to v=0
        bottom: Side mapped to v=1, same direction as top
        degenerate_length: Length at or below which a side is unusable
        tolerance: Arc-length measuring tolerance
        samples: Lookup table pieces per curved segment

    Returns:
        Function mapping (u, v) to a point

    Raises:
        DegenerateProjectionError: If either side has no usable length
    """
    return SandwichProjection(top, bottom, degenerate_length, tolerance, samples)


def unit_normalizer(rect: Rect) -> Callable[[Point], tuple[float, float]]:
    """Build a function mapping points to coordinates relative to a rectangle.

    The rectangle's top-left maps to (0, 0) and bottom-right to (1, 1). An
    axis with zero extent always normalizes to 0.

    Args:
        rect: Reference rectangle

    Returns:
        Function mapping a point to (u, v)
    """
    origin = rect.top_left
    width = rect.width
    height = rect.height

    def normalize(point: Point) -> tuple[float, float]:
        u = (point.x - origin.x) / width if width else 0.0
        v = (point.y - origin.y) / height if height else 0.0
        return u, v

    return normalize
