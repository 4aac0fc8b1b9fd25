"""Point-mapping transform of whole artworks.

Anchors are mapped through the point function directly. Handles are not
mapped as free points: each handle vector is multiplied by the Jacobian of
the point function at its anchor, estimated with finite differences. A
smooth vertex (opposite, collinear handles) therefore stays smooth, and the
curve follows the local stretch of the warp.
"""

from collections.abc import Callable

from glyphwarp.domain import CompoundPath, Path, Point, Rect, Segment

PointFunction = Callable[[Point], Point]
Jacobian = tuple[float, float, float, float]


class PathTransform:
    """Applies a point function to every anchor and handle of an artwork.

    The result always has the same topology as the input: same contours in
    the same order, same vertex counts, same closed flags, and a handle is
    non-zero in the output exactly where it was non-zero in the input.

    Example:
        transform = PathTransform(lambda p: Point(p.x * 2, p.y))
        wide = transform.transform(artwork)
    """

    def __init__(
        self,
        point_fn: PointFunction,
        step: float = 1e-4,
        domain: Rect | None = None,
    ) -> None:
        """Initialize the transform.

        Args:
            point_fn: Function mapping source points to target points
            step: Finite difference step for the Jacobian
            domain: Region where ``point_fn`` is meaningful; difference
                probes that would leave it are taken one-sided instead
        """
        self.point_fn = point_fn
        self.step = step
        self.domain = domain

    def transform(self, item: Path | CompoundPath) -> Path | CompoundPath:
        """Transform a single path or a compound artwork.

        Args:
            item: Path or CompoundPath

        Returns:
            New transformed item of the same type
        """
        if isinstance(item, CompoundPath):
            return self.transform_compound(item)
        return self.transform_path(item)

    def transform_compound(self, artwork: CompoundPath) -> CompoundPath:
        """Transform every contour of an artwork.

        Args:
            artwork: Source artwork (not modified)

        Returns:
            New artwork with one transformed contour per source contour
        """
        return CompoundPath(children=[self.transform_path(child) for child in artwork.children])

    def transform_path(self, path: Path) -> Path:
        """Transform a single contour.

        Args:
            path: Source path (not modified)

        Returns:
            New path with transformed segments
        """
        return Path(
            segments=[self.transform_segment(segment) for segment in path.segments],
            closed=path.closed,
        )

    def transform_segment(self, segment: Segment) -> Segment:
        """Transform one segment, deriving its handles from the Jacobian.

        Args:
            segment: Source segment (not modified)

        Returns:
            New transformed segment
        """
        anchor = self.point_fn(segment.point)
        if not segment.has_handles():
            return Segment(anchor)

        jacobian = self.jacobian(segment.point, anchor)
        return Segment(
            anchor,
            _apply(jacobian, segment.handle_in),
            _apply(jacobian, segment.handle_out),
        )

    def jacobian(self, point: Point, mapped: Point | None = None) -> Jacobian:
        """Estimate the Jacobian of the point function.

        Args:
            point: Source point
            mapped: ``point_fn(point)`` if already known

        Returns:
            Tuple (dfx/dx, dfx/dy, dfy/dx, dfy/dy)
        """
        if mapped is None:
            mapped = self.point_fn(point)

        x_limits = y_limits = None
        if self.domain is not None:
            x_limits = (self.domain.x, self.domain.right)
            y_limits = (self.domain.y, self.domain.bottom)

        x_lo, x_hi = self._probe_range(point.x, x_limits)
        y_lo, y_hi = self._probe_range(point.y, y_limits)

        fx_lo = mapped if x_lo == point.x else self.point_fn(Point(x_lo, point.y))
        fx_hi = mapped if x_hi == point.x else self.point_fn(Point(x_hi, point.y))
        fy_lo = mapped if y_lo == point.y else self.point_fn(Point(point.x, y_lo))
        fy_hi = mapped if y_hi == point.y else self.point_fn(Point(point.x, y_hi))

        dx = x_hi - x_lo
        dy = y_hi - y_lo
        return (
            (fx_hi.x - fx_lo.x) / dx,
            (fy_hi.x - fy_lo.x) / dy,
            (fx_hi.y - fx_lo.y) / dx,
            (fy_hi.y - fy_lo.y) / dy,
        )

    def _probe_range(self, value: float, limits: tuple[float, float] | None) -> tuple[float, float]:
        """Pick difference probes around a coordinate, staying inside limits."""
        lo = value - self.step
        hi = value + self.step
        if limits is None:
            return lo, hi

        low_limit, high_limit = limits
        if hi > high_limit and lo >= low_limit:
            return lo, value
        if lo < low_limit and hi <= high_limit:
            return value, hi
        return lo, hi


def _apply(jacobian: Jacobian, handle: Point) -> Point:
    if handle.is_zero():
        return handle
    a, b, c, d = jacobian
    return Point(a * handle.x + b * handle.y, c * handle.x + d * handle.y)
