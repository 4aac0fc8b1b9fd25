"""Core geometric types for path representation.

This module defines the fundamental geometric types used throughout glyphwarp:
- Point: An immutable 2D point/vector
- Segment: A path vertex with relative cubic handles
- Curve: A view of the cubic between two consecutive segments
- Path: An open or closed chain of segments (one contour)
- CompoundPath: An ordered set of contours treated as one artwork
- Rect: An axis-aligned rectangle
"""

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable. Used both for positions and for the relative
    handle vectors of a segment.

    Attributes:
        x: X coordinate
        y: Y coordinate (grows downward in canvas coordinates)
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return self.__mul__(scalar)

    def length(self) -> float:
        """Length of the point taken as a vector."""
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        """Check if this is the zero vector."""
        return self.x == 0.0 and self.y == 0.0

    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_close(self, other: "Point", tolerance: float) -> bool:
        """Check if another point lies within a distance tolerance.

        Args:
            other: Point to compare against
            tolerance: Maximum distance still considered equal

        Returns:
            True if the points are within tolerance of each other
        """
        return math.hypot(self.x - other.x, self.y - other.y) <= tolerance

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


ZERO = Point(0.0, 0.0)


@dataclass(eq=False)
class Segment:
    """A vertex of a path with optional cubic handles.

    Handles are stored relative to the vertex. A zero handle means the
    adjoining curve is straight on that side. Segments compare by identity,
    so an outline frame can keep references to its corner segments while
    other vertices are inserted around them.

    Attributes:
        point: Anchor position
        handle_in: Handle toward the previous segment, relative to point
        handle_out: Handle toward the next segment, relative to point
    """

    point: Point
    handle_in: Point = ZERO
    handle_out: Point = ZERO

    def has_handles(self) -> bool:
        """Check if either handle is non-zero."""
        return not (self.handle_in.is_zero() and self.handle_out.is_zero())

    def clone(self) -> "Segment":
        """Create an independent copy of this segment."""
        return Segment(self.point, self.handle_in, self.handle_out)

    def reversed(self) -> "Segment":
        """Create a copy with in and out handles swapped."""
        return Segment(self.point, self.handle_out, self.handle_in)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with point and handle fields
        """
        return {
            "point": self.point.to_dict(),
            "handle_in": self.handle_in.to_dict(),
            "handle_out": self.handle_out.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a segment

        Returns:
            Segment instance
        """
        return cls(
            point=Point.from_dict(data["point"]),
            handle_in=Point.from_dict(data["handle_in"]),
            handle_out=Point.from_dict(data["handle_out"]),
        )


@dataclass(frozen=True)
class Curve:
    """The cubic Bezier between two consecutive segments.

    A curve is a read-only view; it reflects the current state of its
    segments.

    Attributes:
        segment1: Start segment
        segment2: End segment
    """

    segment1: Segment
    segment2: Segment

    def points(self) -> tuple[Point, Point, Point, Point]:
        """Absolute control points (p0, p1, p2, p3) of the cubic."""
        p0 = self.segment1.point
        p3 = self.segment2.point
        return (p0, p0 + self.segment1.handle_out, p3 + self.segment2.handle_in, p3)

    def is_straight(self) -> bool:
        """Check if the curve is a straight line (no handles)."""
        return self.segment1.handle_out.is_zero() and self.segment2.handle_in.is_zero()


@dataclass
class Path:
    """A single contour made of segments.

    An open path has one curve between each pair of consecutive segments.
    A closed path has an additional implicit curve from the last segment
    back to the first.

    Attributes:
        segments: Vertices of the contour in order
        closed: Whether the contour is closed
    """

    segments: list[Segment] = field(default_factory=list)
    closed: bool = False

    @classmethod
    def from_points(cls, points: list[Point], closed: bool = False) -> "Path":
        """Build a straight-edged path from anchor points.

        Args:
            points: Anchor positions in order
            closed: Whether the contour is closed

        Returns:
            Path with one handle-less segment per point
        """
        return cls(segments=[Segment(p) for p in points], closed=closed)

    @property
    def points(self) -> list[Point]:
        """Anchor positions in order."""
        return [s.point for s in self.segments]

    @property
    def curves(self) -> list[Curve]:
        """Curves of the contour, including the closing curve if closed."""
        n = len(self.segments)
        if n < 2:
            return []
        curves = [Curve(self.segments[i], self.segments[i + 1]) for i in range(n - 1)]
        if self.closed:
            curves.append(Curve(self.segments[-1], self.segments[0]))
        return curves

    def index_of(self, segment: Segment) -> int | None:
        """Find the index of a segment by identity.

        Args:
            segment: Segment to look for

        Returns:
            Index in this path, or None if the segment is not part of it
        """
        for i, candidate in enumerate(self.segments):
            if candidate is segment:
                return i
        return None

    def clone(self) -> "Path":
        """Deep copy of the path."""
        return Path(segments=[s.clone() for s in self.segments], closed=self.closed)

    def reversed(self) -> "Path":
        """Copy of the path running in the opposite direction."""
        return Path(
            segments=[s.reversed() for s in reversed(self.segments)],
            closed=self.closed,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the path
        """
        return {
            "segments": [s.to_dict() for s in self.segments],
            "closed": self.closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            Path instance
        """
        return cls(
            segments=[Segment.from_dict(s) for s in data["segments"]],
            closed=data["closed"],
        )


@dataclass
class CompoundPath:
    """An artwork made of several contours, such as a letterform with holes.

    Attributes:
        children: Contours in drawing order
    """

    children: list[Path] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the artwork has no segments at all."""
        return all(not child.segments for child in self.children)

    @property
    def segment_count(self) -> int:
        """Total number of segments across all contours."""
        return sum(len(child.segments) for child in self.children)

    def clone(self) -> "CompoundPath":
        """Deep copy of the artwork."""
        return CompoundPath(children=[child.clone() for child in self.children])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the artwork
        """
        return {"children": [child.to_dict() for child in self.children]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompoundPath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an artwork

        Returns:
            CompoundPath instance
        """
        return cls(children=[Path.from_dict(c) for c in data["children"]])


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle.

    Attributes:
        x: Left edge
        y: Top edge (smallest y in canvas coordinates)
        width: Extent along x
        height: Extent along y
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> "Rect":
        """Build from (min_x, min_y, max_x, max_y).

        Args:
            bounds: Bounding box tuple

        Returns:
            Rect covering the bounds
        """
        min_x, min_y, max_x, max_y = bounds
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    def corners(self) -> list[Point]:
        """Corner points in contour order.

        Returns:
            [top_left, top_right, bottom_right, bottom_left]
        """
        return [
            Point(self.x, self.y),
            Point(self.right, self.y),
            Point(self.right, self.bottom),
            Point(self.x, self.bottom),
        ]

    def contains(self, point: Point) -> bool:
        """Check if a point lies inside or on the rectangle."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom
