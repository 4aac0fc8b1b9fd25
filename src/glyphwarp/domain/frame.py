"""Outline frame around a piece of stretchy artwork.

The frame is a closed path with exactly four designated corner segments.
Corners split the frame into the top, right, bottom and left sides that
drive the warp. Extra vertices may be inserted between corners.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphwarp.domain.path import Path, Point, Rect, Segment

CORNER_COUNT = 4


@dataclass
class OutlineFrame:
    """A closed outline with four corner segments in contour order.

    Attributes:
        path: Closed path of the frame
        corners: References to the four corner segments of ``path``
    """

    path: Path
    corners: list[Segment] = field(default_factory=list)

    @classmethod
    def from_rect(cls, rect: Rect) -> "OutlineFrame":
        """Create the initial rectangular frame around a bounding box.

        Every vertex of the new frame is a corner.

        Args:
            rect: Bounding rectangle

        Returns:
            OutlineFrame with four straight sides
        """
        path = Path.from_points(rect.corners(), closed=True)
        return cls(path=path, corners=list(path.segments))

    def corner_points(self) -> list[Point]:
        """Positions of the four corners in order."""
        return [corner.point for corner in self.corners]

    def corner_index(self, segment: Segment) -> int | None:
        """Index of a segment among the corners, by identity.

        Args:
            segment: Segment to look up

        Returns:
            Corner index 0-3, or None if the segment is not a corner
        """
        for i, corner in enumerate(self.corners):
            if corner is segment:
                return i
        return None

    def is_corner(self, segment: Segment) -> bool:
        """Check if a segment is one of the corners."""
        return self.corner_index(segment) is not None

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the frame, corners included."""
        return len(self.path.segments)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Corners are stored as vertex indices into the path.

        Returns:
            Dictionary representation of the frame
        """
        return {
            "path": self.path.to_dict(),
            "corners": [self.path.index_of(corner) for corner in self.corners],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OutlineFrame":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a frame

        Returns:
            OutlineFrame instance
        """
        path = Path.from_dict(data["path"])
        corners = [path.segments[i] for i in data["corners"]]
        return cls(path=path, corners=corners)
