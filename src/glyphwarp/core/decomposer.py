"""Outline decomposition into boundary sides.

The outline frame is walked in contour order starting at corner 0 and cut
every time the next expected corner is reached, producing the top, right,
bottom and left sides as open paths.
"""

from enum import IntEnum

from glyphwarp.domain import CORNER_COUNT, OutlineFrame, Path, Segment
from glyphwarp.exceptions import DecompositionError


class SideIndex(IntEnum):
    """Position of a boundary side in the decomposition result."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class OutlineDecomposer:
    """Splits a four-corner outline frame into four ordered open sides.

    Corners are matched by position within ``tolerance`` rather than by exact
    equality, so floating-point noise from dragging does not break the walk.
    They are consumed strictly in the order the frame lists them.

    Example:
        decomposer = OutlineDecomposer(tolerance=1e-6)
        top, right, bottom, left = decomposer.decompose(frame)
    """

    def __init__(self, tolerance: float = 1e-6) -> None:
        """Initialize the decomposer.

        Args:
            tolerance: Distance under which a vertex matches a corner
        """
        self.tolerance = tolerance

    def decompose(self, frame: OutlineFrame) -> list[Path]:
        """Split the frame into its four boundary sides.

        Each side starts and ends on a corner; consecutive sides share their
        corner vertex. Segments are copied, so the frame is never modified.

        Args:
            frame: Outline frame with four corners in contour order

        Returns:
            Open paths [top, right, bottom, left]

        Raises:
            DecompositionError: If the walk does not yield exactly four sides,
                or another vertex lies on a corner
        """
        segments = frame.path.segments
        if len(frame.corners) != CORNER_COUNT:
            raise DecompositionError(
                f"expected {CORNER_COUNT} corners, frame has {len(frame.corners)}"
            )

        start = self._find_start(frame)
        if start is None:
            raise DecompositionError(
                "first corner is not on the outline",
                unmatched_corners=tuple(range(CORNER_COUNT)),
            )

        walk = segments[start:] + segments[:start] + [segments[start]]
        targets = list(frame.corners[1:]) + [frame.corners[0]]
        target_indices = list(range(1, CORNER_COUNT)) + [0]

        sides: list[Path] = []
        group: list[Segment] = []
        on_path = {id(s) for s in segments}
        for segment in walk:
            group.append(segment.clone())
            if targets and targets[0].point.is_close(segment.point, self.tolerance):
                if segment is not targets[0] and id(targets[0]) in on_path:
                    # Another vertex sits on the corner ahead of it
                    raise DecompositionError(
                        f"vertex {frame.path.index_of(segment)} coincides with "
                        f"corner {target_indices[0]}",
                        sides_found=len(sides),
                        unmatched_corners=tuple(target_indices),
                    )
                sides.append(Path(segments=group, closed=False))
                group = [segment.clone()]
                targets.pop(0)
                target_indices.pop(0)

        if targets or len(sides) != CORNER_COUNT:
            raise DecompositionError(
                f"found {len(sides)} sides, expected {CORNER_COUNT}",
                sides_found=len(sides),
                unmatched_corners=tuple(target_indices),
            )

        # All corners matched before the walk returned to corner 0
        if len(group) > 1:
            raise DecompositionError(
                f"{len(group) - 1} vertices left over after the last corner",
                sides_found=len(sides),
            )

        return sides

    def _find_start(self, frame: OutlineFrame) -> int | None:
        """Locate corner 0 in the frame, by identity then by position."""
        first = frame.corners[0]
        index = frame.path.index_of(first)
        if index is not None:
            return index

        for i, segment in enumerate(frame.path.segments):
            if segment.point.is_close(first.point, self.tolerance):
                return i
        return None
