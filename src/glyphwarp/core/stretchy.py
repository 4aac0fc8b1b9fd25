"""Stretchy path: artwork warped into an editable four-cornered frame.

The stretchy path owns three things:

- the source artwork, copied at construction and never modified,
- the outline frame, which starts as the source bounding box and is edited
  through the ``on_*`` input methods,
- the display artwork, rebuilt from scratch by every arrangement pass.

An arrangement pass decomposes the frame into four sides, builds a sandwich
projection between the top side and the reversed bottom side, and maps the
source artwork through it, normalizing source points against the original
source bounds. A failed pass keeps the previous display artwork.

Pointer handling lives outside this module: an event layer calls the input
methods with the results of drags and hovers.
"""

import time
from dataclasses import dataclass
from enum import Enum, auto

import structlog
from blinker import Signal

from glyphwarp.config import WarpSettings
from glyphwarp.core.arc_length import ArcLengthCurve
from glyphwarp.core.decomposer import OutlineDecomposer, SideIndex
from glyphwarp.core.geometry import artwork_bounds, nearest_location, split_curve
from glyphwarp.core.projection import SandwichProjection, unit_normalizer
from glyphwarp.core.transform import PathTransform
from glyphwarp.domain import CORNER_COUNT, CompoundPath, OutlineFrame, Path, Point, Rect, Segment
from glyphwarp.exceptions import (
    ArrangementError,
    ArrangementInProgressError,
    InvalidFrameError,
)
from glyphwarp.utils import ArrangementLogger, ArrangementStats

# Sides that carry midpoint markers; left and right are never split.
SPLITTABLE_SIDES = (SideIndex.TOP, SideIndex.BOTTOM)


class ArrangeState(Enum):
    """Arrangement state of a stretchy path."""

    IDLE = auto()
    ARRANGING = auto()


@dataclass(frozen=True)
class VertexHandle:
    """A draggable handle on a frame vertex.

    Attributes:
        index: Vertex index in the frame path
        point: Current vertex position
        is_corner: Whether the vertex is one of the four corners
    """

    index: int
    point: Point
    is_corner: bool


@dataclass(frozen=True)
class MidpointMarker:
    """A handle at the middle of a top or bottom frame curve.

    Dragging a marker inserts a new frame vertex.

    Attributes:
        side: Side the curve belongs to
        curve_index: Index of the curve in the frame path
        point: Arc-length midpoint of the curve
    """

    side: SideIndex
    curve_index: int
    point: Point


@dataclass(frozen=True)
class EditAffordances:
    """Snapshot of the editing handles and outline styling.

    Attributes:
        visible: Whether handles are shown
        outline_stroke: Outline stroke colour, None while hidden
        outline_fill: Outline fill colour
        dash_array: Outline dash pattern
        vertex_handles: One handle per frame vertex that has one
        midpoint_markers: Markers on the top and bottom curves
    """

    visible: bool
    outline_stroke: str | None
    outline_fill: str
    dash_array: tuple[float, ...]
    vertex_handles: tuple[VertexHandle, ...]
    midpoint_markers: tuple[MidpointMarker, ...]


class StretchyPath:
    """Source artwork projected into an editable outline frame.

    Signals (blinker, sent with the stretchy path as sender):
        rearranged: ``artwork=`` the new display artwork, after each successful pass
        diagnostics: ``error=`` the ArrangementError of each failed pass

    Example:
        stretchy = StretchyPath(artwork)
        stretchy.rearranged.connect(lambda sender, artwork: redraw(artwork), weak=False)
        stretchy.on_corner_moved(2, Point(120.0, 80.0))
        warped = stretchy.current_display_artwork()
    """

    def __init__(
        self,
        source: CompoundPath,
        settings: WarpSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Build the frame around the source artwork and arrange it.

        Args:
            source: Artwork to warp; copied, never modified
            settings: Geometry and display settings (defaults if None)
            logger: Structured logger (module logger if None)

        Raises:
            InvalidFrameError: If the source bounds cannot give four distinct corners
        """
        self.settings = settings or WarpSettings()
        self._geometry = self.settings.geometry
        self._log = ArrangementLogger(logger or structlog.get_logger("glyphwarp"))

        self._source = source.clone()
        bounds = artwork_bounds(self._source)
        if bounds is None:
            raise InvalidFrameError("source artwork has no outline")
        tolerance = self._geometry.corner_tolerance
        if bounds.width <= tolerance or bounds.height <= tolerance:
            raise InvalidFrameError(
                f"source bounds {bounds.width:g} x {bounds.height:g} "
                "cannot give four distinct corners"
            )
        self._source_bounds: Rect = bounds

        self._frame = OutlineFrame.from_rect(bounds)
        self._handled: list[Segment] = list(self._frame.path.segments)
        self._markers: list[MidpointMarker] = []
        self._decomposer = OutlineDecomposer(self._geometry.corner_tolerance)

        self._display = self._source.clone()
        self._state = ArrangeState.IDLE
        self._visible = True
        self.generation = 0
        self.last_error: ArrangementError | None = None

        self.rearranged = Signal()
        self.diagnostics = Signal()

        self.arrange_contents()
        self.set_edit_affordance_visibility(False)

    # Queries

    @property
    def state(self) -> ArrangeState:
        """Current arrangement state."""
        return self._state

    @property
    def display_artwork(self) -> CompoundPath:
        """The warped artwork from the last successful arrangement."""
        return self._display

    def current_display_artwork(self) -> CompoundPath:
        """Return the warped artwork from the last successful arrangement."""
        return self._display

    @property
    def source_artwork(self) -> CompoundPath:
        """Copy of the unwarped source artwork."""
        return self._source.clone()

    @property
    def source_bounds(self) -> Rect:
        """Bounds of the source artwork, fixed at construction."""
        return self._source_bounds

    @property
    def frame(self) -> OutlineFrame:
        """The outline frame. Edit it through the ``on_*`` methods."""
        return self._frame

    @property
    def corners(self) -> list[Point]:
        """Positions of the four frame corners."""
        return self._frame.corner_points()

    @property
    def stats(self) -> ArrangementStats:
        """Arrangement statistics for this stretchy path."""
        return self._log.stats

    @property
    def affordances(self) -> EditAffordances:
        """Current editing handles and outline styling."""
        display = self.settings.display
        handles = []
        for segment in self._handled:
            index = self._frame.path.index_of(segment)
            if index is not None:
                handles.append(VertexHandle(index, segment.point, self._frame.is_corner(segment)))
        return EditAffordances(
            visible=self._visible,
            outline_stroke=display.outline_color if self._visible else None,
            outline_fill=display.canvas_color,
            dash_array=tuple(display.dash_array),
            vertex_handles=tuple(sorted(handles, key=lambda h: h.index)),
            midpoint_markers=tuple(self._markers),
        )

    # Input from the interactive layer

    def set_edit_affordance_visibility(self, value: bool) -> None:
        """Show or hide the editing handles and outline stroke.

        Args:
            value: True to show the handles
        """
        self._visible = value

    def on_hover_changed(self, is_hovering: bool) -> None:
        """Pointer entered or left the artwork.

        Args:
            is_hovering: True when the pointer is over the artwork
        """
        self.set_edit_affordance_visibility(is_hovering)

    def on_corner_moved(self, index: int, point: Point) -> bool:
        """Move a corner and re-arrange.

        Args:
            index: Corner index 0-3 (top-left, top-right, bottom-right, bottom-left)
            point: New corner position

        Returns:
            True if the arrangement pass succeeded

        Raises:
            InvalidFrameError: If the move would collapse corners or land
                on another frame vertex; frame unchanged
            ArrangementInProgressError: If called during an arrangement pass
        """
        self._check_idle()
        if not 0 <= index < CORNER_COUNT:
            self._refuse("corner", f"corner index {index} out of range")
        self._check_point("corner", point)
        self._check_clear_of_corners("corner", point, skip=self._frame.corners[index])
        self._check_clear_of_vertices("corner", point)

        self._frame.corners[index].point = point
        self._log.log_edit("corner", index=index, x=point.x, y=point.y)
        return self.arrange_contents()

    def on_vertex_moved(self, vertex_index: int, point: Point) -> bool:
        """Move any frame vertex, corner or inserted control point, and re-arrange.

        Args:
            vertex_index: Index of the vertex in the frame path
            point: New vertex position

        Returns:
            True if the arrangement pass succeeded

        Raises:
            InvalidFrameError: If the move is refused; frame unchanged
            ArrangementInProgressError: If called during an arrangement pass
        """
        self._check_idle()
        segments = self._frame.path.segments
        if not 0 <= vertex_index < len(segments):
            self._refuse("vertex", f"vertex index {vertex_index} out of range")

        segment = segments[vertex_index]
        corner_index = self._frame.corner_index(segment)
        if corner_index is not None:
            return self.on_corner_moved(corner_index, point)

        self._check_point("vertex", point)
        self._check_clear_of_corners("vertex", point)

        segment.point = point
        self._log.log_edit("vertex", index=vertex_index, x=point.x, y=point.y)
        return self.arrange_contents()

    def on_midpoint_inserted(self, side_index: int, split_point: Point) -> int:
        """Insert a frame vertex on the top or bottom side and re-arrange.

        The side curve closest to ``split_point`` is split without changing
        its shape, then the new vertex is moved to ``split_point``. The
        vertex stays even if the following pass fails; check ``last_error``
        or listen on ``diagnostics`` to tell the two apart.

        Args:
            side_index: SideIndex.TOP or SideIndex.BOTTOM
            split_point: Where the new vertex ends up

        Returns:
            Index of the new vertex in the frame path

        Raises:
            InvalidFrameError: If the insertion is refused; frame unchanged
            ArrangementInProgressError: If called during an arrangement pass
        """
        self._check_idle()
        if side_index not in SPLITTABLE_SIDES:
            self._refuse("midpoint", f"side {side_index} has no midpoint markers")
        self._check_point("midpoint", split_point)
        self._check_clear_of_corners("midpoint", split_point)

        candidates = [m for m in self._markers if m.side == side_index]
        if not candidates:
            self._refuse("midpoint", f"side {side_index} has no midpoint markers")

        curves = self._frame.path.curves
        best: tuple[float, MidpointMarker, float] | None = None
        for marker in candidates:
            curve = curves[marker.curve_index]
            piece = Path(segments=[curve.segment1, curve.segment2])
            _, t, distance = nearest_location(piece, split_point)
            if best is None or distance < best[0]:
                best = (distance, marker, t)

        _, marker, t = best  # type: ignore[misc]
        if not 0.0 < t < 1.0:
            # Split point projects onto an end of the curve; split at its middle
            curve = curves[marker.curve_index]
            measured = self._measure(curve.segment1, curve.segment2)
            _, t = measured.location_at(measured.length / 2)
            if not 0.0 < t < 1.0:
                t = 0.5

        segment = split_curve(self._frame.path, marker.curve_index, t)
        segment.point = split_point
        self._handled.append(segment)
        self._markers.remove(marker)

        index = self._frame.path.index_of(segment)
        self._log.log_edit("midpoint", side=int(side_index), index=index)
        self.arrange_contents()
        return index  # type: ignore[return-value]

    def move_by(self, delta: Point) -> bool:
        """Translate the whole frame and re-arrange.

        Args:
            delta: Offset to move by

        Returns:
            True if the arrangement pass succeeded

        Raises:
            InvalidFrameError: If the offset is not finite
            ArrangementInProgressError: If called during an arrangement pass
        """
        self._check_idle()
        self._check_point("move", delta)

        for segment in self._frame.path.segments:
            segment.point = segment.point + delta
        self._log.log_edit("move", dx=delta.x, dy=delta.y)
        return self.arrange_contents()

    # Arrangement

    def arrange_contents(self) -> bool:
        """Rebuild midpoint markers and the display artwork from the frame.

        On failure the previous display artwork is kept, ``last_error`` is
        set and the error is emitted on ``diagnostics``.

        Returns:
            True if new display artwork was produced

        Raises:
            ArrangementInProgressError: If a pass is already running
        """
        self._check_idle()
        self._state = ArrangeState.ARRANGING
        start_time = time.perf_counter()
        try:
            self._update_midpoint_markers()
            try:
                display = self._arrange_path()
            except ArrangementError as e:
                self.last_error = e
                self._log.log_arrangement_failed(e)
                self.diagnostics.send(self, error=e)
                return False

            self._display = display
            self.generation += 1
            self.last_error = None
            self._log.log_arrangement_complete(
                generation=self.generation,
                segment_count=display.segment_count,
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )
            self.rearranged.send(self, artwork=display)
            return True
        finally:
            self._state = ArrangeState.IDLE

    def _arrange_path(self) -> CompoundPath:
        """Project the source artwork into the current frame."""
        sides = self._decomposer.decompose(self._frame)
        top = sides[SideIndex.TOP]
        bottom = sides[SideIndex.BOTTOM].reversed()

        projection = SandwichProjection(
            top,
            bottom,
            degenerate_length=self._geometry.degenerate_length,
            tolerance=self._geometry.arc_length_tolerance,
            samples=self._geometry.arc_length_samples,
        )
        normalize = unit_normalizer(self._source_bounds)
        size = max(self._source_bounds.width, self._source_bounds.height)
        transform = PathTransform(
            lambda point: projection(*normalize(point)),
            step=self._geometry.get_jacobian_step(size),
            domain=self._source_bounds,
        )
        return transform.transform_compound(self._source)

    def _update_midpoint_markers(self) -> None:
        """Place a marker at the middle of every top and bottom curve."""
        self._markers = []
        segments = self._frame.path.segments
        start = self._frame.path.index_of(self._frame.corners[0])
        if start is None:
            return

        curves = self._frame.path.curves
        side: int | None = None
        for offset in range(len(segments)):
            i = (start + offset) % len(segments)
            corner_index = self._frame.corner_index(segments[i])
            if corner_index is not None:
                side = corner_index
            if side not in SPLITTABLE_SIDES:
                continue

            measured = self._measure(curves[i].segment1, curves[i].segment2)
            self._markers.append(
                MidpointMarker(SideIndex(side), i, measured.point_at(measured.length / 2))
            )

    def _measure(self, start: Segment, end: Segment) -> ArcLengthCurve:
        """Arc-length view of the single curve between two segments."""
        return ArcLengthCurve(
            Path(segments=[start, end]),
            tolerance=self._geometry.arc_length_tolerance,
            samples=self._geometry.arc_length_samples,
        )

    # Validation

    def _check_idle(self) -> None:
        if self._state is ArrangeState.ARRANGING:
            raise ArrangementInProgressError()

    def _refuse(self, kind: str, reason: str) -> None:
        error = InvalidFrameError(reason)
        self._log.log_edit_refused(kind, error)
        raise error

    def _check_point(self, kind: str, point: Point) -> None:
        if not point.is_finite():
            self._refuse(kind, f"non-finite coordinates ({point.x}, {point.y})")

    def _check_clear_of_corners(self, kind: str, point: Point, skip: Segment | None = None) -> None:
        tolerance = self._geometry.corner_tolerance
        for i, corner in enumerate(self._frame.corners):
            if corner is skip:
                continue
            if corner.point.is_close(point, tolerance):
                self._refuse(kind, f"point ({point.x:g}, {point.y:g}) coincides with corner {i}")

    def _check_clear_of_vertices(self, kind: str, point: Point) -> None:
        tolerance = self._geometry.corner_tolerance
        for i, segment in enumerate(self._frame.path.segments):
            if self._frame.corner_index(segment) is not None:
                continue
            if segment.point.is_close(point, tolerance):
                self._refuse(kind, f"point ({point.x:g}, {point.y:g}) coincides with vertex {i}")
