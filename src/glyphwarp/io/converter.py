"""Converters between fonttools pens and domain models.

This module handles the conversion between fonttools drawing commands and
our domain models (CompoundPath, Path, Segment), in both directions.
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from fontTools.pens.svgPathPen import SVGPathPen

from glyphwarp.core.geometry import draw_artwork
from glyphwarp.domain import CompoundPath, Path, Point, Segment


class ArtworkPen(BasePen):
    """A fontTools pen that records drawing commands as a CompoundPath.

    Quadratic curves are degree-elevated to cubics by BasePen, so TrueType
    and CFF outlines both end up as segments with cubic handles.

    Example:
        pen = ArtworkPen()
        glyph_set["A"].draw(pen)
        artwork = pen.artwork
    """

    def __init__(self, glyphSet: Any = None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self._children: list[Path] = []
        self._segments: list[Segment] = []

    @property
    def artwork(self) -> CompoundPath:
        """Contours recorded so far."""
        return CompoundPath(children=list(self._children))

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._segments = [Segment(Point(*pt))]

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self._segments.append(Segment(Point(*pt)))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        last = self._segments[-1]
        end = Point(*pt3)
        last.handle_out = Point(*pt1) - last.point
        self._segments.append(Segment(end, handle_in=Point(*pt2) - end))

    def _closePath(self) -> None:
        segments = self._segments
        # A contour drawn back onto its start point repeats the first vertex
        if len(segments) > 1 and segments[-1].point == segments[0].point:
            closing = segments.pop()
            segments[0].handle_in = closing.handle_in
        self._children.append(Path(segments=segments, closed=True))
        self._segments = []

    def _endPath(self) -> None:
        self._children.append(Path(segments=self._segments, closed=False))
        self._segments = []


def artwork_to_svg_path(artwork: CompoundPath) -> str:
    """Convert an artwork to SVG path data.

    Args:
        artwork: Artwork to convert

    Returns:
        SVG ``d`` attribute value
    """
    pen = SVGPathPen(None)
    draw_artwork(artwork, pen)
    return pen.getCommands()
