"""Domain models for glyphwarp.

This module contains the geometric models the warp engine works on: points,
segments with cubic handles, contours, compound artworks and the editable
outline frame. All models are:

- Independent of fonttools implementation details
- Serializable to plain dictionaries
- Owned exclusively by the artwork or frame that holds them

Key classes:
- Point: A 2D point or vector
- Segment: A path vertex with relative handles
- Curve: The cubic between two segments
- Path: A single open or closed contour
- CompoundPath: A multi-contour artwork
- Rect: An axis-aligned rectangle
- OutlineFrame: A closed frame with four corner segments
"""

from glyphwarp.domain.frame import CORNER_COUNT, OutlineFrame
from glyphwarp.domain.path import CompoundPath, Curve, Path, Point, Rect, Segment

__all__: list[str] = [
    # Constants
    "CORNER_COUNT",
    # Core types
    "Point",
    "Segment",
    "Curve",
    "Path",
    "CompoundPath",
    "Rect",
    "OutlineFrame",
]
