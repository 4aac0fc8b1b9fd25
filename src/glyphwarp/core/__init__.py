"""Core warp engine for glyphwarp.

This module contains the algorithms that warp artwork into an editable frame:

- Arc-length parameterization of multi-curve paths
- Decomposition of the outline frame into four sides
- Sandwich projection between the top and bottom sides
- Point and handle mapping of whole artworks
- The stretchy path orchestrator tying them together

Engine classes never touch files. The batch pipeline that loads fonts and
writes SVG lives in ``glyphwarp.core.processor`` and is imported from there.

Key functions:
- lerp: Linear interpolation between two points
- artwork_bounds: Tight bounds of an artwork through a fonttools BoundsPen
- nearest_location: Closest curve location on a path
- split_curve: Shape-preserving de Casteljau split of a path curve
- sandwich_projection: Build a projection between two sides
- unit_normalizer: Map source points to the unit square

Key classes:
- ArcLengthCurve: Distance-parameterized view of a path
- OutlineDecomposer: Splits a frame into top, right, bottom and left sides
- SandwichProjection: (u, v) to point projection between two sides
- PathTransform: Maps anchors and handles through a point function
- StretchyPath: Source artwork projected into an editable frame
"""

from glyphwarp.core.arc_length import ArcLengthCurve
from glyphwarp.core.decomposer import OutlineDecomposer, SideIndex
from glyphwarp.core.geometry import (
    artwork_bounds,
    draw_artwork,
    draw_path,
    lerp,
    nearest_location,
    nearest_point_on_segment,
    split_curve,
)
from glyphwarp.core.projection import (
    ProjectionFunction,
    SandwichProjection,
    sandwich_projection,
    unit_normalizer,
)
from glyphwarp.core.stretchy import (
    ArrangeState,
    EditAffordances,
    MidpointMarker,
    StretchyPath,
    VertexHandle,
)
from glyphwarp.core.transform import PathTransform

__all__ = [
    # Arc length
    "ArcLengthCurve",
    # Stretchy path
    "ArrangeState",
    "EditAffordances",
    "MidpointMarker",
    # Decomposition
    "OutlineDecomposer",
    # Transform
    "PathTransform",
    # Projection
    "ProjectionFunction",
    "SandwichProjection",
    "SideIndex",
    "StretchyPath",
    "VertexHandle",
    # Geometry functions
    "artwork_bounds",
    "draw_artwork",
    "draw_path",
    "lerp",
    "nearest_location",
    "nearest_point_on_segment",
    "sandwich_projection",
    "split_curve",
    "unit_normalizer",
]
