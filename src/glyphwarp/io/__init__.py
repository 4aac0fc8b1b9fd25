"""Input and output for glyphwarp.

This module turns fonts into artwork and artwork into SVG using fonttools,
and reads scripted frame edits.

Key responsibilities:
- Load TTF/OTF fonts and lay out text as artwork
- Convert fonttools pen commands to domain models
- Export warped artwork as SVG
- Validate edit scripts

Key classes:
- FontReader: Load fonts and draw glyphs
- ArtworkPen: fonttools pen producing a CompoundPath
- SvgExporter: Write display artwork as SVG
- EditScript: Ordered frame edits
"""

from glyphwarp.io.converter import ArtworkPen, artwork_to_svg_path
from glyphwarp.io.edits import (
    EditScript,
    InsertMidpoint,
    MoveBy,
    MoveCorner,
    MoveVertex,
    apply_edit,
    load_edit_script,
    parse_point_arg,
)
from glyphwarp.io.reader import FontReader
from glyphwarp.io.svg import SvgExporter

__all__ = [
    "ArtworkPen",
    "EditScript",
    "FontReader",
    "InsertMidpoint",
    "MoveBy",
    "MoveCorner",
    "MoveVertex",
    "SvgExporter",
    "apply_edit",
    "artwork_to_svg_path",
    "load_edit_script",
    "parse_point_arg",
]
