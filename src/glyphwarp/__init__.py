"""Glyphwarp - Stretch word-art outlines into user-edited frames.

Glyphwarp wraps the outline of a text run in an editable four-cornered frame
and re-projects the whole outline onto the frame every time a corner is
dragged or a control point is inserted along its top or bottom edge.

Example:
    $ glyphwarp Roboto-Regular.ttf "Hello" --corner 2:1400,900

This will write Roboto-Regular-warped.svg with the text stretched toward the moved
bottom-right corner.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
