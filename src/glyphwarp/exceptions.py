"""Exception hierarchy for Glyphwarp."""


class GlyphWarpError(Exception):
    """Base exception for all Glyphwarp errors."""

    pass


class FontError(GlyphWarpError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class GlyphNotFoundError(FontError):
    """Requested glyph or character not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class GeometryError(GlyphWarpError):
    """Errors in geometric calculations."""

    pass


class ArrangementError(GeometryError):
    """An arrangement pass could not produce new display artwork.

    Arrangement errors are recoverable: the pass is abandoned and the
    previous display artwork stays in place.
    """

    pass


class DecompositionError(ArrangementError):
    """Outline frame could not be split into four boundary sides."""

    def __init__(
        self,
        reason: str,
        sides_found: int = 0,
        unmatched_corners: tuple[int, ...] = (),
    ) -> None:
        self.reason = reason
        self.sides_found = sides_found
        self.unmatched_corners = unmatched_corners
        super().__init__(f"Outline decomposition failed: {reason}")


class DegenerateProjectionError(ArrangementError):
    """A projection side has no usable arc length."""

    def __init__(self, side: str, length: float) -> None:
        self.side = side
        self.length = length
        super().__init__(f"Cannot project onto {side} side of length {length:g}")


class InvalidFrameError(GeometryError):
    """Frame edit refused because it would leave fewer than four usable corners."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid frame edit: {reason}")


class ArrangementInProgressError(GlyphWarpError):
    """An edit or arrangement was requested while a pass is running."""

    def __init__(self) -> None:
        super().__init__("An arrangement pass is already in progress")


class ExportError(GlyphWarpError):
    """Error writing warped artwork."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export '{path}': {reason}")


class EditScriptError(GlyphWarpError):
    """Invalid edit script or command line edit."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid edit: {reason}")
