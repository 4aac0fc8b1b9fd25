"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files and drawing
glyphs and text runs as domain artwork.
"""

from pathlib import Path

from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont, TTLibError

from glyphwarp.domain import CompoundPath
from glyphwarp.exceptions import FontFormatError, FontLoadError, GlyphNotFoundError
from glyphwarp.io.converter import ArtworkPen


class FontReader:
    """Loads TTF/OTF fonts and draws glyphs as artwork.

    Artwork is in canvas coordinates: y grows downward and the baseline
    sits at y = 0, so glyph bodies have negative y values.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            artwork = reader.text_artwork("Hello")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the font file does not exist or cannot be read
            FontFormatError: If the font has no outlines or character map
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            font = TTFont(str(self._font_path))
        except (OSError, TTLibError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        if not any(tag in font for tag in ("glyf", "CFF ", "CFF2")):
            font.close()
            raise FontFormatError(str(self._font_path), "no glyph outlines")
        if font.getBestCmap() is None:
            font.close()
            raise FontFormatError(str(self._font_path), "no Unicode character map")

        self._font = font

    @property
    def font(self) -> TTFont:
        """The loaded fontTools font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts
        """
        if "CFF " in self.font or "CFF2" in self.font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self.font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self.font["maxp"].numGlyphs  # type: ignore[attr-defined]

    @property
    def ascender(self) -> int:
        """Return the font's ascender in font units."""
        return self.font["hhea"].ascent  # type: ignore[attr-defined]

    def glyph_name_for(self, char: str) -> str:
        """Look up the glyph drawn for a character.

        Args:
            char: A single character

        Returns:
            Glyph name from the font's character map

        Raises:
            GlyphNotFoundError: If the character is not mapped
        """
        name = self.font.getBestCmap().get(ord(char))
        if name is None:
            raise GlyphNotFoundError(repr(char))
        return name

    def advance_width(self, name: str) -> int:
        """Return the horizontal advance of a glyph in font units."""
        if name not in self.font.getGlyphOrder():
            raise GlyphNotFoundError(name)
        width, _ = self.font["hmtx"][name]
        return width

    def glyph_artwork(self, name: str, x_offset: float = 0.0, scale: float = 1.0) -> CompoundPath:
        """Draw a glyph as artwork.

        Args:
            name: Glyph name
            x_offset: Horizontal position of the glyph origin, in artwork units
            scale: Factor from font units to artwork units

        Returns:
            Glyph outline in canvas coordinates

        Raises:
            GlyphNotFoundError: If the font has no glyph with that name
        """
        if name not in self.font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        glyph_set = self.font.getGlyphSet()
        pen = ArtworkPen(glyph_set)
        glyph_set[name].draw(TransformPen(pen, (scale, 0, 0, -scale, x_offset, 0)))
        return pen.artwork

    def text_artwork(
        self,
        text: str,
        letter_spacing: float = 0.0,
        scale: float = 1.0,
    ) -> CompoundPath:
        """Lay out a line of text as a single artwork.

        Glyphs are placed left to right by advance width. There is no
        kerning or shaping. Whitespace advances without drawing.

        Args:
            text: Text to draw
            letter_spacing: Extra advance after each character, in font units
            scale: Factor from font units to artwork units

        Returns:
            All glyph outlines of the line in canvas coordinates

        Raises:
            GlyphNotFoundError: If a non-whitespace character is not mapped
        """
        children = []
        x = 0.0
        for char in text:
            if char.isspace():
                name = self.font.getBestCmap().get(ord(char))
                advance = self.advance_width(name) if name else self.units_per_em / 4
            else:
                name = self.glyph_name_for(char)
                children.extend(self.glyph_artwork(name, x_offset=x, scale=scale).children)
                advance = self.advance_width(name)
            x += (advance + letter_spacing) * scale
        return CompoundPath(children=children)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
