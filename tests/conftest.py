"""Shared fixtures: sample artworks and a small TrueType font built on the fly."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphwarp.domain import CompoundPath, Path as ContourPath, Point, Segment

UPM = 1000

# Glyph name -> (advance width, left side bearing)
TEST_METRICS = {
    ".notdef": (500, 50),
    "space": (250, 0),
    "I": (300, 100),
    "O": (600, 100),
}


def _draw_notdef(pen: TTGlyphPen) -> None:
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()


def _draw_i(pen: TTGlyphPen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((200, 700))
    pen.lineTo((200, 0))
    pen.closePath()


def _draw_o(pen: TTGlyphPen) -> None:
    # Quadratic outer contour touching x 100..500, y 0..700
    pen.moveTo((300, 0))
    pen.qCurveTo((100, 0), (100, 350))
    pen.qCurveTo((100, 700), (300, 700))
    pen.qCurveTo((500, 700), (500, 350))
    pen.qCurveTo((500, 0), (300, 0))
    pen.closePath()
    # Counter
    pen.moveTo((200, 100))
    pen.lineTo((400, 100))
    pen.lineTo((400, 600))
    pen.lineTo((200, 600))
    pen.closePath()


def build_test_font(path: Path) -> Path:
    """Write a TrueType font mapping space, I and O."""
    builder = FontBuilder(UPM, isTTF=True)
    builder.setupGlyphOrder(list(TEST_METRICS))
    builder.setupCharacterMap({ord(" "): "space", ord("I"): "I", ord("O"): "O"})

    glyphs = {}
    for name, draw in ((".notdef", _draw_notdef), ("space", None), ("I", _draw_i), ("O", _draw_o)):
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    builder.setupGlyf(glyphs)
    builder.setupHorizontalMetrics(TEST_METRICS)
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Glyphwarp Test", "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    builder.save(str(path))
    return path


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    """A small TrueType font on disk."""
    return build_test_font(tmp_path / "Test-Regular.ttf")


@pytest.fixture
def square_artwork() -> CompoundPath:
    """A single 10 x 10 square contour at the origin."""
    points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    return CompoundPath(children=[ContourPath.from_points(points, closed=True)])


@pytest.fixture
def curved_artwork() -> CompoundPath:
    """A 100 x 50 rounded contour with smooth cubic vertices plus an open stroke."""
    blob = ContourPath(
        segments=[
            Segment(Point(50, 0), Point(-25, 0), Point(25, 0)),
            Segment(Point(100, 25), Point(0, -12.5), Point(0, 12.5)),
            Segment(Point(50, 50), Point(25, 0), Point(-25, 0)),
            Segment(Point(0, 25), Point(0, 12.5), Point(0, -12.5)),
        ],
        closed=True,
    )
    stroke = ContourPath.from_points([Point(20, 20), Point(80, 30)])
    return CompoundPath(children=[blob, stroke])
