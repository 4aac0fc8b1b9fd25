"""End-to-end tests: warp text from a real font file and check the SVG output."""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from fontTools.pens.boundsPen import BoundsPen
from fontTools.svgLib.path import parse_path
from typer.testing import CliRunner

from glyphwarp import __version__
from glyphwarp.cli.app import app
from glyphwarp.config import LoggingConfig, WarpSettings
from glyphwarp.core.processor import WarpProcessor
from glyphwarp.core.stretchy import StretchyPath
from glyphwarp.domain import Point
from glyphwarp.io import FontReader

SVG = "{http://www.w3.org/2000/svg}"

runner = CliRunner()


def _svg_paths(path: Path) -> list[ET.Element]:
    return ET.parse(path).getroot().findall(f"{SVG}path")


def _path_bounds(d: str) -> tuple[float, float, float, float]:
    pen = BoundsPen(None)
    parse_path(d, pen)
    return pen.bounds


class TestWarpPipeline:
    """Warp real glyph outlines through the whole pipeline."""

    def test_arch_raises_top_of_text(self, font_path, tmp_path):
        """Test that an inserted top vertex lifts the middle of the text."""
        settings = WarpSettings(logging=LoggingConfig(log_file=tmp_path / "warp.log"))
        with FontReader(font_path) as reader:
            artwork = reader.text_artwork("OIO")

        stretchy = StretchyPath(artwork, settings=settings)
        bounds = stretchy.source_bounds
        middle_x = bounds.x + bounds.width / 2
        stretchy.on_midpoint_inserted(0, Point(middle_x, bounds.y - 300))

        assert stretchy.last_error is None
        warped = stretchy.current_display_artwork()
        assert len(warped.children) == len(artwork.children)

        ys = [s.point.y for child in warped.children for s in child.segments]
        assert min(ys) < bounds.y - 100
        assert max(ys) == pytest.approx(bounds.bottom)

    def test_unedited_output_keeps_source_bounds(self, font_path, tmp_path):
        """Test that without edits the exported text keeps its font-unit bounds."""
        settings = WarpSettings(logging=LoggingConfig(log_file=tmp_path / "warp.log"))
        output = tmp_path / "out.svg"
        stats = WarpProcessor(settings, quiet=True).process(
            font_path,
            "IO",
            edits=[],
            output_path=output,
        )
        assert stats.edits_refused == 0
        (artwork,) = _svg_paths(output)
        x_min, y_min, x_max, y_max = _path_bounds(artwork.get("d"))
        assert x_min == pytest.approx(100)
        assert x_max == pytest.approx(800)
        assert y_min == pytest.approx(-700)
        assert y_max == pytest.approx(0, abs=1e-6)


class TestCli:
    """Tests for the glyphwarp command."""

    def test_version(self):
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_warp_with_corner_and_insert(self, font_path, tmp_path):
        """Test a command line warp with both kinds of edit."""
        output = tmp_path / "warped.svg"
        result = runner.invoke(
            app,
            [
                str(font_path),
                "IO",
                "-o",
                str(output),
                "--insert",
                "0:450,-1000",
                "--corner",
                "2:1200,0",
                "--log-file",
                str(tmp_path / "warp.log"),
                "--show-frame",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "2 edits applied" in result.output

        frame, artwork = _svg_paths(output)
        _, y_min, x_max, _ = _path_bounds(frame.get("d"))
        assert x_max == pytest.approx(1200)
        assert y_min < -700
        assert _path_bounds(artwork.get("d"))[2] > 800

    def test_warp_with_edit_script(self, font_path, tmp_path):
        """Test replaying a JSON edit script."""
        script = tmp_path / "edits.json"
        script.write_text(
            json.dumps({"edits": [{"op": "move_corner", "index": 3, "point": [0, 200]}]})
        )
        output = tmp_path / "warped.svg"
        result = runner.invoke(
            app,
            [
                str(font_path),
                "I",
                "-o",
                str(output),
                "-e",
                str(script),
                "-q",
                "--log-file",
                str(tmp_path / "warp.log"),
            ],
        )
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_missing_font(self, tmp_path):
        """Test that a missing input file exits with an error."""
        result = runner.invoke(app, [str(tmp_path / "missing.ttf"), "I"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_blank_text(self, font_path):
        """Test that text with nothing to draw is refused."""
        result = runner.invoke(app, [str(font_path), "   "])
        assert result.exit_code == 1
        assert "Nothing to warp" in result.output

    def test_verbose_and_quiet(self, font_path):
        """Test that --verbose and --quiet cannot be combined."""
        result = runner.invoke(app, [str(font_path), "I", "-v", "-q"])
        assert result.exit_code == 1

    def test_bad_corner_arg(self, font_path, tmp_path):
        """Test that a malformed corner argument exits with an error."""
        result = runner.invoke(
            app,
            [str(font_path), "I", "-c", "7:1,1", "--log-file", str(tmp_path / "warp.log")],
        )
        assert result.exit_code == 1
        assert "Invalid edit" in result.output

    def test_missing_character(self, font_path, tmp_path):
        """Test that an unmapped character exits with an error."""
        result = runner.invoke(
            app,
            [str(font_path), "IZ", "-q", "--log-file", str(tmp_path / "warp.log")],
        )
        assert result.exit_code == 1
        assert "not found in font" in result.output
