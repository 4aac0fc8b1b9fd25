"""Batch warp pipeline.

This module runs the full workflow for one line of text: load the font, lay
out the text as artwork, build a stretchy path around it, replay frame edits
and export the warped artwork as SVG.
"""

import time
from collections.abc import Callable, Sequence
from pathlib import Path

from glyphwarp.config import WarpSettings
from glyphwarp.core.stretchy import StretchyPath
from glyphwarp.domain import CompoundPath
from glyphwarp.exceptions import InvalidFrameError
from glyphwarp.io import FontReader, SvgExporter, apply_edit
from glyphwarp.io.edits import Edit
from glyphwarp.utils import WarpStats, configure_logging


class WarpProcessor:
    """Orchestrates a batch warp of a line of text.

    Manages the complete workflow:
    1. Load font file
    2. Lay out the text as a single artwork
    3. Build the stretchy path and apply edits in order
    4. Export the display artwork as SVG

    Refused edits and failed arrangement passes are counted, not fatal: the
    output always holds the last successfully arranged artwork.

    Example:
        processor = WarpProcessor(WarpSettings())
        stats = processor.process(
            font_path=Path("font.ttf"),
            text="Hello",
            edits=[MoveCorner(index=2, point=(900.0, 100.0))],
        )
    """

    def __init__(self, config: WarpSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Warp settings
            quiet: Suppress console logging
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )

    @staticmethod
    def get_output_path(font_path: Path) -> Path:
        """Default output path next to the font: ``{stem}-warped.svg``."""
        return font_path.with_name(f"{font_path.stem}-warped.svg")

    def build_artwork(self, font_path: Path, text: str) -> CompoundPath:
        """Load a font and lay out text as artwork.

        Args:
            font_path: Path to input font file (TTF or OTF)
            text: Text to draw

        Returns:
            Text outline in canvas coordinates

        Raises:
            FontLoadError: If the font cannot be loaded
            GlyphNotFoundError: If a character is missing from the font
        """
        with FontReader(font_path) as reader:
            self.logger.info(
                "Font loaded",
                format=reader.format,
                upm=reader.units_per_em,
                glyph_count=reader.glyph_count,
            )
            return reader.text_artwork(
                text,
                letter_spacing=self.config.text.letter_spacing,
                scale=self.config.text.get_scale(reader.units_per_em),
            )

    def process(
        self,
        font_path: Path,
        text: str,
        edits: Sequence[Edit] = (),
        output_path: Path | None = None,
        show_frame: bool = False,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> WarpStats:
        """Warp a line of text and write it as SVG.

        Args:
            font_path: Path to input font file (TTF or OTF)
            text: Text to draw
            edits: Frame edits applied in order
            output_path: Path for the SVG (auto-generated if None)
            show_frame: Draw the outline frame in the SVG
            progress_callback: Optional callback(completed, total, op, success)
                called after each edit

        Returns:
            WarpStats with counts and timing

        Raises:
            FontLoadError: If the font cannot be loaded
            GlyphNotFoundError: If a character is missing from the font
            InvalidFrameError: If the text produces no usable outline
            ExportError: If the SVG cannot be written
        """
        stats = WarpStats()
        stats.start_time = time.time()

        if output_path is None:
            output_path = self.get_output_path(font_path)

        self.logger.info(
            "Starting warp",
            input=str(font_path),
            output=str(output_path),
            text=text,
            edits=len(edits),
        )

        artwork = self.build_artwork(font_path, text)
        stats.contour_count = len(artwork.children)
        stats.segment_count = artwork.segment_count

        stretchy = StretchyPath(artwork, settings=self.config, logger=self.logger)

        total = len(edits)
        for completed, edit in enumerate(edits, start=1):
            success = False
            try:
                success = apply_edit(stretchy, edit)
            except InvalidFrameError as e:
                stats.edits_refused += 1
                stats.errors.append((edit.op, e.reason))
            else:
                stats.edits_applied += 1
                if not success:
                    stats.arrangement_failures += 1
                    if stretchy.last_error is not None:
                        stats.errors.append((edit.op, str(stretchy.last_error)))

            if progress_callback is not None:
                progress_callback(completed, total, edit.op, success)

        SvgExporter(self.config.display).save(stretchy, output_path, show_frame=show_frame)

        stats.end_time = time.time()
        self.logger.info(
            "Warp complete",
            output=str(output_path),
            applied=stats.edits_applied,
            refused=stats.edits_refused,
            failures=stats.arrangement_failures,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats
