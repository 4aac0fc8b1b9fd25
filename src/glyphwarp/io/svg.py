"""SVG export of warped artwork."""

import xml.etree.ElementTree as ET
from pathlib import Path

from glyphwarp.config import DisplayConfig
from glyphwarp.core.geometry import artwork_bounds
from glyphwarp.core.stretchy import StretchyPath
from glyphwarp.domain import CompoundPath, Rect
from glyphwarp.exceptions import ExportError
from glyphwarp.io.converter import artwork_to_svg_path

SVG_NS = "http://www.w3.org/2000/svg"


def _union(a: Rect | None, b: Rect | None) -> Rect | None:
    if a is None:
        return b
    if b is None:
        return a
    return Rect.from_bounds(
        (min(a.x, b.x), min(a.y, b.y), max(a.right, b.right), max(a.bottom, b.bottom))
    )


class SvgExporter:
    """Renders a stretchy path's display artwork as an SVG document.

    Example:
        exporter = SvgExporter(settings.display)
        exporter.save(stretchy, Path("warped.svg"), show_frame=True)
    """

    def __init__(self, display: DisplayConfig | None = None) -> None:
        self.display = display or DisplayConfig()

    def render(self, stretchy: StretchyPath, show_frame: bool = False) -> str:
        """Render the current display artwork.

        Args:
            stretchy: Stretchy path to render
            show_frame: Draw the outline frame behind the artwork

        Returns:
            SVG document text
        """
        artwork = stretchy.current_display_artwork()
        frame = CompoundPath(children=[stretchy.frame.path])

        bounds = artwork_bounds(artwork)
        if show_frame:
            bounds = _union(bounds, artwork_bounds(frame))
        if bounds is None:
            bounds = Rect(0.0, 0.0, 0.0, 0.0)

        margin = self.display.margin
        width = bounds.width + 2 * margin
        height = bounds.height + 2 * margin

        ET.register_namespace("", SVG_NS)
        root = ET.Element(
            f"{{{SVG_NS}}}svg",
            {
                "viewBox": f"{bounds.x - margin:g} {bounds.y - margin:g} {width:g} {height:g}",
                "width": f"{width:g}",
                "height": f"{height:g}",
            },
        )

        if show_frame:
            ET.SubElement(
                root,
                f"{{{SVG_NS}}}path",
                {
                    "d": artwork_to_svg_path(frame),
                    "fill": self.display.canvas_color,
                    "stroke": self.display.outline_color,
                    "stroke-dasharray": " ".join(f"{d:g}" for d in self.display.dash_array),
                },
            )

        ET.SubElement(
            root,
            f"{{{SVG_NS}}}path",
            {
                "d": artwork_to_svg_path(artwork),
                "fill": self.display.fill_color,
                "fill-rule": "nonzero",
            },
        )
        return ET.tostring(root, encoding="unicode")

    def save(self, stretchy: StretchyPath, output_path: Path, show_frame: bool = False) -> None:
        """Render the display artwork and write it to a file.

        Args:
            stretchy: Stretchy path to render
            output_path: Destination SVG file
            show_frame: Draw the outline frame behind the artwork

        Raises:
            ExportError: If the file cannot be written
        """
        document = self.render(stretchy, show_frame=show_frame)
        try:
            output_path.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            raise ExportError(str(output_path), str(e)) from e
