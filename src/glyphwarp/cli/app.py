"""CLI application entry point for glyphwarp.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphwarp import __version__
from glyphwarp.cli.output import (
    console,
    create_progress,
    print_edit_plan,
    print_edit_problems,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
)
from glyphwarp.config import LoggingConfig, TextConfig, WarpSettings
from glyphwarp.core.processor import WarpProcessor
from glyphwarp.exceptions import (
    EditScriptError,
    ExportError,
    FontError,
    FontLoadError,
    GlyphWarpError,
)
from glyphwarp.io import FontReader, InsertMidpoint, MoveCorner, load_edit_script, parse_point_arg
from glyphwarp.io.edits import Edit

# Create the Typer app
app = typer.Typer(
    name="glyphwarp",
    help="Warp a line of text into an editable four-cornered frame and export it as SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphwarp[/bold blue] v{__version__}")
        raise typer.Exit()


def build_edits(
    corners: list[str],
    inserts: list[str],
    edits_file: Path | None,
) -> list[Edit]:
    """Collect edits from the command line and an edit script.

    Insertions come first, then corner moves, then the script's edits.

    Raises:
        EditScriptError: If an argument or the script is invalid
    """
    edits: list[Edit] = []
    for arg in inserts:
        side, point = parse_point_arg(arg)
        edits.append(_validated(InsertMidpoint, arg, side=side, point=point.to_tuple()))
    for arg in corners:
        index, point = parse_point_arg(arg)
        edits.append(_validated(MoveCorner, arg, index=index, point=point.to_tuple()))
    if edits_file is not None:
        edits.extend(load_edit_script(edits_file).edits)
    return edits


def _validated(model: type, arg: str, **fields: object) -> Edit:
    try:
        return model(**fields)
    except ValidationError as e:
        raise EditScriptError(f"'{arg}': {e.errors()[0]['msg']}") from e


@app.command()
def warp(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text to warp",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: {font name}-warped.svg)",
        ),
    ] = None,
    corner: Annotated[
        list[str] | None,
        typer.Option(
            "--corner",
            "-c",
            help="Move a corner, as INDEX:X,Y (0 top-left, clockwise). Repeatable",
        ),
    ] = None,
    insert: Annotated[
        list[str] | None,
        typer.Option(
            "--insert",
            "-i",
            help="Insert a vertex on side 0 (top) or 2 (bottom), as SIDE:X,Y. Repeatable",
        ),
    ] = None,
    edits_file: Annotated[
        Path | None,
        typer.Option(
            "--edits",
            "-e",
            help="JSON edit script applied after command line edits",
        ),
    ] = None,
    font_size: Annotated[
        float | None,
        typer.Option(
            "--font-size",
            "-s",
            help="Em size of the text in SVG units (default: font units)",
            min=0.001,
        ),
    ] = None,
    letter_spacing: Annotated[
        float,
        typer.Option(
            "--letter-spacing",
            help="Extra space between characters in font units",
        ),
    ] = 0.0,
    show_frame: Annotated[
        bool,
        typer.Option(
            "--show-frame",
            help="Draw the dashed outline frame behind the artwork",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Warp a line of text into a four-cornered frame and write it as SVG.

    The frame starts as the bounding box of the text. Corner moves and
    inserted top or bottom vertices reshape it, and the text is re-projected
    between the frame's top and bottom sides.

    Example:
        glyphwarp Roboto-Regular.ttf "Hello" --insert 0:800,-900 --corner 2:1700,200

    This will write Roboto-Regular-warped.svg with an arched top and a
    stretched bottom-right corner.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    if not text.strip():
        print_error("Nothing to warp", details="TEXT must contain at least one visible character.")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = WarpSettings(
        text=TextConfig(font_size=font_size, letter_spacing=letter_spacing),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        edits = build_edits(corner or [], insert or [], edits_file)

        if not quiet:
            print_step("Loading font")
            with FontReader(input_font) as reader:
                print_font_info(
                    font_path=str(input_font),
                    font_type=reader.format,
                    glyph_count=reader.glyph_count,
                    upm=reader.units_per_em,
                )
            print_step("Warping")
            print_edit_plan(len(edits), [e.op for e in edits], verbose)

        output_path = output or WarpProcessor.get_output_path(input_font)
        processor = WarpProcessor(settings, quiet=quiet)

        if not quiet and edits:
            with create_progress() as progress:
                task_id = progress.add_task("Replaying edits", total=len(edits))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(
                    font_path=input_font,
                    text=text,
                    edits=edits,
                    output_path=output_path,
                    show_frame=show_frame,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process(
                font_path=input_font,
                text=text,
                edits=edits,
                output_path=output_path,
                show_frame=show_frame,
            )

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                applied=stats.edits_applied,
                refused=stats.edits_refused,
                failures=stats.arrangement_failures,
            )
            if verbose:
                print_edit_problems(stats.errors)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ExportError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except EditScriptError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GlyphWarpError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
