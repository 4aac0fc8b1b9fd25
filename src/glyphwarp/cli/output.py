"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for replaying frame edits."""
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphwarp[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({font_type})")
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_edit_plan(edit_count: int, ops: list[str], verbose: bool) -> None:
    """Print the edits about to be replayed.

    Args:
        edit_count: Number of edits
        ops: Edit operation names in order
        verbose: Whether to list every edit
    """
    plural = "edit" if edit_count == 1 else "edits"
    console.print(f"  [green]{edit_count}[/green] frame {plural}")
    if verbose and ops:
        console.print(f"  {f' {SYM_DOT} '.join(ops)}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    applied: int,
    refused: int,
    failures: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        applied: Number of edits applied
        refused: Number of edits refused before arrangement
        failures: Number of arrangement passes that kept the previous artwork
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    problem_style = "red" if refused or failures else "green"
    console.print(
        f"  {applied} edits applied {SYM_DOT} "
        f"[{problem_style}]{refused} refused {SYM_DOT} {failures} failed[/{problem_style}]"
    )


def print_edit_problems(errors: list[tuple[str, str]]) -> None:
    """List refused or failed edits.

    Args:
        errors: (operation, reason) pairs
    """
    for op, reason in errors:
        console.print(f"  [yellow]{SYM_ERR}[/yellow] {op}: {reason}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
