"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from svg2glif.domain import Glyph

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch conversion.

    The task carries a ``current`` field naming the last converted file.

    Returns:
        Progress with completion bar, elapsed time and current file
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=32, complete_style="green", finished_style="green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TextColumn("[dim]{task.fields[current]}[/dim]"),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svg2glif[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_glyph_info(glyph: Glyph) -> None:
    """Print a summary of a converted glyph.

    Args:
        glyph: Converted glyph
    """
    line = Text("  ")
    line.append(glyph.name, style="bold")
    if glyph.codepoints:
        line.append(f" (U+{glyph.codepoints[0]:04X})")
    console.print(line)
    console.print(
        f"  {len(glyph.contours)} contours {SYM_DOT} {glyph.point_count} points "
        f"{SYM_DOT} {len(glyph.anchors)} anchors"
    )
    console.print(f"  advance {glyph.advance_width} {SYM_DOT} height {glyph.advance_height}")


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


def print_success(output_path: str) -> None:
    """Print success message for a single conversion.

    Args:
        output_path: Path to output file
    """
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(f"\n[bold green]{SYM_OK} Wrote glif[/bold green]")
    console.print(line)


def print_batch_summary(
    output_dir: str,
    total_time_s: float,
    converted: int,
    errors: int,
    failures: list[tuple[str, str]],
    avg_time_ms: float | None = None,
) -> None:
    """Print summary of a batch run.

    Args:
        output_dir: Directory receiving the GLIF files
        total_time_s: Total processing time in seconds
        converted: Number of files converted
        errors: Number of files that failed
        failures: (path, error) pairs for failed files
        avg_time_ms: Average conversion time per file in milliseconds
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_dir, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {converted} glyphs {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )
    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg")

    for path, error in failures:
        failure = Text(f"  {SYM_ERR} ")
        failure.append(path)
        failure.append(f": {error}")
        console.print(failure)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")


def print_cancellation_summary(converted: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        converted: Number of files converted before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {converted} files completed {SYM_DOT} {cancelled} tasks cancelled")
