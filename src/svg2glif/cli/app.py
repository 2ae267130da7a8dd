"""CLI application entry point for svg2glif.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from svg2glif import __version__
from svg2glif.cli.output import (
    console,
    create_progress,
    print_batch_summary,
    print_cancellation_summary,
    print_error,
    print_glyph_info,
    print_header,
    print_step,
    print_success,
)
from svg2glif.config import (
    ConversionConfig,
    LoggingConfig,
    ProcessingConfig,
    Svg2GlifSettings,
)
from svg2glif.core import GlyphConverter
from svg2glif.exceptions import GlifSaveError, SvgLoadError, Svg2GlifError
from svg2glif.io import GlifWriter

# Create the Typer app
app = typer.Typer(
    name="svg2glif",
    help="Convert SVG glyph drawings to UFO's GLIF format.",
    add_completion=False,
    no_args_is_help=True,
)

EmSizeOption = Annotated[
    float,
    typer.Option(
        "--em-size",
        "-e",
        help="Units per em (typically 1000 or 2048)",
        show_default=False,
    ),
]
DescentOption = Annotated[
    float,
    typer.Option(
        "--descent",
        "-d",
        help="SVG has no ascent/descent; distance from the canvas bottom to the baseline, in SVG units",
        show_default=False,
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Verbose console output",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svg2glif[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Convert SVG glyph drawings to UFO's GLIF format."""


def _build_settings(
    em_size: float,
    descent: float,
    unicode: str | None,
    name: str | None,
    workers: int | None,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> Svg2GlifSettings:
    """Create settings from CLI arguments, exiting on invalid values."""
    try:
        return Svg2GlifSettings(
            conversion=ConversionConfig(
                em_size=em_size,
                descent=descent,
                unicode=unicode,
                name=name,
            ),
            processing=ProcessingConfig(max_workers=workers),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="WARNING" if quiet else log_level,
            ),
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        print_error("Invalid options", details=details)
        raise typer.Exit(code=1) from None


@app.command()
def convert(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    em_size: EmSizeOption,
    descent: DescentOption,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output GLIF path (default: {stem}.glif next to the input)",
        ),
    ] = None,
    unicode: Annotated[
        str | None,
        typer.Option(
            "--unicode",
            "-u",
            help="Unicode codepoint in hex (e.g., 0041 for 'A')",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Glyph name (default: input file stem)",
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Convert one SVG drawing into a GLIF glyph.

    Paths become contours and text elements become anchors named after
    their content.

    Example:
        svg2glif convert A.svg -o A_.glif -e 1000 -d 200 -u 0041
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(
        em_size, descent, unicode, name, None, log_file, log_level, quiet
    )
    output_path = output if output is not None else GlifWriter.get_glif_path(input_svg)

    if not quiet:
        print_header(__version__)
        print_step("Converting")

    try:
        converter = GlyphConverter(settings, quiet=quiet)
        glyph = converter.convert(input_svg, output_path)
    except SvgLoadError as e:
        print_error(f"Could not read SVG: {e.reason}")
        raise typer.Exit(code=1)
    except GlifSaveError as e:
        print_error(f"Could not save GLIF: {e.reason}")
        raise typer.Exit(code=1)
    except Svg2GlifError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        if verbose:
            print_glyph_info(glyph)
        print_success(str(output_path))


@app.command()
def batch(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="SVG files to convert",
            show_default=False,
        ),
    ],
    em_size: EmSizeOption,
    descent: DescentOption,
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-O",
            help="Directory for the GLIF files",
        ),
    ] = Path("glyphs"),
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Convert many SVG drawings into GLIF glyphs in parallel.

    Glyph names come from file stems; file names follow the UFO naming rules.

    Example:
        svg2glif batch drawings/*.svg -O MyFont.ufo/glyphs -e 1000 -d 200
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    missing = [path for path in inputs if not path.is_file()]
    if missing:
        print_error(
            f"Input file not found: {missing[0]}",
            details=f"{len(missing)} of {len(inputs)} inputs do not exist or are not files.",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(
        em_size, descent, None, None, workers, log_file, log_level, quiet
    )

    if not quiet:
        print_header(__version__)
        print_step(f"Converting {len(inputs)} files")

    converter = GlyphConverter(settings, quiet=quiet)
    stats = None

    try:
        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Converting {len(inputs)} files", total=len(inputs), current=""
                )

                def update_progress(completed: int, _total: int, path: str, _ok: bool) -> None:
                    progress.update(task_id, completed=completed, current=escape(Path(path).name))

                stats = converter.convert_many(
                    inputs, output_dir, max_workers=workers, progress_callback=update_progress
                )
        else:
            stats = converter.convert_many(inputs, output_dir, max_workers=workers)
    except KeyboardInterrupt:
        if not quiet:
            current = converter.conversion_logger.stats
            print_cancellation_summary(
                converted=current.converted_count, cancelled=current.cancelled_count
            )
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

    if not quiet:
        print_batch_summary(
            output_dir=str(output_dir),
            total_time_s=stats.duration_seconds,
            converted=stats.converted_count,
            errors=stats.error_count,
            failures=stats.errors if verbose or stats.error_count else [],
            avg_time_ms=stats.avg_file_time_ms,
        )

    if stats.error_count:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
