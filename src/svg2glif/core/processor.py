"""Conversion orchestration for the SVG to GLIF pipeline.

This module assembles glyphs from SVG documents and coordinates batch
conversion of many files using ProcessPoolExecutor. Conversions share no
state, so each file is an independent task.

Key components:
- convert_svg_string: Pure conversion of SVG text into a Glyph
- convert_file: Top-level picklable function for parallel execution
- GlyphConverter: Orchestrator class with logging and statistics
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

import structlog

from svg2glif.config import ConversionConfig, Svg2GlifSettings
from svg2glif.core.mapper import CoordinateMapper, round_half_away
from svg2glif.core.transform import IDENTITY
from svg2glif.core.walker import walk
from svg2glif.domain import Glyph
from svg2glif.exceptions import ConversionError, MalformedInputError
from svg2glif.io import GlifWriter, SvgDocument, SvgReader, parse_svg
from svg2glif.utils import ConversionLogger, ConversionStats, configure_logging

logger = structlog.get_logger(__name__)

# Glyph name used when neither the config nor the input path provide one
DEFAULT_GLYPH_NAME = "svgglyph"


def glyph_name_for(svg_path: Path | None, config: ConversionConfig) -> str:
    """Pick the glyph name: configured name, else file stem, else default."""
    if config.name:
        return config.name
    if svg_path is not None and svg_path.stem:
        return svg_path.stem
    return DEFAULT_GLYPH_NAME


def convert_svg_document(
    document: SvgDocument,
    glyph_name: str,
    config: ConversionConfig,
) -> Glyph:
    """Convert a parsed SVG document into a glyph.

    Args:
        document: Parsed SVG document
        glyph_name: Name of the produced glyph
        config: Em size, descent and codepoint

    Returns:
        The converted Glyph

    Raises:
        MalformedInputError: If the canvas height is not positive
        MalformedTransformError: If a transform attribute is malformed
        MalformedPathDataError: If path data is malformed
    """
    try:
        mapper = CoordinateMapper.for_document(document.height, config.descent, config.em_size)
    except ValueError as e:
        raise MalformedInputError(str(e)) from e

    result = walk(document.root, IDENTITY, mapper)

    codepoint = config.codepoint
    glyph = Glyph(
        name=glyph_name,
        advance_width=round_half_away(document.width * mapper.scale),
        advance_height=round_half_away(document.height * mapper.scale),
        codepoints=[codepoint] if codepoint is not None else [],
        contours=result.contours,
        anchors=result.anchors,
    )

    logger.debug(
        "Glyph converted",
        glyph=glyph.name,
        contours=len(glyph.contours),
        points=glyph.point_count,
        anchors=len(glyph.anchors),
    )
    return glyph


def convert_svg_string(
    svg_data: str | bytes,
    svg_path: Path | None,
    config: ConversionConfig,
) -> Glyph:
    """Convert SVG text into a glyph.

    Args:
        svg_data: SVG document text
        svg_path: Path the text came from, used for the default glyph name
        config: Conversion configuration

    Returns:
        The converted Glyph
    """
    document = parse_svg(svg_data)
    return convert_svg_document(document, glyph_name_for(svg_path, config), config)


def convert_svg_file(svg_path: Path, config: ConversionConfig) -> Glyph:
    """Read an SVG file and convert it into a glyph.

    Raises:
        SvgLoadError: If the file cannot be read
    """
    with SvgReader(svg_path) as reader:
        return convert_svg_document(reader.document, glyph_name_for(svg_path, config), config)


def convert_svg_to_glif_file(svg_path: Path, glif_path: Path, config: ConversionConfig) -> Glyph:
    """Convert an SVG file and write the GLIF file.

    Nothing is written when the conversion fails.

    Returns:
        The converted Glyph

    Raises:
        GlifSaveError: If the output cannot be written
    """
    glyph = convert_svg_file(svg_path, config)
    GlifWriter(glif_path).save(glyph)
    return glyph


def convert_file(svg_path: str, config_dict: dict[str, Any]) -> dict[str, Any]:
    """Convert a single SVG file.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        svg_path: Path of the SVG file
        config_dict: Serialized conversion configuration

    Returns:
        Dictionary containing either:
        - Success: {"glyph": glyph_dict, "duration_ms": float}
        - Error: {"error": str, "path": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        config = ConversionConfig(**config_dict)
        glyph = convert_svg_file(Path(svg_path), config)

        duration_ms = (time.time() - start_time) * 1000
        return {"glyph": glyph.to_dict(), "duration_ms": duration_ms}

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "path": svg_path,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class GlyphConverter:
    """Orchestrates single and batch SVG to GLIF conversion.

    Example:
        converter = GlyphConverter(get_default_settings())
        stats = converter.convert_many(
            svg_paths=[Path("A.svg"), Path("B.svg")],
            output_dir=Path("glyphs"),
        )
    """

    def __init__(self, settings: Svg2GlifSettings, quiet: bool = False) -> None:
        """Initialize converter with settings.

        Args:
            settings: Conversion, processing and logging settings
            quiet: Suppress console logging
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.conversion_logger = ConversionLogger(self.logger)

    def convert(self, svg_path: Path, output_path: Path | None = None) -> Glyph:
        """Convert one SVG file and write its GLIF file.

        Args:
            svg_path: Input SVG file
            output_path: Output GLIF path (default: input with .glif suffix)

        Returns:
            The converted Glyph
        """
        if output_path is None:
            output_path = GlifWriter.get_glif_path(svg_path)

        self.logger.info("Starting conversion", input=str(svg_path), output=str(output_path))
        start_time = time.time()

        glyph = convert_svg_to_glif_file(svg_path, output_path, self.settings.conversion)

        self.conversion_logger.log_file_complete(
            path=str(svg_path),
            glyph_name=glyph.name,
            contours=len(glyph.contours),
            anchors=len(glyph.anchors),
            duration_ms=(time.time() - start_time) * 1000,
        )
        return glyph

    def convert_many(
        self,
        svg_paths: Sequence[Path],
        output_dir: Path,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ConversionStats:
        """Convert SVG files in parallel and write them into a directory.

        Per-file failures are logged and counted; they never stop the other
        conversions. Output files are named with the UFO file naming rules
        and written in input order, so name clashes resolve the same way on
        every run. The converted glyph names are taken from each file's stem.

        Args:
            svg_paths: Input SVG files
            output_dir: Directory receiving the GLIF files
            max_workers: Maximum worker processes (None = settings default)
            progress_callback: Optional callback(completed, total, path, success)

        Returns:
            ConversionStats with counts, timing, and error details

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        stats = self.conversion_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        output_dir.mkdir(parents=True, exist_ok=True)

        # Glyph names come from file stems in batch mode
        config_dict = self.settings.conversion.model_dump()
        config_dict["name"] = None

        self.logger.info(
            "Starting batch conversion",
            file_count=len(svg_paths),
            output_dir=str(output_dir),
            max_workers=max_workers,
        )

        results = self._convert_parallel(svg_paths, config_dict, max_workers, progress_callback)

        existing: set[str] = set()
        for svg_path in svg_paths:
            key = str(svg_path)
            result = results.get(key)
            if result is None:
                continue

            if "error" in result:
                self.conversion_logger.log_file_error(
                    path=key,
                    error=ConversionError(key, result["error"]),
                    traceback=result.get("traceback"),
                )
                continue

            glyph = Glyph.from_dict(result["glyph"])
            file_name = GlifWriter.get_glif_file_name(glyph.name, existing)
            existing.add(file_name.lower())

            try:
                GlifWriter(output_dir / file_name).save(glyph)
            except Exception as e:
                self.conversion_logger.log_file_error(
                    path=key, error=e, traceback=traceback.format_exc()
                )
                continue

            self.conversion_logger.log_file_complete(
                path=key,
                glyph_name=glyph.name,
                contours=len(glyph.contours),
                anchors=len(glyph.anchors),
                duration_ms=result.get("duration_ms", 0.0),
            )

        stats.end_time = time.time()

        self.logger.info(
            "Batch conversion complete",
            converted=stats.converted_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def _convert_parallel(
        self,
        svg_paths: Sequence[Path],
        config_dict: dict[str, Any],
        max_workers: int | None,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[str, dict[str, Any]]:
        """Run convert_file for every path in a process pool.

        Returns:
            Results keyed by input path string
        """
        stats = self.conversion_logger.stats
        results: dict[str, dict[str, Any]] = {}
        total = len(svg_paths)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for svg_path in svg_paths:
                self.conversion_logger.log_file_start(str(svg_path))
                future = executor.submit(convert_file, str(svg_path), config_dict)
                pending_futures[future] = str(svg_path)

            try:
                for future in as_completed(pending_futures):
                    path = pending_futures.pop(future)

                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error
                        result = {
                            "error": str(e),
                            "path": path,
                            "traceback": traceback.format_exc(),
                        }

                    results[path] = result
                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, path, "error" not in result)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results
