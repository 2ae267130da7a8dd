"""Logging utilities for svg2glif."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ConversionStats:
    """Statistics from a batch conversion run."""

    converted_count: int = 0
    error_count: int = 0
    contours_written: int = 0
    anchors_written: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    file_timings_ms: list[float] = field(default_factory=list)
    was_cancelled: bool = False
    cancelled_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_file_time_ms(self) -> float | None:
        """Average conversion time per file, None before any file converted."""
        if not self.file_timings_ms:
            return None
        return sum(self.file_timings_ms) / len(self.file_timings_ms)


# Shared by every svg2glif logger; rendered as one JSON object per line
_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _attach(handler: logging.Handler, level: str, fmt: str) -> None:
    handler.setLevel(logging.getLevelName(level.upper()))
    handler.setFormatter(logging.Formatter(fmt))
    logging.getLogger().addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Conversion modules log through ``structlog.get_logger(__name__)``; this
    routes them to the standard library handlers set up here.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    logging.getLogger().setLevel(logging.DEBUG)

    if log_file is not None:
        _attach(logging.FileHandler(log_file, encoding="utf-8"), file_level, _FILE_FORMAT)
    if not quiet:
        _attach(logging.StreamHandler(), console_level, "%(message)s")

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svg2glif")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)
    return logger


class ConversionLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_file_start(self, path: str) -> None:
        """Log start of a file conversion."""
        self._logger.debug("Converting file", path=path)

    def log_file_complete(
        self,
        path: str,
        glyph_name: str,
        contours: int,
        anchors: int,
        duration_ms: float,
    ) -> None:
        """Log successful file conversion."""
        self._logger.info(
            "File converted",
            path=path,
            glyph=glyph_name,
            contours=contours,
            anchors=anchors,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.converted_count += 1
        self._stats.contours_written += contours
        self._stats.anchors_written += anchors
        self._stats.file_timings_ms.append(duration_ms)

    def log_file_error(
        self,
        path: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log file conversion error."""
        self._logger.error(
            "File conversion failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
