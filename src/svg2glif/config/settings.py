"""Configuration settings for svg2glif."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ConversionConfig(BaseModel):
    """Configuration for a single SVG to GLIF conversion."""

    em_size: float = Field(
        gt=0,
        description="Units per em of the destination font (typically 1000 or 2048)",
    )
    descent: float = Field(
        description="Distance from baseline to the bottom of the SVG canvas, in SVG units",
    )
    unicode: str | None = Field(
        default=None,
        description="Unicode codepoint in hex (e.g. 0041 for 'A')",
    )
    name: str | None = Field(
        default=None,
        description="Glyph name (default: input file stem)",
    )

    @field_validator("unicode")
    @classmethod
    def _check_unicode(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if text[:2].lower() in ("u+", "0x"):
            text = text[2:]
        try:
            codepoint = int(text, 16)
        except ValueError:
            raise ValueError(f"not a hexadecimal codepoint: {value!r}") from None
        if codepoint < 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            raise ValueError(f"not a Unicode scalar value: {value!r}")
        return text.upper()

    @property
    def codepoint(self) -> int | None:
        """Parsed codepoint, or None when no unicode was configured."""
        if self.unicode is None:
            return None
        return int(self.unicode, 16)

    def with_unicode(self, unicode: str) -> "ConversionConfig":
        """Return a copy with the unicode codepoint set (validated)."""
        return ConversionConfig(**{**self.model_dump(), "unicode": unicode})

    def with_name(self, name: str) -> "ConversionConfig":
        """Return a copy with the glyph name set."""
        return self.model_copy(update={"name": name})


class ProcessingConfig(BaseModel):
    """Configuration for batch conversion."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Svg2GlifSettings(BaseModel):
    """Main application settings."""

    conversion: ConversionConfig
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings(em_size: float = 1000.0, descent: float = 200.0) -> Svg2GlifSettings:
    """Get default application settings."""
    return Svg2GlifSettings(conversion=ConversionConfig(em_size=em_size, descent=descent))
