"""Configuration management for svg2glif.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ConversionConfig: Em size, descent, codepoint and glyph name
- ProcessingConfig: Batch conversion settings
- LoggingConfig: Logging settings
- Svg2GlifSettings: Main application settings
"""

from svg2glif.config.settings import (
    ConversionConfig,
    LoggingConfig,
    ProcessingConfig,
    Svg2GlifSettings,
    get_default_settings,
)

__all__ = [
    "ConversionConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "Svg2GlifSettings",
    "get_default_settings",
]
