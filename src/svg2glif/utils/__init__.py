"""Utility functions for svg2glif.

This module provides utility functions including:

- Logging setup and configuration
- Batch progress and statistics tracking
"""

from svg2glif.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
