"""SVG and GLIF I/O layer for svg2glif.

This module handles reading SVG documents with lxml and writing GLIF
glyphs with fontTools. It provides a clean abstraction layer between
those libraries and the domain models.

Key responsibilities:
- Parse SVG markup and canvas size (unitless and px only)
- Encode domain glyphs as GLIF format 2
- Write GLIF files with UFO file naming

Key classes:
- SvgReader: Load SVG files
- GlifWriter: Save converted glyphs
"""

from svg2glif.io.reader import SvgDocument, SvgReader, parse_length, parse_svg
from svg2glif.io.writer import GlifWriter, encode_glyph

__all__ = [
    "GlifWriter",
    "SvgDocument",
    "SvgReader",
    "encode_glyph",
    "parse_length",
    "parse_svg",
]
