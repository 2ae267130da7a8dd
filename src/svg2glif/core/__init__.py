"""Core conversion algorithms for svg2glif.

This module contains the geometry and coordinate pipeline:

- Transform parsing and composition (nested SVG transforms)
- Path data normalization into absolute commands
- Path to contour conversion (cubic point model, closing-point elision)
- Coordinate mapping from SVG space to font units
- Anchor extraction from text elements
- Document traversal and glyph assembly

All stages are pure functions over an in-memory document tree and are
safe to call from worker processes.

Key functions:
- parse_transform: Parse an SVG transform attribute
- compose: Compose parent and child transforms
- parse_path_data: Normalize path data into commands
- convert_path: Convert commands into contours
- extract_anchor: Build an anchor from a text element
- walk: Collect contours and anchors from an element tree
- convert_svg_string: Convert SVG text into a Glyph

Key classes:
- CoordinateMapper: SVG to font-unit mapping
- GlyphConverter: Single and batch conversion with logging
"""

from svg2glif.core.anchor import extract_anchor, validate_anchor_name
from svg2glif.core.converter import convert_path, elide_closing_point
from svg2glif.core.mapper import CoordinateMapper, round_half_away
from svg2glif.core.path import parse_path_data
from svg2glif.core.processor import (
    GlyphConverter,
    convert_file,
    convert_svg_document,
    convert_svg_file,
    convert_svg_string,
    convert_svg_to_glif_file,
)
from svg2glif.core.transform import IDENTITY, apply_transform, compose, parse_transform
from svg2glif.core.walker import NodeKind, WalkResult, classify, walk

__all__ = [
    "IDENTITY",
    # Mapper
    "CoordinateMapper",
    # Processor
    "GlyphConverter",
    # Walker
    "NodeKind",
    "WalkResult",
    "apply_transform",
    "classify",
    "compose",
    "convert_file",
    "convert_path",
    "convert_svg_document",
    "convert_svg_file",
    "convert_svg_string",
    "convert_svg_to_glif_file",
    "elide_closing_point",
    "extract_anchor",
    "parse_path_data",
    "parse_transform",
    "round_half_away",
    "validate_anchor_name",
    "walk",
]
