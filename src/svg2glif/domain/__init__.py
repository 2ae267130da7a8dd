"""Domain models for svg2glif.

This module contains the value types exchanged between the conversion
stages. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (batch conversion)
- Independent of lxml and fontTools implementation details

Key classes:
- ContourPoint: A point in font units with its outline role
- Contour: A closed sequence of points
- Anchor: A named point of interest
- Glyph: The converted glyph record
- MoveTo, LineTo, CurveTo, QCurveTo, ClosePath: Normalized path commands
"""

from svg2glif.domain.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, QCurveTo
from svg2glif.domain.contour import Contour, ContourPoint, PointKind
from svg2glif.domain.glyph import Anchor, Glyph

__all__: list[str] = [
    # Enums
    "PointKind",
    # Outline types
    "ContourPoint",
    "Contour",
    "Anchor",
    "Glyph",
    # Path commands
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QCurveTo",
]
