"""Normalized path commands.

Every command carries absolute source-space coordinates. Relative commands,
horizontal/vertical shorthand, smooth-curve reflection and elliptical arcs
are resolved before commands of these types are built.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Cubic Bezier segment with two control points ending at (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class QCurveTo:
    """Quadratic segment. Kept only so that it can be dropped explicitly."""

    points: tuple[tuple[float, float], ...]


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath."""


PathCommand: TypeAlias = MoveTo | LineTo | CurveTo | QCurveTo | ClosePath
