"""Core geometric types for contour representation.

This module defines the point model of the GLIF outline:
- PointKind: Enum for the role of a point on the outline
- ContourPoint: A point in font units with its kind and start flag
- Contour: A closed, ordered sequence of points
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PointKind(Enum):
    """Role of a point on a cubic outline.

    Points can be:
    - ON_CURVE_CORNER: On the outline, tangent discontinuity allowed
    - ON_CURVE_SMOOTH: On the outline, end point of a cubic segment
    - OFF_CURVE: Cubic Bezier control point
    """

    ON_CURVE_CORNER = "corner"
    ON_CURVE_SMOOTH = "smooth"
    OFF_CURVE = "offcurve"


@dataclass(frozen=True, slots=True)
class ContourPoint:
    """A point in font units with outline metadata.

    Immutable and hashable so contours compare by value.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        kind: Role of the point on the outline
        is_start: True for the point that opened the contour
    """

    x: int | float
    y: int | float
    kind: PointKind = PointKind.ON_CURVE_CORNER
    is_start: bool = False

    @property
    def is_on_curve(self) -> bool:
        """Whether the point lies on the rendered outline."""
        return self.kind is not PointKind.OFF_CURVE

    def to_tuple(self) -> tuple[int | float, int | float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x, y, kind and start fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "kind": self.kind.value,
            "start": self.is_start,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContourPoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, kind and start fields

        Returns:
            ContourPoint instance
        """
        return cls(
            x=data["x"],
            y=data["y"],
            kind=PointKind(data["kind"]),
            is_start=data["start"],
        )


@dataclass
class Contour:
    """A closed contour of a glyph outline.

    Contours are stored in "open start, implicit close" form: the segment
    from the last point back to the first is implied and the first point
    is never repeated at the end.

    Attributes:
        points: Ordered points forming the contour
    """

    points: list[ContourPoint]

    def __len__(self) -> int:
        return len(self.points)

    def has_closing_point(self) -> bool:
        """Check if the last point repeats the first point's coordinates.

        Returns:
            True if the contour has at least two points and the first and
            last share identical coordinates
        """
        if len(self.points) < 2:
            return False
        return self.points[0].to_tuple() == self.points[-1].to_tuple()

    def ends_off_curve(self) -> bool:
        """Check if the implied closing segment is a curve.

        Returns:
            True if the last point is an off-curve control point
        """
        return bool(self.points) and self.points[-1].kind is PointKind.OFF_CURVE

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the contour
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a contour

        Returns:
            Contour instance
        """
        return cls(points=[ContourPoint.from_dict(p) for p in data["points"]])
