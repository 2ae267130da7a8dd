"""Glyph representation and anchors.

This module defines the glyph record produced by a conversion: outline
contours, advance metrics, codepoints and named anchors.
"""

from dataclasses import dataclass, field
from typing import Any

from svg2glif.domain.contour import Contour


@dataclass(frozen=True, slots=True)
class Anchor:
    """A named point of interest on a glyph.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        name: Anchor name (non-empty)
    """

    x: int | float
    y: int | float
    name: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (also the glifLib anchor shape).

        Returns:
            Dictionary with x, y and name fields
        """
        return {"x": self.x, "y": self.y, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Anchor":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and name fields

        Returns:
            Anchor instance
        """
        return cls(x=data["x"], y=data["y"], name=data["name"])


@dataclass
class Glyph:
    """A single converted glyph.

    Attributes:
        name: Glyph name
        advance_width: Horizontal advance in font units
        advance_height: Vertical advance in font units
        codepoints: Unicode codepoints mapped to the glyph
        contours: Outline contours in document order
        anchors: Anchors in document order
    """

    name: str
    advance_width: int | float = 0
    advance_height: int | float = 0
    codepoints: list[int] = field(default_factory=list)
    contours: list[Contour] = field(default_factory=list)
    anchors: list[Anchor] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if glyph has no outlines.

        Returns:
            True if glyph has no contours, False otherwise
        """
        return len(self.contours) == 0

    @property
    def point_count(self) -> int:
        """Total number of points over all contours."""
        return sum(len(contour) for contour in self.contours)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "name": self.name,
            "advance_width": self.advance_width,
            "advance_height": self.advance_height,
            "codepoints": list(self.codepoints),
            "contours": [c.to_dict() for c in self.contours],
            "anchors": [a.to_dict() for a in self.anchors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance
        """
        return cls(
            name=data["name"],
            advance_width=data["advance_width"],
            advance_height=data["advance_height"],
            codepoints=list(data.get("codepoints", [])),
            contours=[Contour.from_dict(c) for c in data["contours"]],
            anchors=[Anchor.from_dict(a) for a in data.get("anchors", [])],
        )
