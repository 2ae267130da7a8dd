"""Mapping from SVG space to font units.

SVG places its origin at the top-left corner with Y growing downwards. GLIF
places it on the baseline with Y growing upwards. The mapper flips Y around
the canvas height, shifts by the descent and scales to units-per-em.
"""

import math
from dataclasses import dataclass

from fontTools.misc.transform import Transform

from svg2glif.core.transform import apply_transform


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Args:
        value: Value to round

    Returns:
        Rounded integer
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


@dataclass(frozen=True, slots=True)
class CoordinateMapper:
    """Stateless SVG to font-unit coordinate mapping.

    Attributes:
        source_height: Height of the SVG canvas in SVG units
        descent: Baseline offset from the bottom of the canvas, in SVG units
        scale: Font units per SVG unit
    """

    source_height: float
    descent: float
    scale: float

    @classmethod
    def for_document(cls, source_height: float, descent: float, em_size: float) -> "CoordinateMapper":
        """Build a mapper that fits the canvas height to the em size.

        Args:
            source_height: Height of the SVG canvas
            descent: Baseline offset in SVG units
            em_size: Destination units per em

        Returns:
            CoordinateMapper with ``scale = em_size / source_height``

        Raises:
            ValueError: If the canvas height is not positive
        """
        if source_height <= 0:
            raise ValueError(f"SVG height must be positive, got {source_height}")
        return cls(source_height=source_height, descent=descent, scale=em_size / source_height)

    def map_point(self, x: float, y: float, transform: Transform) -> tuple[int, int]:
        """Map a source point through a transform into font units.

        Args:
            x: Source X coordinate
            y: Source Y coordinate
            transform: Effective transform of the element owning the point

        Returns:
            Rounded (x, y) in font units
        """
        tx, ty = apply_transform(transform, x, y)
        return (
            round_half_away(tx * self.scale),
            round_half_away((self.source_height - self.descent - ty) * self.scale),
        )
