"""Conversion of path commands into GLIF contours.

Commands are consumed in order while a buffer collects the points of the
contour being drawn:

- MoveTo flushes a non-empty buffer and starts a new contour
- LineTo adds one corner point
- CurveTo adds two off-curve points and one smooth on-curve point
- QCurveTo adds nothing (quadratic curves are not carried over)
- ClosePath flushes a non-empty buffer

Every point is transformed and mapped individually, so control points
follow skew and non-uniform scale exactly like end points.
"""

from collections.abc import Iterable

import structlog
from fontTools.misc.transform import Transform

from svg2glif.core.mapper import CoordinateMapper
from svg2glif.domain.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, QCurveTo
from svg2glif.domain.contour import Contour, ContourPoint, PointKind

logger = structlog.get_logger(__name__)


def convert_path(
    commands: Iterable[PathCommand],
    transform: Transform,
    mapper: CoordinateMapper,
) -> list[Contour]:
    """Convert absolute path commands into closed contours in font units.

    Args:
        commands: Normalized path commands
        transform: Effective transform of the path element
        mapper: Source to font-unit mapping of the document

    Returns:
        Non-empty contours in drawing order, closing points elided
    """
    contours: list[Contour] = []
    current: list[ContourPoint] = []
    dropped_quadratics = 0

    def point(x: float, y: float, kind: PointKind, is_start: bool = False) -> ContourPoint:
        ux, uy = mapper.map_point(x, y, transform)
        return ContourPoint(ux, uy, kind, is_start)

    for command in commands:
        if isinstance(command, MoveTo):
            if current:
                contours.append(Contour(points=current))
                current = []
            current.append(point(command.x, command.y, PointKind.ON_CURVE_CORNER, is_start=True))

        elif isinstance(command, LineTo):
            current.append(point(command.x, command.y, PointKind.ON_CURVE_CORNER))

        elif isinstance(command, CurveTo):
            current.append(point(command.c1x, command.c1y, PointKind.OFF_CURVE))
            current.append(point(command.c2x, command.c2y, PointKind.OFF_CURVE))
            current.append(point(command.x, command.y, PointKind.ON_CURVE_SMOOTH))

        elif isinstance(command, QCurveTo):
            dropped_quadratics += 1

        elif isinstance(command, ClosePath):
            if current:
                contours.append(Contour(points=current))
                current = []

    if current:
        contours.append(Contour(points=current))

    if dropped_quadratics:
        logger.debug("Dropped quadratic segments", count=dropped_quadratics)

    return [elide_closing_point(contour) for contour in contours]


def elide_closing_point(contour: Contour) -> Contour:
    """Drop a trailing point that repeats the first point's coordinates.

    Args:
        contour: Contour as drawn

    Returns:
        The contour in "open start, implicit close" form
    """
    if contour.has_closing_point():
        return Contour(points=contour.points[:-1])
    return contour
