"""Traversal of the SVG element tree.

The walker visits elements depth-first in document order, composing the
transform of every element with the one inherited from its ancestors, and
dispatches leaves to the path converter or the anchor extractor. Each call
returns its own contributions; callers concatenate them in child order.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import structlog
from fontTools.misc.transform import Transform
from lxml import etree

from svg2glif.core.anchor import extract_anchor
from svg2glif.core.converter import convert_path
from svg2glif.core.mapper import CoordinateMapper
from svg2glif.core.path import parse_path_data
from svg2glif.core.transform import IDENTITY, compose, parse_transform
from svg2glif.domain.contour import Contour
from svg2glif.domain.glyph import Anchor

logger = structlog.get_logger(__name__)


class NodeKind(Enum):
    """Category of an SVG element for dispatch.

    OTHER elements are transparent containers: their children are visited.
    """

    PATH = auto()
    TEXT = auto()
    GROUP = auto()
    OTHER = auto()


_KINDS_BY_TAG: dict[str, NodeKind] = {
    "path": NodeKind.PATH,
    "text": NodeKind.TEXT,
    "g": NodeKind.GROUP,
    "svg": NodeKind.GROUP,
}


@dataclass
class WalkResult:
    """Contours and anchors contributed by a subtree, in document order."""

    contours: list[Contour] = field(default_factory=list)
    anchors: list[Anchor] = field(default_factory=list)

    def extend(self, other: "WalkResult") -> None:
        """Append another subtree's contributions after this one's."""
        self.contours.extend(other.contours)
        self.anchors.extend(other.anchors)


def classify(node: etree._Element) -> NodeKind:
    """Return the dispatch category of an element."""
    return _KINDS_BY_TAG.get(etree.QName(node).localname, NodeKind.OTHER)


def local_transform(node: etree._Element) -> Transform:
    """Parse the element's own ``transform`` attribute (identity if absent).

    Raises:
        MalformedTransformError: If the attribute is malformed
    """
    value = node.get("transform")
    if value is None:
        return IDENTITY
    return parse_transform(value)


def walk(
    node: etree._Element,
    inherited: Transform,
    mapper: CoordinateMapper,
) -> WalkResult:
    """Collect contours and anchors from an element and its descendants.

    Args:
        node: Element to visit
        inherited: Transform composed from all ancestors
        mapper: Source to font-unit mapping of the document

    Returns:
        WalkResult for the subtree

    Raises:
        MalformedTransformError: If a transform attribute is malformed
        MalformedPathDataError: If path data is malformed
    """
    result = WalkResult()
    effective = compose(inherited, local_transform(node))
    kind = classify(node)

    if kind is NodeKind.PATH:
        path_data = node.get("d")
        if path_data is not None:
            contours = convert_path(parse_path_data(path_data), effective, mapper)
            logger.debug("Converted path", contours=len(contours), id=node.get("id"))
            result.contours.extend(contours)

    elif kind is NodeKind.TEXT:
        anchor = extract_anchor(node, effective, mapper)
        if anchor is not None:
            result.anchors.append(anchor)

    else:
        if kind is NodeKind.OTHER:
            logger.debug("Traversing unknown element", tag=etree.QName(node).localname)
        for child in node:
            if isinstance(child.tag, str):
                result.extend(walk(child, effective, mapper))

    return result
