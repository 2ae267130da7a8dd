"""Anchors from SVG text elements.

A ``<text>`` element names an anchor with its content and places it at its
``x``/``y`` position, mapped through the element's effective transform.
"""

import re

import structlog
from fontTools.misc.transform import Transform
from lxml import etree

from svg2glif.core.mapper import CoordinateMapper
from svg2glif.domain.glyph import Anchor
from svg2glif.exceptions import InvalidAnchorNameError, Svg2GlifError
from svg2glif.io.reader import parse_length

logger = structlog.get_logger(__name__)

_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def validate_anchor_name(text: str) -> str:
    """Normalize text content into an anchor name.

    Args:
        text: Raw text content

    Returns:
        The trimmed name

    Raises:
        InvalidAnchorNameError: If the name is empty or has control characters
    """
    name = text.strip()
    if not name:
        raise InvalidAnchorNameError(text, "empty after trimming")
    if _CONTROL_CHAR_RE.search(name):
        raise InvalidAnchorNameError(text, "contains control characters")
    return name


def text_position(node: etree._Element) -> tuple[float, float]:
    """Read the anchoring position of a text element.

    Only the first value of a coordinate list is used. Missing or
    unreadable coordinates default to 0.

    Args:
        node: ``<text>`` element

    Returns:
        (x, y) in the element's own coordinate system
    """
    return _coordinate(node.get("x")), _coordinate(node.get("y"))


def extract_anchor(
    node: etree._Element,
    transform: Transform,
    mapper: CoordinateMapper,
) -> Anchor | None:
    """Build an anchor from a text element.

    Args:
        node: ``<text>`` element
        transform: Effective transform of the element
        mapper: Source to font-unit mapping of the document

    Returns:
        The anchor, or None when the text cannot name one
    """
    content = "".join(node.itertext())
    try:
        name = validate_anchor_name(content)
    except InvalidAnchorNameError as e:
        logger.debug("Skipping text element", reason=e.reason, text=content)
        return None

    x, y = text_position(node)
    ux, uy = mapper.map_point(x, y, transform)
    return Anchor(x=ux, y=uy, name=name)


def _coordinate(value: str | None) -> float:
    if value is None:
        return 0.0
    first = re.split(r"[\s,]+", value.strip(), maxsplit=1)[0]
    try:
        return parse_length(first)
    except Svg2GlifError:
        return 0.0
