"""SVG reader for loading glyph drawings.

This module provides the SvgReader class for loading SVG files and the
parsing helpers shared by string and file based conversion.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from lxml import etree

from svg2glif.exceptions import MalformedInputError, SvgLoadError, UnsupportedUnitError

# Canvas size used when the root element has no width/height
DEFAULT_CANVAS_SIZE = "100"

_LENGTH_RE = re.compile(
    r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([A-Za-z%]*)\s*"
)
_SUPPORTED_UNITS = ("", "px")


def parse_length(value: str) -> float:
    """Parse an SVG length in user units.

    Args:
        value: Length text such as ``"100"`` or ``"100px"``

    Returns:
        The numeric value

    Raises:
        MalformedInputError: If the text is not a length
        UnsupportedUnitError: If the unit is anything but none or px
    """
    match = _LENGTH_RE.fullmatch(value)
    if match is None:
        raise MalformedInputError(f"invalid length '{value}'")

    number, unit = match.groups()
    if unit.lower() not in _SUPPORTED_UNITS:
        raise UnsupportedUnitError(value, unit)
    return float(number)


@dataclass(frozen=True)
class SvgDocument:
    """A parsed SVG document.

    Attributes:
        root: Root element of the document tree
        width: Canvas width in user units
        height: Canvas height in user units
    """

    root: etree._Element
    width: float
    height: float


def parse_svg(svg_data: str | bytes) -> SvgDocument:
    """Parse SVG markup and read the canvas size.

    Args:
        svg_data: SVG document text or bytes

    Returns:
        SvgDocument

    Raises:
        MalformedInputError: If the markup cannot be parsed
        UnsupportedUnitError: If width or height use an unsupported unit
    """
    if isinstance(svg_data, str):
        svg_data = svg_data.encode("utf-8")
    if not svg_data.strip():
        raise MalformedInputError("document is empty")

    parser = etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
    )
    try:
        root = etree.fromstring(svg_data, parser)
    except etree.XMLSyntaxError as e:
        raise MalformedInputError(str(e)) from e

    if root is None:
        raise MalformedInputError("document has no root element")

    width = parse_length(root.get("width", DEFAULT_CANVAS_SIZE))
    height = parse_length(root.get("height", DEFAULT_CANVAS_SIZE))

    return SvgDocument(root=root, width=width, height=height)


class SvgReader:
    """Loads SVG files.

    Example:
        with SvgReader(Path("A.svg")) as reader:
            print(reader.document.width)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._text: str | None = None
        self._document: SvgDocument | None = None

    def load(self) -> None:
        """Read and parse the SVG file.

        Raises:
            SvgLoadError: If the file cannot be read
            MalformedInputError: If the markup cannot be parsed
        """
        try:
            self._text = self._svg_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SvgLoadError(str(self._svg_path), str(e)) from e

        self._document = parse_svg(self._text)

    @property
    def text(self) -> str:
        """Raw SVG text.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._text is None:
            raise RuntimeError("SVG not loaded. Call load() first.")
        return self._text

    @property
    def document(self) -> SvgDocument:
        """Parsed SVG document.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("SVG not loaded. Call load() first.")
        return self._document

    def close(self) -> None:
        """Release the parsed document."""
        self._text = None
        self._document = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
