"""GLIF writer for converted glyphs.

This module encodes domain glyphs as GLIF (format 2) using fontTools'
glifLib and writes them to disk.
"""

from collections.abc import Container
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from fontTools.ufoLib.filenames import userNameToFileName
from fontTools.ufoLib.glifLib import GLIFFormatVersion, writeGlyphToString

from svg2glif.domain.contour import Contour, PointKind
from svg2glif.domain.glyph import Glyph
from svg2glif.exceptions import GlifSaveError


def segment_type(contour: Contour, index: int) -> str | None:
    """GLIF segment type of a contour point.

    Contours are closed, so the start point carries the type of the implied
    closing segment: ``curve`` when the contour ends in control points,
    ``line`` otherwise.

    Args:
        contour: Contour owning the point
        index: Index of the point in the contour

    Returns:
        ``"line"``, ``"curve"``, or None for off-curve points
    """
    point = contour.points[index]
    if not point.is_on_curve:
        return None
    if point.kind is PointKind.ON_CURVE_SMOOTH:
        return "curve"
    if point.is_start and contour.ends_off_curve():
        return "curve"
    return "line"


def draw_contours(contours: list[Contour], pen: Any) -> None:
    """Draw contours into a fontTools point pen.

    Args:
        contours: Contours to draw
        pen: Point pen (beginPath/addPoint/endPath protocol)
    """
    for contour in contours:
        pen.beginPath()
        for index, point in enumerate(contour.points):
            pen.addPoint(
                (point.x, point.y),
                segmentType=segment_type(contour, index),
                smooth=point.kind is PointKind.ON_CURVE_SMOOTH,
            )
        pen.endPath()


def encode_glyph(glyph: Glyph) -> bytes:
    """Encode a glyph as GLIF format 2.

    Args:
        glyph: Converted glyph

    Returns:
        UTF-8 encoded GLIF document
    """
    glyph_object = SimpleNamespace(
        width=glyph.advance_width,
        height=glyph.advance_height,
        unicodes=list(glyph.codepoints),
        anchors=[anchor.to_dict() for anchor in glyph.anchors],
    )
    text = writeGlyphToString(
        glyph.name,
        glyphObject=glyph_object,
        drawPointsFunc=lambda pen: draw_contours(glyph.contours, pen),
        formatVersion=GLIFFormatVersion.FORMAT_2_0,
    )
    return text.encode("utf-8")


class GlifWriter:
    """Writes converted glyphs as GLIF files.

    Example:
        writer = GlifWriter(Path("A_.glif"))
        writer.save(glyph)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the GLIF writer.

        Args:
            output_path: Path where the glyph will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination path."""
        return self._output_path

    def save(self, glyph: Glyph) -> None:
        """Encode and write the glyph.

        The glyph is fully encoded before the file is opened.

        Raises:
            GlifSaveError: If the file cannot be written
        """
        data = encode_glyph(glyph)
        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise GlifSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_glif_path(input_path: Path) -> Path:
        """Default output path for an SVG file.

        Converts: A.svg -> A.glif

        Args:
            input_path: SVG file path

        Returns:
            Path with a .glif suffix in the same directory
        """
        return input_path.with_suffix(".glif")

    @staticmethod
    def get_glif_file_name(glyph_name: str, existing: Container[str] = ()) -> str:
        """UFO file name for a glyph name.

        Uses the UFO user-name-to-file-name rules, so ``A`` becomes ``A_.glif``.

        Args:
            glyph_name: Glyph name
            existing: Lowercased file names already taken

        Returns:
            File name with a .glif suffix
        """
        return userNameToFileName(glyph_name, existing=existing, suffix=".glif")
