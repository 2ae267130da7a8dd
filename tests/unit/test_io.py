"""Unit tests for the SVG/GLIF I/O layer.

Tests for SvgReader, length parsing, GLIF encoding and GlifWriter.
"""

from pathlib import Path
from unittest.mock import Mock, call

import pytest
from lxml import etree

from svg2glif.domain import Anchor, Contour, ContourPoint, Glyph, PointKind
from svg2glif.exceptions import (
    GlifSaveError,
    MalformedInputError,
    SvgLoadError,
    UnsupportedUnitError,
)
from svg2glif.io import GlifWriter, SvgReader, encode_glyph, parse_length, parse_svg
from svg2glif.io.writer import draw_contours, segment_type


def glif_points(data: bytes) -> list[dict[str, str]]:
    """Attributes of every <point> in a GLIF document."""
    root = etree.fromstring(data)
    return [dict(p.attrib) for p in root.iter("point")]


@pytest.fixture
def closed_curve() -> Contour:
    """Contour whose closing segment is a curve (ends on a control point)."""
    return Contour(
        points=[
            ContourPoint(0, 0, is_start=True),
            ContourPoint(100, 0),
            ContourPoint(100, 100, PointKind.OFF_CURVE),
            ContourPoint(0, 100, PointKind.OFF_CURVE),
        ]
    )


class TestParseLength:
    """Tests for parse_length."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("100", 100.0),
            ("100px", 100.0),
            ("100PX", 100.0),
            ("  12.5 ", 12.5),
            ("1e2", 100.0),
            (".5", 0.5),
            ("-3", -3.0),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_length(value) == expected

    @pytest.mark.parametrize("value, unit", [("100mm", "mm"), ("50%", "%"), ("2em", "em")])
    def test_unsupported_unit(self, value, unit):
        with pytest.raises(UnsupportedUnitError) as exc_info:
            parse_length(value)
        assert exc_info.value.unit == unit

    @pytest.mark.parametrize("value", ["", "abc", "px", "10 20"])
    def test_malformed(self, value):
        with pytest.raises(MalformedInputError):
            parse_length(value)


class TestParseSvg:
    """Tests for parse_svg."""

    def test_size(self, make_svg):
        document = parse_svg(make_svg("", width="50", height="200px"))
        assert (document.width, document.height) == (50.0, 200.0)

    def test_default_size(self, make_svg):
        document = parse_svg(make_svg("", width=None, height=None))
        assert (document.width, document.height) == (100.0, 100.0)

    def test_bytes_and_declared_encoding(self, make_svg):
        data = '<?xml version="1.0" encoding="UTF-8"?>' + make_svg('<text>é</text>')
        assert parse_svg(data).root is not None
        assert parse_svg(data.encode("utf-8")).root is not None

    def test_malformed_markup(self):
        with pytest.raises(MalformedInputError):
            parse_svg("<svg><path></svg>")
        with pytest.raises(MalformedInputError):
            parse_svg("")

    def test_unsupported_canvas_unit(self, make_svg):
        with pytest.raises(UnsupportedUnitError):
            parse_svg(make_svg("", width="10cm"))


class TestSvgReader:
    """Tests for SvgReader class."""

    def test_init(self):
        path = Path("test.svg")
        reader = SvgReader(path)
        assert reader._svg_path == path
        assert reader._document is None

    def test_load_nonexistent_file(self, tmp_path):
        reader = SvgReader(tmp_path / "missing.svg")
        with pytest.raises(SvgLoadError) as exc_info:
            reader.load()
        assert exc_info.value.path.endswith("missing.svg")

    def test_document_before_load(self):
        reader = SvgReader(Path("test.svg"))
        with pytest.raises(RuntimeError, match="SVG not loaded"):
            _ = reader.document
        with pytest.raises(RuntimeError, match="SVG not loaded"):
            _ = reader.text

    def test_context_manager(self, svg_file):
        with SvgReader(svg_file) as reader:
            assert reader.document.height == 100.0
            assert "<path" in reader.text
        assert reader._document is None

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.svg"
        path.write_text("<svg>", encoding="utf-8")
        with pytest.raises(MalformedInputError):
            SvgReader(path).load()


class TestSegmentType:
    """Tests for GLIF segment types."""

    def test_line_contour(self):
        contour = Contour(points=[ContourPoint(0, 0, is_start=True), ContourPoint(10, 0)])
        assert [segment_type(contour, i) for i in range(2)] == ["line", "line"]

    def test_curve_contour(self, closed_curve):
        assert [segment_type(closed_curve, i) for i in range(4)] == ["curve", "line", None, None]

    def test_smooth_point(self):
        contour = Contour(
            points=[
                ContourPoint(0, 0, is_start=True),
                ContourPoint(0, 10, PointKind.OFF_CURVE),
                ContourPoint(10, 10, PointKind.OFF_CURVE),
                ContourPoint(10, 0, PointKind.ON_CURVE_SMOOTH),
            ]
        )
        assert segment_type(contour, 3) == "curve"
        assert segment_type(contour, 0) == "line"


class TestDrawContours:
    """Tests for drawing contours into a point pen."""

    def test_pen_calls(self, closed_curve):
        pen = Mock()
        draw_contours([closed_curve], pen)

        assert pen.beginPath.call_count == 1
        assert pen.endPath.call_count == 1
        assert pen.addPoint.call_args_list == [
            call((0, 0), segmentType="curve", smooth=False),
            call((100, 0), segmentType="line", smooth=False),
            call((100, 100), segmentType=None, smooth=False),
            call((0, 100), segmentType=None, smooth=False),
        ]


class TestEncodeGlyph:
    """Tests for GLIF encoding."""

    def test_header_and_metrics(self):
        glyph = Glyph(name="A", advance_width=600, advance_height=1000, codepoints=[0x41])
        root = etree.fromstring(encode_glyph(glyph))

        assert root.tag == "glyph"
        assert root.get("name") == "A"
        assert root.get("format") == "2"
        advance = root.find("advance")
        assert advance.get("width") == "600"
        assert advance.get("height") == "1000"
        assert root.find("unicode").get("hex") == "0041"

    def test_no_unicode_element_without_codepoint(self):
        root = etree.fromstring(encode_glyph(Glyph(name="a", advance_width=500)))
        assert root.find("unicode") is None
        assert root.find("outline") is None or len(root.find("outline")) == 0

    def test_contour_points(self, closed_curve):
        data = encode_glyph(Glyph(name="o", contours=[closed_curve]))
        assert glif_points(data) == [
            {"x": "0", "y": "0", "type": "curve"},
            {"x": "100", "y": "0", "type": "line"},
            {"x": "100", "y": "100"},
            {"x": "0", "y": "100"},
        ]

    def test_smooth_flag(self):
        contour = Contour(
            points=[
                ContourPoint(0, 0, is_start=True),
                ContourPoint(0, 10, PointKind.OFF_CURVE),
                ContourPoint(10, 10, PointKind.OFF_CURVE),
                ContourPoint(10, 0, PointKind.ON_CURVE_SMOOTH),
            ]
        )
        points = glif_points(encode_glyph(Glyph(name="c", contours=[contour])))
        assert points[-1] == {"x": "10", "y": "0", "type": "curve", "smooth": "yes"}

    def test_anchors(self):
        glyph = Glyph(name="A", anchors=[Anchor(50, 950, "top"), Anchor(0, 0, "bottom")])
        root = etree.fromstring(encode_glyph(glyph))
        anchors = [dict(a.attrib) for a in root.iter("anchor")]
        assert anchors == [
            {"x": "50", "y": "950", "name": "top"},
            {"x": "0", "y": "0", "name": "bottom"},
        ]

    def test_deterministic(self, closed_curve):
        glyph = Glyph(name="o", advance_width=100, contours=[closed_curve])
        assert encode_glyph(glyph) == encode_glyph(glyph)


class TestGlifWriter:
    """Tests for GlifWriter class."""

    def test_init(self):
        writer = GlifWriter(Path("A_.glif"))
        assert writer.output_path == Path("A_.glif")

    def test_save(self, tmp_path):
        path = tmp_path / "A_.glif"
        GlifWriter(path).save(Glyph(name="A", advance_width=600))
        assert etree.parse(str(path)).getroot().get("name") == "A"

    def test_save_into_missing_directory(self, tmp_path):
        path = tmp_path / "missing" / "A_.glif"
        with pytest.raises(GlifSaveError):
            GlifWriter(path).save(Glyph(name="A"))
        assert not path.exists()

    def test_get_glif_path(self):
        assert GlifWriter.get_glif_path(Path("/fonts/A.svg")) == Path("/fonts/A.glif")

    def test_get_glif_file_name(self):
        assert GlifWriter.get_glif_file_name("a") == "a.glif"
        assert GlifWriter.get_glif_file_name("A") == "A_.glif"

    def test_get_glif_file_name_clash(self):
        name = GlifWriter.get_glif_file_name("a", existing={"a.glif"})
        assert name != "a.glif"
        assert name.endswith(".glif")
