"""Tests for domain models to verify they work correctly."""

import pytest

from svg2glif.domain import (
    Anchor,
    ClosePath,
    Contour,
    ContourPoint,
    CurveTo,
    Glyph,
    LineTo,
    MoveTo,
    PointKind,
)


class TestContourPoint:
    """Tests for ContourPoint class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = ContourPoint(100, 200)
        assert p.x == 100
        assert p.y == 200
        assert p.kind == PointKind.ON_CURVE_CORNER
        assert p.is_start is False

    def test_point_on_curve(self) -> None:
        """Corner and smooth points lie on the outline, control points do not."""
        assert ContourPoint(0, 0, PointKind.ON_CURVE_CORNER).is_on_curve
        assert ContourPoint(0, 0, PointKind.ON_CURVE_SMOOTH).is_on_curve
        assert not ContourPoint(0, 0, PointKind.OFF_CURVE).is_on_curve

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert ContourPoint(100, 200).to_tuple() == (100, 200)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = ContourPoint(100, 200, PointKind.OFF_CURVE, is_start=False)
        data = p1.to_dict()
        assert data == {"x": 100, "y": 200, "kind": "offcurve", "start": False}
        assert ContourPoint.from_dict(data) == p1

    def test_point_immutable(self) -> None:
        """Points are frozen."""
        p = ContourPoint(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore[misc]


class TestContour:
    """Tests for Contour class."""

    def test_len(self) -> None:
        contour = Contour(points=[ContourPoint(0, 0), ContourPoint(10, 0)])
        assert len(contour) == 2

    def test_has_closing_point(self) -> None:
        """Last point repeating the first coordinates is a closing point."""
        contour = Contour(
            points=[
                ContourPoint(0, 0, is_start=True),
                ContourPoint(10, 0),
                ContourPoint(0, 0, PointKind.ON_CURVE_SMOOTH),
            ]
        )
        assert contour.has_closing_point()

    def test_single_point_has_no_closing_point(self) -> None:
        """A one-point contour never has a closing point."""
        contour = Contour(points=[ContourPoint(5, 5, is_start=True)])
        assert not contour.has_closing_point()

    def test_ends_off_curve(self) -> None:
        contour = Contour(
            points=[
                ContourPoint(0, 0, is_start=True),
                ContourPoint(0, 10, PointKind.OFF_CURVE),
            ]
        )
        assert contour.ends_off_curve()
        assert not Contour(points=[ContourPoint(0, 0)]).ends_off_curve()
        assert not Contour(points=[]).ends_off_curve()

    def test_contour_serialization(self) -> None:
        """Test contour serialization and deserialization."""
        contour = Contour(
            points=[
                ContourPoint(0, 0, is_start=True),
                ContourPoint(0, 50, PointKind.OFF_CURVE),
                ContourPoint(50, 50, PointKind.OFF_CURVE),
                ContourPoint(50, 0, PointKind.ON_CURVE_SMOOTH),
            ]
        )
        restored = Contour.from_dict(contour.to_dict())
        assert restored == contour
        assert restored.points[0].is_start


class TestAnchor:
    """Tests for Anchor class."""

    def test_to_dict(self) -> None:
        """Anchors serialize to the glifLib anchor shape."""
        assert Anchor(50, 950, "top").to_dict() == {"x": 50, "y": 950, "name": "top"}

    def test_from_dict(self) -> None:
        assert Anchor.from_dict({"x": 1, "y": 2, "name": "a"}) == Anchor(1, 2, "a")


class TestGlyph:
    """Tests for Glyph class."""

    def test_empty_glyph(self) -> None:
        glyph = Glyph(name="space", advance_width=250)
        assert glyph.is_empty()
        assert glyph.point_count == 0
        assert glyph.codepoints == []
        assert glyph.anchors == []

    def test_point_count(self) -> None:
        glyph = Glyph(
            name="A",
            contours=[
                Contour(points=[ContourPoint(0, 0), ContourPoint(1, 0), ContourPoint(1, 1)]),
                Contour(points=[ContourPoint(5, 5)]),
            ],
        )
        assert not glyph.is_empty()
        assert glyph.point_count == 4

    def test_glyph_serialization(self) -> None:
        """Test glyph serialization and deserialization."""
        glyph = Glyph(
            name="A",
            advance_width=600,
            advance_height=1000,
            codepoints=[0x41],
            contours=[Contour(points=[ContourPoint(0, 0, is_start=True), ContourPoint(600, 0)])],
            anchors=[Anchor(300, 700, "top")],
        )
        data = glyph.to_dict()
        assert data["name"] == "A"
        assert data["codepoints"] == [0x41]
        assert Glyph.from_dict(data) == glyph


class TestPathCommands:
    """Tests for path command values."""

    def test_commands_compare_by_value(self) -> None:
        assert MoveTo(1, 2) == MoveTo(1, 2)
        assert LineTo(1, 2) != MoveTo(1, 2)
        assert ClosePath() == ClosePath()
        assert CurveTo(0, 1, 2, 3, 4, 5).x == 4
