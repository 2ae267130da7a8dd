"""Unit tests for SVG to font-unit coordinate mapping."""

import pytest

from svg2glif.core.mapper import CoordinateMapper, round_half_away
from svg2glif.core.transform import IDENTITY, parse_transform


class TestRoundHalfAway:
    """Tests for half-away-from-zero rounding."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (2.4, 2),
            (-0.5, -1),
            (-2.5, -3),
            (-2.4, -2),
            (0.0, 0),
        ],
    )
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_away(3.0), int)


class TestCoordinateMapper:
    """Tests for CoordinateMapper."""

    def test_for_document_scale(self):
        mapper = CoordinateMapper.for_document(100, 0, 1000)
        assert mapper.scale == 10
        assert mapper.source_height == 100

    def test_for_document_rejects_non_positive_height(self):
        with pytest.raises(ValueError, match="positive"):
            CoordinateMapper.for_document(0, 0, 1000)
        with pytest.raises(ValueError):
            CoordinateMapper.for_document(-5, 0, 1000)

    def test_flip_only(self, unit_mapper):
        """With scale 1 and no descent, only Y is flipped."""
        assert unit_mapper.map_point(30, 20, IDENTITY) == (30, 80)
        assert unit_mapper.map_point(0, 100, IDENTITY) == (0, 0)

    def test_scaled(self):
        mapper = CoordinateMapper.for_document(100, 0, 1000)
        assert mapper.map_point(10, 10, IDENTITY) == (100, 900)
        assert mapper.map_point(90, 90, IDENTITY) == (900, 100)

    def test_descent_moves_baseline(self):
        """Descent larger than the canvas puts every point below the baseline."""
        mapper = CoordinateMapper.for_document(100, 200, 1000)
        assert mapper.map_point(10, 10, IDENTITY) == (100, -1100)
        assert mapper.map_point(90, 90, IDENTITY) == (900, -1900)

    def test_transform_applied_before_flip(self):
        mapper = CoordinateMapper.for_document(100, 0, 1000)
        translate = parse_transform("translate(10, 0)")
        assert mapper.map_point(0, 0, translate) == (100, 1000)

    def test_results_are_rounded_ints(self):
        mapper = CoordinateMapper(source_height=100, descent=0, scale=0.5)
        x, y = mapper.map_point(3, 3, IDENTITY)
        assert (x, y) == (2, 49)
        assert isinstance(x, int)
        assert isinstance(y, int)
