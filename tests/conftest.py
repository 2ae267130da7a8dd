"""Shared fixtures for svg2glif tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from svg2glif.config import ConversionConfig
from svg2glif.core.mapper import CoordinateMapper

SVG_NS = "http://www.w3.org/2000/svg"

SQUARE_PATH = "M10 10 L90 10 L90 90 L10 90 Z"


def _svg(body: str, width: str | None = "100", height: str | None = "100") -> str:
    """Wrap element markup in an SVG root element."""
    size = ""
    if width is not None:
        size += f' width="{width}"'
    if height is not None:
        size += f' height="{height}"'
    return f'<svg xmlns="{SVG_NS}"{size}>{body}</svg>'


@pytest.fixture
def make_svg() -> Callable[..., str]:
    """Factory wrapping element markup in an SVG document."""
    return _svg


@pytest.fixture
def config() -> ConversionConfig:
    """1000 units per em, baseline at the bottom of the canvas."""
    return ConversionConfig(em_size=1000, descent=0)


@pytest.fixture
def unit_mapper() -> CoordinateMapper:
    """Flip-only mapper for a 100 unit tall canvas."""
    return CoordinateMapper(source_height=100, descent=0, scale=1)


@pytest.fixture
def square_svg() -> str:
    """A 100x100 canvas holding one square path."""
    return _svg(f'<path d="{SQUARE_PATH}"/>')


@pytest.fixture
def svg_file(tmp_path: Path, square_svg: str) -> Path:
    """The square drawing saved as A.svg."""
    path = tmp_path / "A.svg"
    path.write_text(square_svg, encoding="utf-8")
    return path
