"""svg2glif - Convert SVG glyph drawings to UFO GLIF glyphs.

svg2glif reads a single SVG drawing of a glyph, maps its paths from the SVG
top-left pixel space into the font's baseline-relative unit space, and writes
a GLIF (format 2) glyph record. Text elements become named anchors.

Example:
    $ svg2glif convert A.svg -o A_.glif --em-size 1000 --descent 200 --unicode 0041

This will create A_.glif with the outline of A.svg scaled to a 1000 UPM font.
"""

__version__ = "0.1.0"
__author__ = "svg2glif contributors"

__all__ = ["__author__", "__version__"]
