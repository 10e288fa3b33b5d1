"""Shared fixtures for pathdata tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((100, 0))
    pen.lineTo((100, 100))
    pen.lineTo((0, 100))
    pen.closePath()
    return pen.glyph()


def _bump_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((0, 100), (100, 100))
    pen.closePath()
    return pen.glyph()


@pytest.fixture
def outline_font(tmp_path: Path) -> Path:
    """Build a small TrueType font with known outlines.

    Glyphs:
    - square: one contour of four straight lines
    - bump: one quadratic curve
    - space: no outline
    """
    glyph_order = [".notdef", "square", "bump", "space"]
    glyphs = {
        ".notdef": TTGlyphPen(None).glyph(),
        "square": _square_glyph(),
        "bump": _bump_glyph(),
        "space": TTGlyphPen(None).glyph(),
    }

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x20: "space", 0x41: "square", 0x42: "bump"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Pathdata Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    path = tmp_path / "PathdataTest-Regular.ttf"
    fb.save(str(path))
    return path
