"""End-to-end tests encoding glyph outlines from a real font file."""

from pathlib import Path

import pytest

from pathdata.config import PathDataSettings
from pathdata.core.processor import PathProcessor
from pathdata.core.encoder import encode_path
from pathdata.domain import ClosePath, MoveTo, QuadraticCurveTo
from pathdata.exceptions import GlyphNotFoundError
from pathdata.io import GlyphOutlineReader


class TestGlyphOutlineReader:
    """Tests reading outlines from a built font."""

    def test_glyph_names(self, outline_font: Path):
        """Test glyph order is exposed."""
        with GlyphOutlineReader(outline_font) as reader:
            assert reader.glyph_names == [".notdef", "square", "bump", "space"]
            assert reader.format == "TrueType"

    def test_square_outline(self, outline_font: Path):
        """Test a straight-line contour."""
        with GlyphOutlineReader(outline_font) as reader:
            segments = reader.segments("square")
        assert encode_path(segments) == "M0 0 L100 0 L100 100 L0 100 Z"

    def test_quadratic_outline(self, outline_font: Path):
        """Test a quadratic contour."""
        with GlyphOutlineReader(outline_font) as reader:
            segments = reader.segments("bump")
        assert segments == [
            MoveTo((0, 0)),
            QuadraticCurveTo((0, 100), (100, 100)),
            ClosePath(),
        ]
        assert encode_path(segments) == "M0 0 Q0 100, 100 100 Z"

    def test_empty_outline(self, outline_font: Path):
        """Test a glyph without contours gives an empty path."""
        with GlyphOutlineReader(outline_font) as reader:
            assert reader.segments("space") == []

    def test_unknown_glyph(self, outline_font: Path):
        """Test unknown glyph names raise GlyphNotFoundError."""
        with GlyphOutlineReader(outline_font) as reader:
            with pytest.raises(GlyphNotFoundError, match="'missing'"):
                reader.segments("missing")


class TestProcessorGlyphs:
    """Tests encoding glyphs through PathProcessor."""

    def test_encode_glyph(self, outline_font: Path):
        """Test glyph encoding and statistics."""
        processor = PathProcessor(PathDataSettings())
        assert processor.encode_glyph(outline_font, "bump") == "M0 0 Q0 100, 100 100 Z"
        assert processor.stats.command_counts == {"M": 1, "Q": 1, "Z": 1}

    def test_encode_unknown_glyph(self, outline_font: Path):
        """Test missing glyphs are counted as errors."""
        processor = PathProcessor(PathDataSettings(), quiet=True)
        with pytest.raises(GlyphNotFoundError):
            processor.encode_glyph(outline_font, "missing")
        assert processor.stats.error_count == 1
