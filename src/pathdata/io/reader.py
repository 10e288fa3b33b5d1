"""Readers for path command sources.

This module loads path commands from:
- JSON documents holding a list of serialized commands
- Glyph outlines in TTF/OTF font files
"""

import json
import sys
from pathlib import Path

from fontTools.ttLib import TTFont

from pathdata.domain.segment import Segment, segment_from_dict
from pathdata.exceptions import DocumentLoadError, FontLoadError, GlyphNotFoundError
from pathdata.io.converter import SegmentPen

STDIN_PATH = Path("-")


def parse_segments(text: str, source: str = "<string>") -> list[Segment]:
    """Parse a JSON array of serialized commands.

    Args:
        text: JSON text, e.g. ``[{"command": "M", "point": [0, 0]}]``
        source: Name of the document for error messages

    Returns:
        List of path commands in document order

    Raises:
        DocumentLoadError: If the text is not a JSON array
        SegmentDecodeError: If an element is not a valid command
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise DocumentLoadError(source, f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DocumentLoadError(source, "expected a JSON array of commands")

    return [segment_from_dict(item, index=i) for i, item in enumerate(data)]


def read_segments(path: Path) -> list[Segment]:
    """Load path commands from a JSON file.

    Args:
        path: Path to the document, or ``-`` for standard input

    Returns:
        List of path commands in document order

    Raises:
        DocumentLoadError: If the file cannot be read or is not a JSON array
        SegmentDecodeError: If an element is not a valid command
    """
    if path == STDIN_PATH:
        return parse_segments(sys.stdin.read(), source="<stdin>")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(str(path), e.strerror or str(e)) from e

    return parse_segments(text, source=str(path))


class GlyphOutlineReader:
    """Loads TTF/OTF fonts and extracts glyph outlines as path commands.

    Example:
        with GlyphOutlineReader(Path("font.ttf")) as reader:
            segments = reader.segments("O")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or is not a valid font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-flavoured fonts, 'TrueType' otherwise."""
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def glyph_names(self) -> list[str]:
        """Return glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return list(self._require_font().getGlyphOrder())

    def segments(self, glyph_name: str) -> list[Segment]:
        """Get the outline of a glyph as path commands.

        Coordinates are in font units with the y-axis pointing up, exactly
        as stored in the font.

        Args:
            glyph_name: Name of the glyph

        Returns:
            List of path commands (empty for glyphs without outlines)

        Raises:
            GlyphNotFoundError: If the font has no such glyph
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        glyph_set = font.getGlyphSet()
        if glyph_name not in glyph_set:
            raise GlyphNotFoundError(glyph_name)

        pen = SegmentPen(glyph_set)
        glyph_set[glyph_name].draw(pen)
        return pen.segments

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "GlyphOutlineReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
