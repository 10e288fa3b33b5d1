"""Input layer for pathdata.

This module turns external sources into path commands. It provides a
clean abstraction layer between fonttools / JSON and the domain models.

Key responsibilities:
- Parse JSON documents of serialized commands
- Capture fonttools pen drawing calls as commands
- Extract glyph outlines from TTF/OTF fonts

Key classes:
- GlyphOutlineReader: Load fonts and extract glyph outlines
- SegmentPen: fonttools pen producing path commands
"""

from pathdata.io.converter import SegmentPen, recording_to_segments
from pathdata.io.reader import GlyphOutlineReader, parse_segments, read_segments

__all__ = [
    "GlyphOutlineReader",
    "SegmentPen",
    "parse_segments",
    "read_segments",
    "recording_to_segments",
]
