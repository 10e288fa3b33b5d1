"""Converters between fonttools pens and path commands.

Any outline that can be drawn with the fonttools pen protocol (glyphs,
RecordingPen values) can be captured as a list of path commands.
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from fontTools.pens.recordingPen import replayRecording

from pathdata.domain.segment import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    Segment,
)


class SegmentPen(BasePen):
    """Pen that records drawing calls as absolute path commands.

    BasePen resolves implied on-curve points of TrueType quadratic splines
    and decomposes cubic super-Beziers, so every call maps to exactly one
    command. Open contours (``endPath``) are left unclosed.

    Example:
        pen = SegmentPen(font.getGlyphSet())
        font.getGlyphSet()["O"].draw(pen)
        encode_path(pen.segments)
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.segments: list[Segment] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.segments.append(MoveTo(pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.segments.append(LineTo(pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.segments.append(CurveTo(pt1, pt2, pt3))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.segments.append(QuadraticCurveTo(pt1, pt2))

    def _closePath(self) -> None:
        self.segments.append(ClosePath())

    def _endPath(self) -> None:
        pass


def recording_to_segments(
    recording: list[tuple[str, tuple[Any, ...]]],
    glyph_set: Any = None,
) -> list[Segment]:
    """Convert a RecordingPen recording to path commands.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Args:
        recording: List of drawing commands from RecordingPen
        glyph_set: Glyph set used to draw ``addComponent`` entries

    Returns:
        List of path commands in drawing order
    """
    pen = SegmentPen(glyph_set)
    replayRecording(recording, pen)
    return pen.segments
