"""Pathdata - Encode drawing commands as SVG path data.

Pathdata turns an ordered sequence of path commands (move, line, curve, arc,
close) into the text used by the ``d`` attribute of an SVG ``<path>`` element.

Example:
    >>> from pathdata import ClosePath, LineTo, MoveTo, encode_path
    >>> encode_path([MoveTo((10, 10)), LineTo((0, 100)), ClosePath()])
    'M10 10 L0 100 Z'
"""

from pathdata.core.encoder import PathEncoder, encode_path, encode_segment
from pathdata.domain import (
    ArcTo,
    ArcToRel,
    ClosePath,
    ClosePathRel,
    CurveTo,
    CurveToRel,
    HorizontalLineTo,
    HorizontalLineToRel,
    LineTo,
    LineToRel,
    MoveTo,
    MoveToRel,
    Point,
    QuadraticCurveTo,
    QuadraticCurveToRel,
    Segment,
    SmoothCurveTo,
    SmoothCurveToRel,
    SmoothQuadraticCurveTo,
    SmoothQuadraticCurveToRel,
    VerticalLineTo,
    VerticalLineToRel,
)

__version__ = "0.1.0"

__all__ = [
    "ArcTo",
    "ArcToRel",
    "ClosePath",
    "ClosePathRel",
    "CurveTo",
    "CurveToRel",
    "HorizontalLineTo",
    "HorizontalLineToRel",
    "LineTo",
    "LineToRel",
    "MoveTo",
    "MoveToRel",
    "PathEncoder",
    "Point",
    "QuadraticCurveTo",
    "QuadraticCurveToRel",
    "Segment",
    "SmoothCurveTo",
    "SmoothCurveToRel",
    "SmoothQuadraticCurveTo",
    "SmoothQuadraticCurveToRel",
    "VerticalLineTo",
    "VerticalLineToRel",
    "__version__",
    "encode_path",
    "encode_segment",
]
