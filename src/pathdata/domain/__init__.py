"""Domain models for pathdata.

This module contains the path command model. All models are:

- Immutable (frozen dataclasses)
- Compared structurally, with absolute and relative forms never equal
- Serializable to JSON-compatible dictionaries

Key classes:
- Point: A 2D coordinate pair
- MoveTo ... ArcTo: Absolute path commands
- MoveToRel ... ArcToRel: Relative path commands
"""

from pathdata.domain.segment import (
    SEGMENT_TYPES,
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
    segment_from_dict,
)

__all__: list[str] = [
    # Core types
    "Point",
    "Segment",
    "SEGMENT_TYPES",
    "segment_from_dict",
    # Absolute commands
    "MoveTo",
    "LineTo",
    "HorizontalLineTo",
    "VerticalLineTo",
    "ClosePath",
    "CurveTo",
    "SmoothCurveTo",
    "QuadraticCurveTo",
    "SmoothQuadraticCurveTo",
    "ArcTo",
    # Relative commands
    "MoveToRel",
    "LineToRel",
    "HorizontalLineToRel",
    "VerticalLineToRel",
    "ClosePathRel",
    "CurveToRel",
    "SmoothCurveToRel",
    "QuadraticCurveToRel",
    "SmoothQuadraticCurveToRel",
    "ArcToRel",
]
