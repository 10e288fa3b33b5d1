"""Path data encoding.

This module renders path commands as the text of an SVG ``d`` attribute.

Output format:
- A point is ``"<x> <y>"``
- Points within one curve command are separated by ``", "``
- Arc flags are ``1`` or ``0``
- Commands are joined with a single space

Example:
    >>> encode_path([MoveTo((10, 10)), LineTo((0, 100)), ClosePath()])
    'M10 10 L0 100 Z'
"""

import math
from collections.abc import Iterable

from pathdata.config import EncoderConfig, NonFinitePolicy
from pathdata.domain.segment import (
    ArcTo,
    ClosePath,
    CurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Point,
    QuadraticCurveTo,
    Segment,
    SmoothCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)
from pathdata.exceptions import NonFiniteValueError

POINT_SEPARATOR = ", "
SEGMENT_SEPARATOR = " "


def format_number(value: float) -> str:
    """Format a number as shortest decimal text.

    Integral values drop the trailing ``.0`` and negative zero becomes ``0``.
    NaN and infinities are written as ``NaN``, ``Infinity`` and ``-Infinity``.

    Args:
        value: Number to format

    Returns:
        Decimal text without padding, grouping or locale-specific characters
    """
    if isinstance(value, int):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_flag(value: bool) -> str:
    """Format an arc flag as ``1`` or ``0``."""
    return "1" if value else "0"


class PathEncoder:
    """Encodes path commands using a number formatting configuration.

    Example:
        encoder = PathEncoder(EncoderConfig(precision=2))
        encoder.encode_path([MoveTo((1 / 3, 0))])  # 'M0.33 0'
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        """Initialize encoder.

        Args:
            config: Number formatting settings (defaults to EncoderConfig())
        """
        self.config = config or EncoderConfig()

    def format_number(self, value: float) -> str:
        """Format a number according to the configuration.

        Raises:
            NonFiniteValueError: If value is NaN or infinite and the
                configuration rejects non-finite numbers
        """
        if (
            self.config.non_finite == NonFinitePolicy.REJECT
            and isinstance(value, float)
            and not math.isfinite(value)
        ):
            raise NonFiniteValueError(value)
        if self.config.precision is not None and not isinstance(value, int):
            value = round(value, self.config.precision)
        return format_number(value)

    def format_point(self, point: Point) -> str:
        """Format a point as ``"<x> <y>"``."""
        return f"{self.format_number(point.x)} {self.format_number(point.y)}"

    def _points(self, *points: Point) -> str:
        return POINT_SEPARATOR.join(self.format_point(p) for p in points)

    def encode_segment(self, segment: Segment) -> str:
        """Encode one path command.

        Args:
            segment: Command to encode

        Returns:
            Command letter followed by its parameters, e.g. ``"Q1 2, 4 5"``
        """
        if isinstance(segment, (MoveTo, LineTo)):
            return segment.command + self.format_point(segment.point)

        elif isinstance(segment, HorizontalLineTo):
            return segment.command + self.format_number(segment.x)

        elif isinstance(segment, VerticalLineTo):
            return segment.command + self.format_number(segment.y)

        elif isinstance(segment, ClosePath):
            return segment.command

        elif isinstance(segment, CurveTo):
            return segment.command + self._points(segment.control1, segment.control2, segment.end)

        elif isinstance(segment, SmoothCurveTo):
            return segment.command + self._points(segment.control2, segment.end)

        elif isinstance(segment, QuadraticCurveTo):
            return segment.command + self._points(segment.control, segment.end)

        elif isinstance(segment, SmoothQuadraticCurveTo):
            return segment.command + self.format_point(segment.end)

        elif isinstance(segment, ArcTo):
            return segment.command + " ".join(
                (
                    self.format_point(segment.radii),
                    self.format_number(segment.angle),
                    format_flag(segment.large_arc),
                    format_flag(segment.sweep),
                    self.format_point(segment.end),
                )
            )

        raise TypeError(f"Not a path command: {segment!r}")

    def encode_path(self, segments: Iterable[Segment]) -> str:
        """Encode a sequence of path commands in order.

        Args:
            segments: Commands in drawing order

        Returns:
            Encoded commands joined by single spaces ("" for no commands)
        """
        return SEGMENT_SEPARATOR.join(self.encode_segment(s) for s in segments)


_default_encoder = PathEncoder()


def encode_segment(segment: Segment) -> str:
    """Encode one path command with default formatting."""
    return _default_encoder.encode_segment(segment)


def encode_path(segments: Iterable[Segment]) -> str:
    """Encode a sequence of path commands with default formatting.

    Args:
        segments: Commands in drawing order

    Returns:
        Path data text, e.g. ``"M10 10 L0 100 H5 V-5 Z"``
    """
    return _default_encoder.encode_path(segments)
