"""Path command types.

This module defines the values that make up a path:
- Point: A 2D coordinate pair
- One class per path command kind (MoveTo, LineTo, ..., ArcTo)
- A ``Rel`` subclass of each command for its relative form

Every command carries its path-data letter as the class attribute
``command``. Absolute commands use the uppercase letter; their relative
subclasses use the lowercase one and differ in nothing else.
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Union

from pathdata.exceptions import SegmentDecodeError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def of(cls, value: "Point | tuple[float, float]") -> "Point":
        """Build a Point from a Point or an ``(x, y)`` pair.

        Args:
            value: Point instance or two-item sequence

        Returns:
            Point instance
        """
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class _Command:
    """Shared behaviour of all path commands."""

    command: ClassVar[str]
    relative: ClassVar[bool] = False

    def __post_init__(self) -> None:
        # Point fields may be given as plain (x, y) pairs
        for f in fields(self):
            if f.type is Point:
                object.__setattr__(self, f.name, Point.of(getattr(self, f.name)))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        Points become ``[x, y]`` lists; the command letter is stored
        under ``"command"``.

        Returns:
            Dictionary representation of the command
        """
        data: dict[str, Any] = {"command": self.command}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = list(value.to_tuple()) if isinstance(value, Point) else value
        return data


@dataclass(frozen=True, slots=True)
class MoveTo(_Command):
    """Start a new subpath at ``point``."""

    command: ClassVar[str] = "M"

    point: Point


@dataclass(frozen=True, slots=True)
class MoveToRel(MoveTo):
    command: ClassVar[str] = "m"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class LineTo(_Command):
    """Straight line to ``point``."""

    command: ClassVar[str] = "L"

    point: Point


@dataclass(frozen=True, slots=True)
class LineToRel(LineTo):
    command: ClassVar[str] = "l"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class HorizontalLineTo(_Command):
    """Horizontal line to x-coordinate ``x``."""

    command: ClassVar[str] = "H"

    x: float


@dataclass(frozen=True, slots=True)
class HorizontalLineToRel(HorizontalLineTo):
    command: ClassVar[str] = "h"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class VerticalLineTo(_Command):
    """Vertical line to y-coordinate ``y``."""

    command: ClassVar[str] = "V"

    y: float


@dataclass(frozen=True, slots=True)
class VerticalLineToRel(VerticalLineTo):
    command: ClassVar[str] = "v"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ClosePath(_Command):
    """Close the current subpath."""

    command: ClassVar[str] = "Z"


@dataclass(frozen=True, slots=True)
class ClosePathRel(ClosePath):
    command: ClassVar[str] = "z"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class CurveTo(_Command):
    """Cubic Bezier curve.

    Attributes:
        control1: First control point
        control2: Second control point
        end: End point
    """

    command: ClassVar[str] = "C"

    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True, slots=True)
class CurveToRel(CurveTo):
    command: ClassVar[str] = "c"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class SmoothCurveTo(_Command):
    """Cubic Bezier curve whose first control point mirrors the previous one."""

    command: ClassVar[str] = "S"

    control2: Point
    end: Point


@dataclass(frozen=True, slots=True)
class SmoothCurveToRel(SmoothCurveTo):
    command: ClassVar[str] = "s"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo(_Command):
    """Quadratic Bezier curve."""

    command: ClassVar[str] = "Q"

    control: Point
    end: Point


@dataclass(frozen=True, slots=True)
class QuadraticCurveToRel(QuadraticCurveTo):
    command: ClassVar[str] = "q"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class SmoothQuadraticCurveTo(_Command):
    """Quadratic Bezier curve with a control point mirrored from the previous one."""

    command: ClassVar[str] = "T"

    end: Point


@dataclass(frozen=True, slots=True)
class SmoothQuadraticCurveToRel(SmoothQuadraticCurveTo):
    command: ClassVar[str] = "t"
    relative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ArcTo(_Command):
    """Elliptical arc.

    Attributes:
        radii: Ellipse radii as (rx, ry)
        angle: Rotation of the ellipse x-axis in degrees
        large_arc: Take the arc spanning more than 180 degrees
        sweep: Draw the arc in the positive-angle direction
        end: End point
    """

    command: ClassVar[str] = "A"

    radii: Point
    angle: float
    large_arc: bool
    sweep: bool
    end: Point


@dataclass(frozen=True, slots=True)
class ArcToRel(ArcTo):
    command: ClassVar[str] = "a"
    relative: ClassVar[bool] = True


Segment = Union[
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    ClosePath,
    CurveTo,
    SmoothCurveTo,
    QuadraticCurveTo,
    SmoothQuadraticCurveTo,
    ArcTo,
]
"""Any path command. Each member's ``Rel`` subclass is included by inheritance."""

SEGMENT_TYPES: dict[str, type[_Command]] = {
    cls.command: cls
    for cls in (
        MoveTo, MoveToRel,
        LineTo, LineToRel,
        HorizontalLineTo, HorizontalLineToRel,
        VerticalLineTo, VerticalLineToRel,
        ClosePath, ClosePathRel,
        CurveTo, CurveToRel,
        SmoothCurveTo, SmoothCurveToRel,
        QuadraticCurveTo, QuadraticCurveToRel,
        SmoothQuadraticCurveTo, SmoothQuadraticCurveToRel,
        ArcTo, ArcToRel,
    )
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode_field(field_type: Any, name: str, value: Any, index: int | None) -> Any:
    if field_type is Point:
        if (
            not isinstance(value, (list, tuple))
            or len(value) != 2
            or not all(_is_number(v) for v in value)
        ):
            raise SegmentDecodeError(index, f"field '{name}' must be a pair of numbers")
        return Point(value[0], value[1])
    if field_type is bool:
        if not isinstance(value, bool):
            raise SegmentDecodeError(index, f"field '{name}' must be a boolean")
        return value
    if not _is_number(value):
        raise SegmentDecodeError(index, f"field '{name}' must be a number")
    return value


def segment_from_dict(data: dict[str, Any], index: int | None = None) -> Segment:
    """Deserialize a command produced by ``to_dict``.

    Args:
        data: Dictionary with a ``"command"`` letter and the command's fields
        index: Position of the command in its document, used in error messages

    Returns:
        Segment instance

    Raises:
        SegmentDecodeError: If the letter is unknown or the fields do not
            match the command's shape
    """
    if not isinstance(data, dict):
        raise SegmentDecodeError(index, "expected an object")

    letter = data.get("command")
    cls = SEGMENT_TYPES.get(letter) if isinstance(letter, str) else None
    if cls is None:
        raise SegmentDecodeError(index, f"unknown command {letter!r}")

    expected = {f.name: f.type for f in fields(cls)}
    given = set(data) - {"command"}
    missing = sorted(set(expected) - given)
    extra = sorted(given - set(expected))
    if missing:
        raise SegmentDecodeError(index, f"missing field(s) for '{letter}': {', '.join(missing)}")
    if extra:
        raise SegmentDecodeError(index, f"unexpected field(s) for '{letter}': {', '.join(extra)}")

    kwargs = {
        name: _decode_field(field_type, name, data[name], index)
        for name, field_type in expected.items()
    }
    return cls(**kwargs)  # type: ignore[return-value]
