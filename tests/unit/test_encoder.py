"""Unit tests for path data encoding."""

import math

import pytest
from pydantic import ValidationError

from pathdata.config import EncoderConfig, NonFinitePolicy
from pathdata.core.encoder import (
    PathEncoder,
    encode_path,
    encode_segment,
    format_flag,
    format_number,
)
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
    QuadraticCurveTo,
    QuadraticCurveToRel,
    SmoothCurveTo,
    SmoothCurveToRel,
    SmoothQuadraticCurveTo,
    SmoothQuadraticCurveToRel,
    VerticalLineTo,
    VerticalLineToRel,
)
from pathdata.exceptions import NonFiniteValueError

# (absolute, relative, expected absolute token) for every command kind
COMMAND_PAIRS = [
    (MoveTo((10, 10)), MoveToRel((10, 10)), "M10 10"),
    (LineTo((0, 100)), LineToRel((0, 100)), "L0 100"),
    (HorizontalLineTo(5), HorizontalLineToRel(5), "H5"),
    (VerticalLineTo(-5), VerticalLineToRel(-5), "V-5"),
    (ClosePath(), ClosePathRel(), "Z"),
    (CurveTo((0, 0), (5, 10), (15, 20)), CurveToRel((0, 0), (5, 10), (15, 20)), "C0 0, 5 10, 15 20"),
    (SmoothCurveTo((19, 25), (21, 45)), SmoothCurveToRel((19, 25), (21, 45)), "S19 25, 21 45"),
    (QuadraticCurveTo((1, 2), (4, 5)), QuadraticCurveToRel((1, 2), (4, 5)), "Q1 2, 4 5"),
    (SmoothQuadraticCurveTo((34, 45)), SmoothQuadraticCurveToRel((34, 45)), "T34 45"),
    (
        ArcTo((6, 6), 180, True, False, (4, 4)),
        ArcToRel((6, 6), 180, True, False, (4, 4)),
        "A6 6 180 1 0 4 4",
    ),
]


class TestFormatNumber:
    """Tests for number formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (10, "10"),
            (10.0, "10"),
            (-5.0, "-5"),
            (0.5, "0.5"),
            (-0.25, "-0.25"),
            (0.1, "0.1"),
            (1 / 3, "0.3333333333333333"),
            (123456789.0, "123456789"),
            (0.0, "0"),
            (-0.0, "0"),
        ],
    )
    def test_plain_decimal(self, value: float, expected: str) -> None:
        """Test shortest decimal output without trailing .0."""
        assert format_number(value) == expected

    def test_no_grouping_or_padding(self) -> None:
        """Test large numbers have no separators or padding."""
        text = format_number(1234567.125)
        assert text == "1234567.125"
        assert "," not in text
        assert " " not in text

    def test_exponent_passthrough(self) -> None:
        """Test tiny and huge magnitudes keep exponent notation."""
        assert format_number(1e-7) == "1e-07"
        assert format_number(1e16) == "1e+16"

    def test_non_finite(self) -> None:
        """Test NaN and infinities are passed through as text."""
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"


class TestFormatFlag:
    """Tests for arc flag formatting."""

    def test_flags(self) -> None:
        """Test flags are 1 and 0, never words."""
        assert format_flag(True) == "1"
        assert format_flag(False) == "0"


class TestEncodeSegment:
    """Tests for single command encoding."""

    @pytest.mark.parametrize(("absolute", "relative", "expected"), COMMAND_PAIRS)
    def test_absolute_token(self, absolute, relative, expected: str) -> None:  # noqa: ARG002
        """Test each absolute command's exact token."""
        assert encode_segment(absolute) == expected

    @pytest.mark.parametrize(("absolute", "relative", "expected"), COMMAND_PAIRS)
    def test_relative_differs_only_in_case(self, absolute, relative, expected: str) -> None:
        """Test relative tokens are the absolute tokens with a lowercase letter."""
        token = encode_segment(relative)
        assert token[0] == expected[0].lower()
        assert token[1:] == encode_segment(absolute)[1:]

    @pytest.mark.parametrize(("absolute", "relative", "expected"), COMMAND_PAIRS)
    def test_leading_letter(self, absolute, relative, expected: str) -> None:  # noqa: ARG002
        """Test every token starts with the command's letter."""
        assert encode_segment(absolute)[0] == absolute.command
        assert encode_segment(relative)[0] == relative.command

    def test_arc_flags(self) -> None:
        """Test arc flag rendering."""
        assert encode_segment(ArcTo((6, 6), 180, True, False, (4, 4))) == "A6 6 180 1 0 4 4"
        assert encode_segment(ArcTo((6, 6), 180, False, True, (4, 4))) == "A6 6 180 0 1 4 4"

    @pytest.mark.parametrize("large_arc", [True, False])
    @pytest.mark.parametrize("sweep", [True, False])
    def test_flag_tokens(self, large_arc: bool, sweep: bool) -> None:
        """Test flags only ever render as 1 or 0."""
        tokens = encode_segment(ArcToRel((1, 2), 30, large_arc, sweep, (3, 4))).split(" ")
        assert tokens[3] in ("0", "1")
        assert tokens[4] in ("0", "1")
        assert tokens[3] == ("1" if large_arc else "0")
        assert tokens[4] == ("1" if sweep else "0")

    def test_fractional_coordinates(self) -> None:
        """Test fractional values keep their decimals."""
        assert encode_segment(LineTo((0.5, -1.25))) == "L0.5 -1.25"

    def test_not_a_command(self) -> None:
        """Test non-command values raise TypeError."""
        with pytest.raises(TypeError, match="Not a path command"):
            encode_segment("M0 0")  # type: ignore[arg-type]


class TestEncodePath:
    """Tests for path encoding."""

    def test_lines(self) -> None:
        """Test straight line commands."""
        segments = [
            MoveTo((10, 10)),
            LineTo((0, 100)),
            HorizontalLineTo(5),
            VerticalLineTo(-5),
            ClosePath(),
        ]
        assert encode_path(segments) == "M10 10 L0 100 H5 V-5 Z"

    def test_curves(self) -> None:
        """Test curve and arc commands."""
        segments = [
            CurveTo((0, 0), (5, 10), (15, 20)),
            SmoothCurveTo((19, 25), (21, 45)),
            QuadraticCurveTo((1, 2), (4, 5)),
            SmoothQuadraticCurveTo((34, 45)),
            ArcTo((6, 6), 180, True, False, (4, 4)),
            ClosePath(),
        ]
        assert encode_path(segments) == (
            "C0 0, 5 10, 15 20 S19 25, 21 45 Q1 2, 4 5 T34 45 A6 6 180 1 0 4 4 Z"
        )

    def test_mixed_absolute_and_relative(self) -> None:
        """Test absolute and relative commands in one path."""
        segments = [
            CurveTo((0, 0), (5, 10), (15, 20)),
            SmoothCurveToRel((19, 25), (21, 45)),
            QuadraticCurveTo((1, 2), (4, 5)),
            SmoothQuadraticCurveToRel((34, 45)),
            ArcTo((6, 6), 180, True, False, (4, 4)),
            LineToRel((0, 100)),
            HorizontalLineTo(5),
            VerticalLineToRel(-5),
            ClosePath(),
        ]
        assert encode_path(segments) == (
            "C0 0, 5 10, 15 20 s19 25, 21 45 Q1 2, 4 5 t34 45 "
            "A6 6 180 1 0 4 4 l0 100 H5 v-5 Z"
        )

    def test_empty(self) -> None:
        """Test an empty path encodes to an empty string."""
        assert encode_path([]) == ""

    def test_single(self) -> None:
        """Test a single command has no separators around it."""
        assert encode_path([ClosePathRel()]) == "z"

    def test_join_of_segments(self) -> None:
        """Test path encoding is the space-join of segment encodings."""
        segments = [pair[i] for pair in COMMAND_PAIRS for i in (0, 1)]
        assert encode_path(segments) == " ".join(encode_segment(s) for s in segments)

    def test_order_and_duplicates_preserved(self) -> None:
        """Test commands are emitted in order, duplicates included."""
        segments = [LineTo((1, 1)), MoveTo((0, 0)), LineTo((1, 1)), LineTo((1, 1))]
        assert encode_path(segments) == "L1 1 M0 0 L1 1 L1 1"

    def test_accepts_iterator(self) -> None:
        """Test any iterable is accepted."""
        assert encode_path(iter([MoveTo((1, 2)), ClosePath()])) == "M1 2 Z"


class TestPathEncoder:
    """Tests for configured encoding."""

    def test_default_config(self) -> None:
        """Test default configuration matches the module functions."""
        encoder = PathEncoder()
        segments = [MoveTo((1 / 3, 0.1)), ClosePath()]
        assert encoder.encode_path(segments) == encode_path(segments)

    def test_precision(self) -> None:
        """Test rounding to a number of decimal places."""
        encoder = PathEncoder(EncoderConfig(precision=2))
        assert encoder.encode_segment(LineTo((1 / 3, 2 / 3))) == "L0.33 0.67"

    def test_precision_zero(self) -> None:
        """Test rounding to whole numbers drops the decimal point."""
        encoder = PathEncoder(EncoderConfig(precision=0))
        assert encoder.encode_segment(HorizontalLineTo(10.4)) == "H10"

    def test_precision_keeps_flags(self) -> None:
        """Test rounding does not touch arc flags."""
        encoder = PathEncoder(EncoderConfig(precision=1))
        assert encoder.encode_segment(ArcTo((1.25, 2), 0.04, True, True, (0, 0))) == (
            "A1.2 2 0 1 1 0 0"
        )

    def test_pass_through_non_finite(self) -> None:
        """Test non-finite numbers are written by default."""
        encoder = PathEncoder()
        assert encoder.encode_segment(MoveTo((math.nan, math.inf))) == "MNaN Infinity"

    def test_reject_non_finite(self) -> None:
        """Test non-finite numbers raise when rejection is configured."""
        encoder = PathEncoder(EncoderConfig(non_finite=NonFinitePolicy.REJECT))
        with pytest.raises(NonFiniteValueError) as exc_info:
            encoder.encode_path([MoveTo((0, 0)), VerticalLineTo(-math.inf)])
        assert exc_info.value.value == -math.inf

    def test_reject_allows_finite(self) -> None:
        """Test rejection leaves finite numbers alone."""
        encoder = PathEncoder(EncoderConfig(non_finite=NonFinitePolicy.REJECT))
        assert encoder.encode_path([MoveTo((0, 0)), ClosePath()]) == "M0 0 Z"

    def test_reject_allows_huge_int(self) -> None:
        """Test integers beyond float range are encoded under rejection."""
        encoder = PathEncoder(EncoderConfig(non_finite=NonFinitePolicy.REJECT))
        assert encoder.encode_segment(HorizontalLineTo(10**400)) == "H1" + "0" * 400

    def test_invalid_precision(self) -> None:
        """Test precision is validated."""
        with pytest.raises(ValidationError):
            EncoderConfig(precision=-1)
