"""Tests for arbitrary-precision integer and decimal rules."""

from decimal import Decimal
from fractions import Fraction

import pytest

from xstypes.domain.errors import CoercionFailed
from xstypes.domain.numeric import (
    DOUBLE_MAX,
    DOUBLE_MIN,
    FLOAT_MAX,
    FLOAT_MIN,
    decimal_from_float,
    double_in_range,
    float_in_range,
    integer_text,
    is_finite_decimal,
    parse_decimal_text,
    parse_integer_text,
    short_number,
)


def exact_power_of_two(exponent: int, *, nudge: int = 0) -> Decimal:
    """Exact Decimal for ``2**exponent`` (negative exponents), optionally nudged.

    ``2**-n == 5**n * 10**-n``; adding *nudge* to the digits gives the
    closest neighbours above or below.
    """
    return Decimal(f"{5 ** -exponent + nudge}E{exponent}")


class TestBoundaryConstants:
    def test_float_max(self) -> None:
        assert FLOAT_MAX == 2**128

    def test_float_min(self) -> None:
        assert FLOAT_MIN == Fraction(1, 2**125)

    def test_double_max(self) -> None:
        assert DOUBLE_MAX == 2**1023

    def test_double_min(self) -> None:
        assert DOUBLE_MIN == Fraction(1, 2**1022)


class TestFloatRange:
    def test_max_is_inclusive(self) -> None:
        assert float_in_range(Decimal(2**128))
        assert float_in_range(Decimal(-(2**128)))

    def test_above_max(self) -> None:
        assert not float_in_range(Decimal(2**128 + 1))

    def test_min_is_inclusive(self) -> None:
        assert float_in_range(exact_power_of_two(-125))

    def test_below_min(self) -> None:
        assert not float_in_range(exact_power_of_two(-125, nudge=-1))

    @pytest.mark.parametrize("special", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_specials_always_valid(self, special: str) -> None:
        assert float_in_range(Decimal(special))

    @pytest.mark.parametrize("zero", ["0", "-0", "0.000", "0E+10"])
    def test_zero_accepted(self, zero: str) -> None:
        assert float_in_range(Decimal(zero))

    def test_ordinary_values(self) -> None:
        assert float_in_range(Decimal("3.14"))
        assert float_in_range(Decimal("-1.5"))

    @pytest.mark.parametrize("text", ["1e99999999", "-1e99999999", "1e-99999999", "-1e-99999999"])
    def test_huge_exponents_rejected(self, text: str) -> None:
        assert not float_in_range(Decimal(text))

    def test_neighbouring_decades(self) -> None:
        assert float_in_range(Decimal("1e38"))
        assert not float_in_range(Decimal("1e39"))
        assert float_in_range(Decimal("3e-38"))
        assert not float_in_range(Decimal("1e-38"))


class TestDoubleRange:
    def test_max_is_exclusive(self) -> None:
        assert not double_in_range(Decimal(2**1023))
        assert double_in_range(Decimal(2**1023 - 1))

    def test_min_is_exclusive(self) -> None:
        assert not double_in_range(exact_power_of_two(-1022))
        assert double_in_range(exact_power_of_two(-1022, nudge=1))

    @pytest.mark.parametrize("special", ["NaN", "Infinity", "-Infinity"])
    def test_specials_always_valid(self, special: str) -> None:
        assert double_in_range(Decimal(special))

    def test_zero_accepted(self) -> None:
        assert double_in_range(Decimal("0"))
        assert double_in_range(Decimal("-0.0"))

    def test_beyond_float_but_within_double(self) -> None:
        value = Decimal("1E+300")
        assert double_in_range(value)
        assert not float_in_range(value)

    @pytest.mark.parametrize("text", ["1e99999999", "-1e99999999", "1e-99999999", "-1e-99999999"])
    def test_huge_exponents_rejected(self, text: str) -> None:
        assert not double_in_range(Decimal(text))

    def test_neighbouring_decades(self) -> None:
        assert double_in_range(Decimal("8e307"))
        assert not double_in_range(Decimal("1e308"))
        assert double_in_range(Decimal("3e-308"))
        assert not double_in_range(Decimal("1e-308"))


class TestDecimalFinite:
    @pytest.mark.parametrize("special", ["NaN", "Infinity", "-Infinity"])
    def test_specials_rejected(self, special: str) -> None:
        assert not is_finite_decimal(Decimal(special))

    def test_finite(self) -> None:
        assert is_finite_decimal(Decimal("20.12"))


class TestParseIntegerText:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            ("-42", -42),
            ("+7", 7),
            ("  12  ", 12),
            ("18446744073709551616", 2**64),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_integer_text("integer", text) == expected

    @pytest.mark.parametrize("text", ["", "1.5", "1e3", "0x1F", "1_000", "abc", "٣"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(CoercionFailed) as exc_info:
            parse_integer_text("integer", text)
        assert exc_info.value.code == "COERCION_FAILED"
        assert exc_info.value.type_name == "integer"

    def test_longer_than_int_string_limit(self) -> None:
        assert parse_integer_text("integer", "1" * 5000) == (10**5000 - 1) // 9
        assert parse_integer_text("integer", "-" + "9" * 6000) == -(10**6000 - 1)


class TestParseDecimalText:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.5", Decimal("1.5")),
            ("-0.25", Decimal("-0.25")),
            (".5", Decimal("0.5")),
            ("5.", Decimal("5")),
            ("1.5e3", Decimal("1500")),
            ("2E-3", Decimal("0.002")),
        ],
    )
    def test_numbers(self, text: str, expected: Decimal) -> None:
        assert parse_decimal_text("decimal", text) == expected

    def test_precision_is_preserved(self) -> None:
        text = "3.14159265358979323846264338327950288419716939937510"
        assert str(parse_decimal_text("decimal", text)) == text

    @pytest.mark.parametrize("text", ["INF", "+INF", "inf", "Infinity"])
    def test_positive_infinity(self, text: str) -> None:
        assert parse_decimal_text("float", text) == Decimal("Infinity")

    def test_negative_infinity(self) -> None:
        assert parse_decimal_text("float", "-INF") == Decimal("-Infinity")

    def test_nan(self) -> None:
        assert parse_decimal_text("float", "NaN").is_nan()

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "1,5", "--1", "1_000.5"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(CoercionFailed):
            parse_decimal_text("decimal", text)


class TestDecimalFromFloat:
    def test_shortest_repr(self) -> None:
        assert decimal_from_float(0.1) == Decimal("0.1")

    def test_nan(self) -> None:
        assert decimal_from_float(float("nan")).is_nan()

    def test_infinity(self) -> None:
        assert decimal_from_float(float("-inf")) == Decimal("-Infinity")


class TestDisplay:
    def test_integer_text_has_every_digit(self) -> None:
        text = integer_text(-(10**5000))
        assert text == "-1" + "0" * 5000

    def test_short_number_summarises_long_ints(self) -> None:
        assert short_number(-(10**5000)) == "-1.000000E+5000"

    def test_short_number_keeps_small_values(self) -> None:
        assert short_number(2**64) == "18446744073709551616"
        assert short_number(Decimal("1E+99999999")) == "1E+99999999"
