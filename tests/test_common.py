"""Tests for the shared coercion helpers."""

import math
import sys
from datetime import date, datetime
from decimal import Decimal

from juscalc.calculators.common import (
    as_fraction,
    clamp_finite,
    days_between,
    elapsed_months,
    to_choice,
    to_date,
    to_integer,
    to_number,
)


class TestToNumber:
    """Permissive float parsing with fall-back defaults."""

    def test_plain_numbers(self):
        """Ints, floats and Decimals pass through as floats."""
        assert to_number(3000) == 3000.0
        assert to_number(12.5) == 12.5
        assert to_number(Decimal("99.90")) == 99.9

    def test_numeric_string(self):
        """Numeric strings are parsed."""
        assert to_number("3000") == 3000.0
        assert to_number(" 1.5 ") == 1.5
        assert to_number("-20") == -20.0

    def test_leading_prefix_wins(self):
        """Trailing garbage is ignored, like parseFloat."""
        assert to_number("12abc") == 12.0
        assert to_number("3.5 horas") == 3.5

    def test_brazilian_separators(self):
        """Comma decimals and dot thousands are accepted."""
        assert to_number("12,5") == 12.5
        assert to_number("1.234,56") == 1234.56

    def test_us_separators(self):
        """A trailing dot decimal makes commas thousands separators."""
        assert to_number("1,234.56") == 1234.56
        assert to_number("1,234,567.8") == 1234567.8

    def test_missing_and_garbage_use_default(self):
        """None, empty, text and booleans fall back to the default."""
        assert to_number(None) == 0.0
        assert to_number("") == 0.0
        assert to_number("abc") == 0.0
        assert to_number(True) == 0.0
        assert to_number([1, 2]) == 0.0
        assert to_number("abc", 220) == 220

    def test_zero_uses_default(self):
        """Zero is treated as missing, so the default applies."""
        assert to_number(0, 220) == 220
        assert to_number("0", 50) == 50

    def test_non_finite_uses_default(self):
        """NaN and infinities never leak out."""
        assert to_number(float("nan"), 1) == 1
        assert to_number(float("inf")) == 0.0
        assert to_number("Infinity") == 0.0
        assert to_number("1e999") == 0.0

    def test_beyond_float_range_uses_default(self):
        """Huge ints, digit strings and Decimals never raise."""
        assert to_number(10 ** 400, 5) == 5
        assert to_number(-(10 ** 400), 5) == 5
        assert to_number("1" + "0" * 400, 5) == 5
        assert to_number(Decimal("1e400"), 5) == 5
        assert to_number(Decimal("sNaN"), 5) == 5
        assert to_number(10 ** 300) == 1e300


class TestToInteger:
    """Permissive int parsing, like parseInt."""

    def test_truncates(self):
        """Floats and decimal strings truncate toward zero."""
        assert to_integer(12.7) == 12
        assert to_integer("12.7") == 12
        assert to_integer(-1.5) == -1

    def test_prefix(self):
        """Leading digits are used."""
        assert to_integer("30 meses") == 30

    def test_defaults(self):
        """Missing, garbage and zero fall back to the default."""
        assert to_integer(None) == 0
        assert to_integer("x", 1) == 1
        assert to_integer(0, 1) == 1
        assert to_integer(float("nan"), 1) == 1

    def test_beyond_float_range_uses_default(self):
        """Integers no float can hold fall back to the default."""
        assert to_integer(10 ** 400, 1) == 1
        assert to_integer("1" + "0" * 400, 1) == 1
        assert to_integer("9" * 5000, 1) == 1
        assert to_integer(Decimal("Infinity"), 1) == 1
        assert to_integer(float("inf"), 1) == 1
        assert to_integer(10 ** 300) == 10 ** 300


class TestClampFinite:
    """Saturation of out-of-range results."""

    def test_infinities_saturate(self):
        assert clamp_finite(math.inf) == sys.float_info.max
        assert clamp_finite(-math.inf) == -sys.float_info.max

    def test_nan_is_zero(self):
        assert clamp_finite(math.nan) == 0.0

    def test_finite_unchanged(self):
        assert clamp_finite(-12.5) == -12.5


class TestToDate:
    """Date coercion."""

    def test_date_passthrough(self):
        """Dates are returned unchanged."""
        assert to_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_datetime_truncated(self):
        """Datetimes lose their time of day."""
        assert to_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)

    def test_iso_strings(self):
        """ISO dates and datetimes are parsed."""
        assert to_date("2024-07-01") == date(2024, 7, 1)
        assert to_date("2024-07-01T10:00:00") == date(2024, 7, 1)

    def test_invalid(self):
        """Anything else becomes None."""
        assert to_date("") is None
        assert to_date("01/07/2024") is None
        assert to_date(20240701) is None
        assert to_date(None) is None


class TestToChoice:
    """Enumerated string coercion."""

    def test_valid_choice(self):
        """Known tags pass, case-insensitively."""
        assert to_choice("IPCA", ("ipca", "selic"), "ipca") == "ipca"
        assert to_choice("selic", ("ipca", "selic"), "ipca") == "selic"

    def test_alias(self):
        """Aliases map to their tag."""
        assert to_choice("indenizado", ("worked", "indemnified"), "worked",
                         {"indenizado": "indemnified"}) == "indemnified"

    def test_unknown_falls_back(self):
        """Unknown tags and non-strings use the default."""
        assert to_choice("cdi", ("ipca", "selic"), "ipca") == "ipca"
        assert to_choice(None, ("ipca",), "ipca") == "ipca"
        assert to_choice(3, ("ipca",), "ipca") == "ipca"


class TestDateArithmetic:
    """days_between and elapsed_months."""

    def test_days_between(self):
        """Signed whole days."""
        assert days_between("2024-01-01", "2024-07-01") == 182
        assert days_between("2024-07-01", "2024-01-01") == -182

    def test_days_between_missing(self):
        """A missing date counts as zero days."""
        assert days_between(None, "2024-01-01") == 0
        assert days_between("garbage", None) == 0

    def test_elapsed_months(self):
        """Thirty-day months, floored."""
        assert elapsed_months("2024-01-01", "2024-07-01") == 6
        assert elapsed_months("2023-01-01", "2024-01-01") == 12

    def test_elapsed_months_minimum_one(self):
        """Short, reversed and missing ranges count as one month."""
        assert elapsed_months("2024-01-01", "2024-01-10") == 1
        assert elapsed_months("2024-07-01", "2024-01-01") == 1
        assert elapsed_months(None, None) == 1

    def test_as_fraction(self):
        """Whole percentages become fractions."""
        assert as_fraction(50) == 0.5
        assert math.isclose(as_fraction(0.5), 0.005)
