"""Tests for numeric literal parsing."""

import numpy as np
import pytest

from sibylline_scan import DONE, Scanner, ScanConfig

# -----------------------------------------------------------------------
# Integers
# -----------------------------------------------------------------------


class TestCollectInt:
    def test_negative_with_separator(self):
        scanner = Scanner("-12_3abc")
        assert scanner.collect_int(10) == -123
        assert scanner.current() == "a"

    def test_default_radix(self):
        assert Scanner("42").collect_int() == 42

    def test_hex(self):
        assert Scanner("ff").collect_int(16) == 255
        assert Scanner("FF").collect_int(16) == 255

    def test_binary_stops_on_invalid_digit(self):
        scanner = Scanner("1012")
        assert scanner.collect_int(2) == 5
        assert scanner.current() == "2"

    def test_quote_separator(self):
        assert Scanner("1'000'000").collect_int() == 1_000_000

    def test_no_digits_returns_zero(self):
        scanner = Scanner("abc")
        assert scanner.collect_int() == 0
        assert scanner.index == 0

    def test_empty(self):
        assert Scanner("").collect_int() == 0

    def test_lone_sign_is_consumed(self):
        scanner = Scanner("-x")
        assert scanner.collect_int() == 0
        assert scanner.current() == "x"

    def test_wraps_at_32_bits(self):
        assert Scanner("2147483647").collect_int() == 2_147_483_647
        assert Scanner("2147483648").collect_int() == -2_147_483_648
        assert Scanner("-2147483648").collect_int() == -2_147_483_648
        assert Scanner("4294967296").collect_int() == 0

    def test_stops_at_decimal_point(self):
        scanner = Scanner("12.5")
        assert scanner.collect_int() == 12
        assert scanner.current() == "."


class TestCollectLong:
    def test_positive(self):
        scanner = Scanner("9_000_000_000;")
        assert scanner.collect_long() == 9_000_000_000
        assert scanner.current() == ";"

    def test_hex(self):
        assert Scanner("7fffffffffffffff").collect_long(16) == 2**63 - 1

    def test_wraps_at_64_bits(self):
        assert Scanner("9223372036854775808").collect_long() == -(2**63)

    def test_sign_is_not_consumed(self):
        # The sign is detected but not skipped, so the digit loop stops on it
        scanner = Scanner("-5")
        assert scanner.collect_long() == 0
        assert scanner.current() == "-"
        assert scanner.index == 0

    def test_sign_consumed_by_caller(self):
        scanner = Scanner("-5")
        scanner.next()
        assert scanner.collect_long() == 5


# -----------------------------------------------------------------------
# Reals
# -----------------------------------------------------------------------


class TestCollectFloat:
    def test_fraction(self):
        scanner = Scanner("3.14xyz")
        assert scanner.collect_float() == pytest.approx(3.14, rel=1e-6)
        assert scanner.current() == "x"

    def test_negative(self):
        assert Scanner("-2.5").collect_float() == pytest.approx(-2.5)

    def test_integer_only(self):
        scanner = Scanner("7 ")
        assert scanner.collect_float() == 7.0
        assert scanner.current() == " "

    def test_trailing_point(self):
        scanner = Scanner("7.")
        assert scanner.collect_float() == 7.0
        assert scanner.current() is DONE

    def test_separators_in_fraction(self):
        assert Scanner("0.1_5").collect_float() == pytest.approx(0.15, rel=1e-6)

    def test_single_precision(self):
        assert Scanner("0.1").collect_float() == float(np.float32(0.1))

    def test_returns_python_float(self):
        assert type(Scanner("1.5").collect_float()) is float

    def test_malformed_returns_zero(self):
        assert Scanner("abc").collect_float() == 0.0
        assert Scanner("").collect_float() == 0.0


class TestCollectDouble:
    def test_fraction(self):
        scanner = Scanner("1_000.25]")
        assert scanner.collect_double() == pytest.approx(1000.25)
        assert scanner.current() == "]"

    def test_negative(self):
        assert Scanner("-0.5").collect_double() == pytest.approx(-0.5)

    def test_double_precision(self):
        assert Scanner("0.1").collect_double() == 0.1

    def test_large_integer_part(self):
        assert Scanner("123456789012.5").collect_double() == pytest.approx(123456789012.5)

    def test_returns_python_float(self):
        assert type(Scanner("2").collect_double()) is float


# -----------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------


class TestNumericConfig:
    def test_custom_separator_and_decimal_point(self, european_config):
        scanner = Scanner("1 234,5;", config=european_config)
        assert scanner.collect_double() == pytest.approx(1234.5)
        assert scanner.current() == ";"

    def test_underscore_not_a_separator_when_overridden(self, european_config):
        scanner = Scanner("1_2", config=european_config)
        assert scanner.collect_int() == 1
        assert scanner.current() == "_"

    def test_custom_sign(self):
        config = ScanConfig(negative_sign="~")
        assert Scanner("~42", config=config).collect_int() == -42
        assert Scanner("-42", config=config).collect_int() == 0
