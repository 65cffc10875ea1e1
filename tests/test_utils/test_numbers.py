"""Tests for decimal formatting helpers."""

from decimal import Decimal, localcontext

import pytest

from shapereport.utils.numbers import PI, SQRT3, format_decimal, to_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal(25), "25"),
        (Decimal("25.00"), "25"),
        (Decimal("51.60"), "51.6"),
        (Decimal("13.00819"), "13.01"),
        (Decimal("91.64877"), "91.65"),
        (Decimal("2.675"), "2.68"),
        (Decimal("-2.675"), "-2.68"),
        (Decimal("100"), "100"),
        (Decimal("12345.5"), "12345.5"),
        (Decimal("0.5"), "0.5"),
        (Decimal("0.004"), "0"),
        (Decimal("-0.004"), "0"),
    ],
)
def test_format_decimal(value, expected):
    assert format_decimal(value) == expected


def test_format_decimal_comma_separator():
    assert format_decimal(Decimal("97.664"), ",") == "97,66"
    assert format_decimal(Decimal("20"), ",") == "20"


def test_to_decimal_uses_shortest_repr():
    assert to_decimal(2.75) == Decimal("2.75")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(5) == 5


def test_constants():
    assert str(PI).startswith("3.14159265358979")
    assert (SQRT3 * SQRT3).quantize(Decimal("1e-20")) == 3


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal(10**26), "100000000000000000000000000"),
        (Decimal("123456789012345678901234567.125"), "123456789012345678901234567.13"),
        (Decimal("10000000000000000000000000000000000000000.5"), "10000000000000000000000000000000000000000.5"),
    ],
)
def test_format_decimal_large_magnitudes(value, expected):
    assert format_decimal(value) == expected


def test_format_decimal_ignores_caller_context():
    with localcontext() as ctx:
        ctx.prec = 5
        assert format_decimal(Decimal("123456.785")) == "123456.79"


def test_format_decimal_below_one_keeps_leading_zero():
    assert format_decimal(Decimal("0.5"), ",") == "0,5"
    assert format_decimal(Decimal("0.001"), ",") == "0"
