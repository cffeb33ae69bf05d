"""结果格式化测试"""
import math

import pytest

from core import format_number


@pytest.mark.parametrize("value,expected", [
    (2.0, "2"),
    (2.5, "2.5"),
    (-2.5, "-2.5"),
    (0.0, "0"),
    (-0.0, "0"),
    (120, "120"),
    (999999999999, "999999999999"),
    (0.1 + 0.2, "0.3"),
    (1 / 3, "0.3333333333"),
    (2 / 3, "0.6666666667"),
    (2.00000000001, "2"),
    (123456.789, "123456.789"),
    (1e-6, "0.000001"),
])
def test_plain_notation(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value,expected", [
    (1000000000000, "1.00000000e+12"),
    (-1e13, "-1.00000000e+13"),
    (1e-7, "1.00000000e-7"),
    (1.5e-7, "1.50000000e-7"),
    (123456789012345, "1.23456789e+14"),
])
def test_exponential_notation(value, expected):
    assert format_number(value) == expected


def test_infinity_drops_sign():
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "Infinity"


def test_nan():
    assert format_number(math.nan) == "NaN"


def test_thresholds_can_be_overridden():
    assert format_number(5000, exponent_upper=1000) == "5.00000000e+3"
    assert format_number(1 / 3, fixed_digits=3) == "0.333"
