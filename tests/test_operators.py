"""Operators 数值语义测试"""
import math

import pytest

from core import Operators, AngleMode, InvalidFactorialError, ErrorKind


def test_basic_arithmetic():
    assert Operators.add(2, 3) == 5
    assert Operators.sub(2, 3) == -1
    assert Operators.mul(4, 2.5) == 10
    assert Operators.div(7, 2) == 3.5
    assert Operators.pow(2, 10) == 1024


def test_division_follows_ieee():
    assert Operators.div(1, 0) == math.inf
    assert Operators.div(-1, 0) == -math.inf
    assert math.isnan(Operators.div(0, 0))


def test_power_edge_cases():
    assert Operators.pow(10, 400) == math.inf
    assert math.isnan(Operators.pow(-8, 1 / 3))
    assert Operators.pow(0, -1) == math.inf


def test_trig_in_degrees_and_radians():
    assert Operators.sin(90, AngleMode.DEGREES) == pytest.approx(1.0)
    assert Operators.cos(60, AngleMode.DEGREES) == pytest.approx(0.5)
    assert Operators.tan(45, 'deg') == pytest.approx(1.0)
    assert Operators.sin(math.pi / 2, AngleMode.RADIANS) == pytest.approx(1.0)
    assert Operators.cos(0, 'rad') == 1.0


def test_logs_roots_and_abs():
    assert Operators.log(1000) == pytest.approx(3.0)
    assert Operators.ln(math.e) == pytest.approx(1.0)
    assert Operators.log(0) == -math.inf
    assert math.isnan(Operators.ln(-1))
    assert Operators.sqrt(16) == 4
    assert math.isnan(Operators.sqrt(-1))
    assert Operators.abs(-3.5) == 3.5


@pytest.mark.parametrize("arg,expected", [
    (0, 1), (1, 1), (5, 120), (10, 3628800),
    (5.9, 120),   # 向零截断
    (-0.5, 1),    # 截断为 0
])
def test_factorial(arg, expected):
    assert Operators.fact(arg) == expected


def test_factorial_of_negative_fails():
    with pytest.raises(InvalidFactorialError) as exc_info:
        Operators.fact(-1)
    assert exc_info.value.kind == ErrorKind.INVALID_FACTORIAL
    with pytest.raises(InvalidFactorialError):
        Operators.fact(-math.inf)


def test_factorial_overflows_to_infinity():
    assert math.isfinite(Operators.fact(170))
    assert Operators.fact(171) == math.inf
    assert Operators.fact(1e15) == math.inf
    assert Operators.fact(math.inf) == math.inf
    assert math.isnan(Operators.fact(math.nan))
