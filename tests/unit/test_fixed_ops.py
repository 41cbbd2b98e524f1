"""
Тесты для модулей Fixed Ops и Trig

Проверяет:
1. Сложение/вычитание с заворачиванием
2. floor/ceil/round в Q16.16
3. abs/min/max/clamp
4. lerp и целочисленный isqrt
5. Приближённые sin/cos
"""

import math

import pytest

from q16.core.domain.conversions import from_float, from_int, to_float
from q16.core.math.fixed_ops import (
    fixed_abs,
    fixed_add,
    fixed_ceil,
    fixed_clamp,
    fixed_floor,
    fixed_lerp,
    fixed_max,
    fixed_min,
    fixed_round,
    fixed_sub,
    isqrt,
)
from q16.core.math.fixed_point import FP_HALF, FP_MAX, FP_MIN, FP_ONE, multiply
from q16.core.math.trig import FP_HALF_PI, FP_PI, FP_TWO_PI, fixed_cos, fixed_sin


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


class TestAddSub:
    """Тесты для fixed_add / fixed_sub"""

    def test_add_integers(self) -> None:
        """3.0 + 5.0 = 8.0"""
        assert fixed_add(from_int(3), from_int(5)) == from_int(8)

    def test_add_fractions(self) -> None:
        """1.5 + 2.5 = 4.0"""
        assert fixed_add(from_float(1.5), from_float(2.5)) == from_int(4)

    def test_sub_to_negative(self) -> None:
        """3.0 - 10.0 = -7.0"""
        assert fixed_sub(from_int(3), from_int(10)) == from_int(-7)

    def test_sub_fractions(self) -> None:
        """5.5 - 2.25 = 3.25"""
        assert to_float(fixed_sub(from_float(5.5), from_float(2.25))) == 3.25

    def test_overflow_wraps(self) -> None:
        """MAX + 1 → MIN, MIN - 1 → MAX"""
        assert fixed_add(FP_MAX, 1) == FP_MIN
        assert fixed_sub(FP_MIN, 1) == FP_MAX


# =============================================================================
# ОКРУГЛЕНИЯ
# =============================================================================


class TestRounding:
    """Тесты для fixed_floor / fixed_ceil / fixed_round"""

    def test_floor(self) -> None:
        """floor(1.5) = 1.0, floor(-1.5) = -2.0"""
        assert fixed_floor(from_float(1.5)) == from_int(1)
        assert fixed_floor(from_float(-1.5)) == from_int(-2)
        assert fixed_floor(from_int(7)) == from_int(7)
        assert fixed_floor(-1) == -FP_ONE

    def test_ceil(self) -> None:
        """ceil(1.25) = 2.0, ceil(-1.5) = -1.0"""
        assert fixed_ceil(from_float(1.25)) == from_int(2)
        assert fixed_ceil(from_float(-1.5)) == from_int(-1)
        assert fixed_ceil(from_int(7)) == from_int(7)
        assert fixed_ceil(1) == FP_ONE

    def test_ceil_above_max_integer_wraps(self) -> None:
        """ceil(32767.x) = 32768.0 не помещается в i32 → MIN"""
        assert fixed_ceil(FP_MAX) == FP_MIN

    def test_round_half_up(self) -> None:
        """round(0.5) = 1.0, round(-0.5) = 0.0, round(2.4) = 2.0"""
        assert fixed_round(FP_HALF) == FP_ONE
        assert fixed_round(-FP_HALF) == 0
        assert fixed_round(from_float(2.4)) == from_int(2)
        assert fixed_round(from_float(-2.6)) == from_int(-3)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


class TestComparisons:
    """Тесты для fixed_abs / fixed_min / fixed_max / fixed_clamp"""

    def test_abs(self) -> None:
        """abs сохраняет положительные и инвертирует отрицательные"""
        assert fixed_abs(from_int(5)) == from_int(5)
        assert fixed_abs(from_int(-5)) == from_int(5)
        assert fixed_abs(0) == 0

    def test_abs_of_min_wraps(self) -> None:
        """abs(MIN) не представим в i32 → MIN"""
        assert fixed_abs(FP_MIN) == FP_MIN

    def test_min_max(self) -> None:
        """min/max двух значений"""
        assert fixed_min(from_int(3), from_int(-2)) == from_int(-2)
        assert fixed_max(from_int(3), from_int(-2)) == from_int(3)
        assert fixed_min(FP_MIN, FP_MAX) == FP_MIN
        assert fixed_max(FP_MIN, FP_MAX) == FP_MAX

    def test_clamp(self) -> None:
        """Значение ограничено диапазоном"""
        lo, hi = from_int(0), from_int(10)
        assert fixed_clamp(from_int(5), lo, hi) == from_int(5)
        assert fixed_clamp(from_int(-1), lo, hi) == lo
        assert fixed_clamp(from_int(15), lo, hi) == hi
        assert fixed_clamp(lo, lo, hi) == lo
        assert fixed_clamp(hi, lo, hi) == hi


# =============================================================================
# ИНТЕРПОЛЯЦИЯ И ЦЕЛОЧИСЛЕННЫЙ КОРЕНЬ
# =============================================================================


class TestLerp:
    """Тесты для fixed_lerp"""

    def test_endpoints(self) -> None:
        """t = 0 → a, t = 1 → b"""
        a, b = from_int(10), from_int(20)
        assert fixed_lerp(a, b, 0) == a
        assert fixed_lerp(a, b, FP_ONE) == b

    def test_midpoint(self) -> None:
        """t = 0.5 → середина"""
        assert fixed_lerp(from_int(10), from_int(20), FP_HALF) == from_int(15)

    def test_descending(self) -> None:
        """b < a"""
        assert fixed_lerp(from_int(20), from_int(10), from_float(0.25)) == from_float(17.5)

    def test_matches_definition(self) -> None:
        """lerp(a, b, t) == a + (b - a) * t"""
        a, b, t = from_float(-3.75), from_float(8.125), from_float(0.3)
        assert fixed_lerp(a, b, t) == fixed_add(a, multiply(fixed_sub(b, a), t))


class TestIsqrt:
    """Тесты для isqrt (целые числа, не Q16.16)"""

    def test_small_values(self) -> None:
        """isqrt(0) = 0, isqrt(1) = 1"""
        assert isqrt(0) == 0
        assert isqrt(1) == 1

    def test_negative_returns_zero(self) -> None:
        """Отрицательный вход → 0"""
        assert isqrt(-1) == 0
        assert isqrt(FP_MIN) == 0

    def test_matches_math_isqrt(self) -> None:
        """Совпадает с math.isqrt"""
        for n in [2, 3, 4, 15, 16, 17, 99, 100, 101, 65535, 65536, FP_MAX]:
            assert isqrt(n) == math.isqrt(n)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


class TestTrig:
    """Тесты для fixed_cos / fixed_sin"""

    def test_constants_match_conversions(self) -> None:
        """Константы совпадают с конверсией из float"""
        assert FP_PI == from_float(3.14159265)
        assert FP_HALF_PI == from_float(1.5707963)
        assert FP_TWO_PI == multiply(FP_PI, from_int(2))

    def test_cos_zero(self) -> None:
        """cos(0) = 1.0 точно"""
        assert fixed_cos(0) == FP_ONE

    def test_sin_half_pi(self) -> None:
        """sin(PI/2) = cos(0) = 1.0 точно"""
        assert fixed_sin(FP_HALF_PI) == FP_ONE

    def test_cos_one_radian(self) -> None:
        """cos(1.0) по ряду 4-го порядка: 1 - 0.5 + 1/24"""
        assert fixed_cos(FP_ONE) == 35498
        assert to_float(fixed_cos(FP_ONE)) == pytest.approx(math.cos(1.0), abs=2e-3)

    def test_cos_is_even(self) -> None:
        """cos(-x) == cos(x)"""
        for angle in (from_float(0.3), FP_ONE, from_float(2.5)):
            assert fixed_cos(-angle) == fixed_cos(angle)

    def test_cos_periodic(self) -> None:
        """Угол приводится к [-PI, PI]"""
        assert fixed_cos(fixed_add(FP_ONE, 2 * FP_TWO_PI)) == fixed_cos(FP_ONE)
        assert fixed_cos(fixed_sub(FP_ONE, 3 * FP_TWO_PI)) == fixed_cos(FP_ONE)

    def test_accuracy_near_zero(self) -> None:
        """Около нуля погрешность мала"""
        for value in (-0.5, -0.2, 0.1, 0.5):
            angle = from_float(value)
            assert to_float(fixed_cos(angle)) == pytest.approx(math.cos(value), abs=2e-3)
            assert to_float(fixed_sin(fixed_add(angle, FP_HALF_PI))) == pytest.approx(
                math.cos(value), abs=2e-3
            )
