"""
Fixed Ops — Скалярные операции над Q16.16

Сложение, вычитание, округления, сравнения и интерполяция.
Каждая операция сужает результат до i32 один раз (to_i32), как и ядро.
"""

from q16.core.math.fixed_point import (
    FP_FRACTION_MASK,
    FP_HALF,
    multiply,
    to_i32,
)

_INTEGER_MASK = ~FP_FRACTION_MASK


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def fixed_add(a: int, b: int) -> int:
    """Сумма двух Q16.16 значений (с заворачиванием)."""
    return to_i32(a + b)


def fixed_sub(a: int, b: int) -> int:
    """Разность a - b (с заворачиванием)."""
    return to_i32(a - b)


# =============================================================================
# ОКРУГЛЕНИЯ
# =============================================================================


def fixed_floor(fp: int) -> int:
    """
    Округление вниз до целого (результат в Q16.16).

    Examples:
        >>> fixed_floor(98304)  # 1.5
        65536
        >>> fixed_floor(-98304)  # -1.5
        -131072
    """
    return to_i32(fp & _INTEGER_MASK)


def fixed_ceil(fp: int) -> int:
    """
    Округление вверх до целого (результат в Q16.16).

    Для значений выше 32767.0 результат заворачивается в FP_MIN.
    """
    return to_i32((fp + FP_FRACTION_MASK) & _INTEGER_MASK)


def fixed_round(fp: int) -> int:
    """
    Округление до ближайшего целого, половина вверх (к плюс бесконечности).

    Examples:
        >>> fixed_round(32768)  # 0.5
        65536
        >>> fixed_round(-32768)  # -0.5
        0
    """
    return to_i32((fp + FP_HALF) & _INTEGER_MASK)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def fixed_abs(fp: int) -> int:
    """
    Модуль значения.

    FP_MIN не имеет положительной пары в i32 и остаётся FP_MIN.
    """
    return to_i32(-fp if fp < 0 else fp)


def fixed_min(a: int, b: int) -> int:
    return a if a < b else b


def fixed_max(a: int, b: int) -> int:
    return a if a > b else b


def fixed_clamp(value: int, min_value: int, max_value: int) -> int:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Нижняя граница проверяется первой; при min_value > max_value
    возвращается min_value для значений ниже него.
    """
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


# =============================================================================
# ИНТЕРПОЛЯЦИЯ И ЦЕЛОЧИСЛЕННЫЙ КОРЕНЬ
# =============================================================================


def fixed_lerp(a: int, b: int, t: int) -> int:
    """
    Линейная интерполяция a + (b - a) * t.

    Args:
        a: Начало (Q16.16)
        b: Конец (Q16.16)
        t: Параметр в диапазоне [0, FP_ONE]

    Returns:
        Интерполированное значение (Q16.16)
    """
    return fixed_add(a, multiply(fixed_sub(b, a), t))


def isqrt(n: int) -> int:
    """
    Целочисленный квадратный корень (НЕ Q16.16): floor(sqrt(n)).

    n < 0 → 0

    Examples:
        >>> isqrt(16)
        4
        >>> isqrt(17)
        4
        >>> isqrt(-4)
        0
    """
    if n < 0:
        return 0
    if n < 2:
        return n

    x = n
    y = (x + 1) >> 1

    while y < x:
        x = y
        y = (x + n // x) >> 1

    return x
