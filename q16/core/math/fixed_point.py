"""
Fixed Point — Детерминированная арифметика Q16.16

Формат Q16.16: знаковое 32-битное целое, младшие 16 бит содержат дробную часть,
старшие 16 бит (со знаком) содержат целую часть. 1.0 хранится как 65536.

- Диапазон: -32768.0 .. 32767.99998
- Шаг (ULP): 1/65536 ≈ 0.0000153

Модуль реализует ядро: умножение, деление и квадратный корень с
64-битным промежуточным значением и единственным моментом усечения до i32.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float не участвует ни в одном вычислении (битовая идентичность на всех платформах)
2. Сужение до 32 бит выполняется ровно один раз, в конце операции (to_i32)
3. Переполнение не является ошибкой: результат заворачивается (two's complement)
4. Ни одна операция не бросает исключений; краевые случаи возвращают sentinel
5. Все функции чистые и реентерабельные

Python int не ограничен по разрядности, поэтому "расширение до 64 бит"
происходит неявно: произведение двух i32 и сдвиг i32 << 16 заведомо
помещаются в i64, и никакое промежуточное значение не усекается раньше времени.
"""

from typing import Final

# =============================================================================
# ФОРМАТ Q16.16
# =============================================================================

# Количество дробных бит
FP_SHIFT: Final[int] = 16

# 1.0 в Q16.16
FP_ONE: Final[int] = 1 << FP_SHIFT

# 0.5 в Q16.16
FP_HALF: Final[int] = 1 << (FP_SHIFT - 1)

# Границы i32
FP_MAX: Final[int] = 0x7FFFFFFF
FP_MIN: Final[int] = -0x80000000

# Маска дробной части
FP_FRACTION_MASK: Final[int] = FP_ONE - 1

# Порог "почти нуля" для расстояний (~0.001)
FP_EPSILON: Final[int] = 65

# Масштаб результата isqrt: sqrt(2^16) = 2^8
_SQRT_RESCALE_SHIFT: Final[int] = FP_SHIFT // 2

_U32_MASK: Final[int] = 0xFFFFFFFF
_I32_SIGN: Final[int] = 0x80000000


# =============================================================================
# СУЖЕНИЕ ДО I32
# =============================================================================


def to_i32(value: int) -> int:
    """
    Сужение целого до знакового 32-битного (two's complement).

    Отбрасывает старшие биты без насыщения и без округления.
    Это единственный допустимый момент усечения во всех операциях.

    Examples:
        >>> to_i32(0x7FFFFFFF)
        2147483647
        >>> to_i32(0x80000000)
        -2147483648
        >>> to_i32(1 << 32)
        0
        >>> to_i32(-1)
        -1
    """
    return ((value + _I32_SIGN) & _U32_MASK) - _I32_SIGN


def _trunc_div(numerator: int, denominator: int) -> int:
    """Целочисленное деление с округлением к нулю (семантика i64 / i64)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(a: int, b: int) -> int:
    """
    Произведение двух Q16.16 значений.

    Алгоритм:
        (a64 * b64) >> 16  →  to_i32

    Сдвиг арифметический (к минус бесконечности), поэтому
    multiply(-1, 1) == -1, а не 0.

    Args:
        a: Первый множитель (Q16.16)
        b: Второй множитель (Q16.16)

    Returns:
        Произведение (Q16.16). При переполнении результат заворачивается.

    Examples:
        >>> multiply(65536, 65536)  # 1.0 * 1.0
        65536
        >>> multiply(98304, 65536)  # 1.5 * 1.0
        98304
        >>> multiply(32768, 32768)  # 0.5 * 0.5
        16384
    """
    return to_i32((a * b) >> FP_SHIFT)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(a: int, b: int) -> int:
    """
    Частное двух Q16.16 значений.

    Политика деления на ноль (sentinel, не ошибка):
        b == 0 и a >= 0  →  FP_MAX
        b == 0 и a < 0   →  FP_MIN

    Алгоритм (b != 0):
        (a64 << 16) / b64  (округление к нулю)  →  to_i32

    ВАЖНО: деление округляет к нулю, как целочисленное деление i64,
    а не к минус бесконечности, как оператор // в Python.

    Args:
        a: Делимое (Q16.16)
        b: Делитель (Q16.16)

    Returns:
        Частное (Q16.16). При переполнении результат заворачивается.

    Examples:
        >>> divide(65536, 131072)  # 1.0 / 2.0
        32768
        >>> divide(-65536, 196608)  # -1.0 / 3.0
        -21845
        >>> divide(5, 0)
        2147483647
        >>> divide(-5, 0)
        -2147483648
    """
    if b == 0:
        return FP_MAX if a >= 0 else FP_MIN

    return to_i32(_trunc_div(a << FP_SHIFT, b))


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def fixed_sqrt(fp: int) -> int:
    """
    Квадратный корень Q16.16 значения.

    fp <= 0 → 0 (ноль и отрицательные значения обрабатываются одинаково).

    Алгоритм:
        1. Целочисленный корень сырого значения методом Ньютона:
           x = fp, y = (x + 1) >> 1; пока y < x: x = y, y = (x + fp / x) >> 1
        2. isqrt(raw) имеет масштаб 2^8 вместо 2^16, поэтому x << 8
        3. to_i32

    Итерация монотонно не возрастает по x и завершается за O(log fp) шагов.

    Args:
        fp: Значение (Q16.16)

    Returns:
        Корень (Q16.16)

    Examples:
        >>> fixed_sqrt(262144)  # sqrt(4.0)
        131072
        >>> fixed_sqrt(65536)  # sqrt(1.0)
        65536
        >>> fixed_sqrt(-65536)
        0
    """
    if fp <= 0:
        return 0

    x = fp
    y = (x + 1) >> 1

    while y < x:
        x = y
        y = (x + fp // x) >> 1

    return to_i32(x << _SQRT_RESCALE_SHIFT)
