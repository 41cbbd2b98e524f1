"""
Conversions — Конверсия вещественных чисел в Q16.16 и обратно

Слой вызывающего кода: единственное место, где допускается float.
Ядро (q16.core.math) принимает и возвращает только сырые i32.

ЗАПРЕЩЕНО кодировать значения вручную (x * 65536) в обход этого модуля:
усечение и заворачивание должны совпадать на всех платформах.
"""

import math

from q16.core.math.fixed_point import FP_MAX, FP_MIN, FP_ONE, FP_SHIFT, to_i32


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


def from_int(n: int) -> int:
    """
    Конверсия: целое → Q16.16

    Args:
        n: Целое число (ожидается в диапазоне -32768..32767)

    Returns:
        n << 16, суженное до i32 (вне диапазона заворачивается)

    Examples:
        >>> from_int(5)
        327680
        >>> from_int(-1)
        -65536
    """
    return to_i32(n << FP_SHIFT)


def from_float(value: float) -> int:
    """
    Конверсия: float → Q16.16

    Усечение к нулю (не округление), затем сужение до i32.
    NaN/Inf → 0, так что невалидный float не пропагирует в симуляцию.

    Args:
        value: Вещественное значение

    Returns:
        Значение в Q16.16

    Examples:
        >>> from_float(0.5)
        32768
        >>> from_float(0.001)  # 65.536 → 65
        65
        >>> from_float(-0.001)  # -65.536 → -65
        -65
        >>> from_float(float("nan"))
        0
    """
    if not math.isfinite(value):
        return 0
    return to_i32(int(value * FP_ONE))


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def to_int(fp: int) -> int:
    """
    Конверсия: Q16.16 → целое

    Арифметический сдвиг, т.е. округление к минус бесконечности:
    to_int(from_float(-5.3)) == -6.
    """
    return fp >> FP_SHIFT


def to_float(fp: int) -> float:
    """
    Конверсия: Q16.16 → float

    Точная: любое i32 / 2^16 представимо в double.
    """
    return fp / FP_ONE


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_fixed(value: object) -> bool:
    """
    Проверка, является ли значение корректным сырым Q16.16 (int в диапазоне i32).

    bool не считается Q16.16, хотя и является подклассом int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return FP_MIN <= value <= FP_MAX


def validate_fixed(value: object, name: str) -> None:
    """
    Валидация сырого Q16.16 значения на границе вызывающего слоя.

    Ядро не валидирует аргументы (горячий цикл симуляции);
    эту проверку выполняет код, принимающий данные извне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или вне диапазона i32
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if not FP_MIN <= value <= FP_MAX:
        raise ValueError(f"{name} must be within [{FP_MIN}, {FP_MAX}], got {value}")
