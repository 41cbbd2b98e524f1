"""
Trig — Приближённые sin/cos в Q16.16

Ряд Тейлора 4-го порядка после приведения угла к [-PI, PI]:
    cos(x) ≈ 1 - x²/2! + x⁴/4!
    sin(x) = cos(x - PI/2)

Угол задаётся в Q16.16 радианах (FP_ONE = 1 радиан).
Все вычисления через multiply/divide ядра, float не используется.

Точность максимальна около нуля и падает к краям диапазона
(у cos(±PI) ошибка порядка 0.12). Для поворотов на малые углы за тик
этого достаточно; для точной геометрии нужна таблица.
"""

from typing import Final

from q16.core.math.fixed_ops import fixed_add, fixed_sub
from q16.core.math.fixed_point import FP_ONE, divide, multiply

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# from_float(3.14159265)
FP_PI: Final[int] = 205887

# multiply(FP_PI, from_int(2))
FP_TWO_PI: Final[int] = 411774

# from_float(1.5707963)
FP_HALF_PI: Final[int] = 102943

_FP_TWO: Final[int] = 2 * FP_ONE
_FP_TWENTY_FOUR: Final[int] = 24 * FP_ONE


def _reduce_angle(angle: int) -> int:
    while angle > FP_PI:
        angle = fixed_sub(angle, FP_TWO_PI)
    while angle < -FP_PI:
        angle = fixed_add(angle, FP_TWO_PI)
    return angle


def fixed_cos(angle: int) -> int:
    """
    Приближённый косинус.

    Args:
        angle: Угол в радианах (Q16.16)

    Returns:
        cos(angle) в Q16.16

    Examples:
        >>> fixed_cos(0)
        65536
        >>> fixed_cos(65536)  # cos(1.0) ≈ 0.5417 (точно: 0.5403)
        35498
    """
    x = _reduce_angle(angle)

    x2 = multiply(x, x)
    x4 = multiply(x2, x2)

    term1 = divide(x2, _FP_TWO)
    term2 = divide(x4, _FP_TWENTY_FOUR)

    return fixed_sub(fixed_add(FP_ONE, term2), term1)


def fixed_sin(angle: int) -> int:
    """Приближённый синус через сдвиг косинуса на PI/2."""
    return fixed_cos(fixed_sub(angle, FP_HALF_PI))
