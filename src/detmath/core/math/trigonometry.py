"""
Trigonometric Engine — sin/cos по таблице

Угол задаётся в десятых долях градуса (u32) и приводится по модулю 3600.
Таблица хранит sin для целых градусов 0..90, умноженный на 10000; на
выходе значение делится на 100 (fixed-point с двумя знаками, [-100, 100]).

Симметрии:
- квадранты 1 и 3 читают таблицу в обратном порядке (зеркало относительно 90°/270°)
- квадранты 2 и 3 меняют знак
- cos(a) = sin(a + 900)

Разрешение ниже 1° не интерполируется: используется только offset / 10.
"""

from typing import Final

from detmath.core.math.saturating import trunc_div, wrapping_add_u32

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Полный оборот в десятых долях градуса
FULL_TURN: Final[int] = 3600

# Четверть оборота
QUARTER_TURN: Final[int] = 900

# Десятых долей в одном градусе
TENTHS_PER_DEGREE: Final[int] = 10

# Масштаб табличных значений относительно выходного fixed-point
TABLE_TO_OUTPUT_DIVISOR: Final[int] = 100

# sin(deg) * 10000, deg = 0..90
SINE_TABLE: Final[tuple[int, ...]] = (
    0, 175, 349, 523, 698, 872, 1045, 1219, 1392, 1564, 1736, 1908, 2079, 2250,
    2419, 2588, 2756, 2924, 3090, 3256, 3420, 3584, 3746, 3907, 4067, 4226, 4384,
    4540, 4695, 4848, 5000, 5150, 5299, 5446, 5592, 5736, 5878, 6018, 6157, 6293,
    6428, 6561, 6691, 6820, 6947, 7071, 7193, 7314, 7431, 7547, 7660, 7771, 7880,
    7986, 8090, 8192, 8290, 8387, 8480, 8572, 8660, 8746, 8829, 8910, 8988, 9063,
    9135, 9205, 9272, 9336, 9397, 9455, 9511, 9563, 9613, 9659, 9703, 9744, 9781,
    9816, 9848, 9877, 9903, 9925, 9945, 9962, 9976, 9986, 9994, 9998, 10000,
)

_MAX_DEGREE: Final[int] = len(SINE_TABLE) - 1


# =============================================================================
# SIN / COS
# =============================================================================


def sin(angle_tenths: int) -> int:
    """
    Fixed-point синус.

    Args:
        angle_tenths: Угол в десятых долях градуса (u32)

    Returns:
        sin * 100, усечённый к нулю

    Examples:
        >>> sin(300)  # 30°
        50
        >>> sin(900)  # 90°
        100
        >>> sin(2100)  # 210°
        -50
        >>> sin(3600 + 300)  # полный оборот игнорируется
        50
    """
    angle = angle_tenths % FULL_TURN
    quadrant = angle // QUARTER_TURN
    degree = (angle % QUARTER_TURN) // TENTHS_PER_DEGREE

    if quadrant in (1, 3):
        degree = _MAX_DEGREE - degree

    value = SINE_TABLE[degree]
    if quadrant >= 2:
        value = -value

    return trunc_div(value, TABLE_TO_OUTPUT_DIVISOR)


def cos(angle_tenths: int) -> int:
    """
    Fixed-point косинус через фазовый сдвиг на 90°.

    Сдвиг выполняется оборачивающим сложением u32, как и сам домен угла.

    Examples:
        >>> cos(0)
        100
        >>> cos(600)  # 60°
        50
        >>> cos(900)
        0
    """
    return sin(wrapping_add_u32(angle_tenths, QUARTER_TURN))
