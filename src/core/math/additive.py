"""
Additive — Сложение и вычитание BigInteger

Вся знаковая логика собрана в add(): subtract(a, b) определён как
add(a, negate(b)), поэтому разбор случаев знак/магнитуда существует
в одном месте.

Алгоритм add():
- Знаки совпадают → сложение магнитуд с переносом, общий знак
- Знаки различны → из большей магнитуды вычитается меньшая,
  знак берётся у операнда с большей магнитудой; равные магнитуды дают ноль
"""

from src.core.domain.big_integer import ONE, ZERO, BigInteger
from src.core.math.digits import add_digits, compare_digits, subtract_digits

# =============================================================================
# МАГНИТУДНЫЕ ОПЕРАЦИИ
# =============================================================================


def magnitude_add(a: BigInteger, b: BigInteger) -> BigInteger:
    """|a| + |b| (результат неотрицательный)."""
    return BigInteger.from_digits(add_digits(a.digits, b.digits))


def magnitude_subtract(larger: BigInteger, smaller: BigInteger) -> BigInteger:
    """
    |larger| - |smaller| с заёмом.

    Операнды должны быть упорядочены вызывающим кодом через
    compare_magnitude; функция никогда не переставляет их сама.

    Args:
        larger: Операнд с большей или равной магнитудой
        smaller: Операнд с меньшей или равной магнитудой

    Returns:
        Неотрицательная разность магнитуд (ноль → положительный ноль)

    Raises:
        ValueError: Если |larger| < |smaller|
    """
    return BigInteger.from_digits(subtract_digits(larger.digits, smaller.digits))


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Знаковое сложение.

    Examples:
        >>> add(parse_big_integer("123"), parse_big_integer("-23"))
        BigInteger(digits=(0, 0, 1), sign=<Sign.POSITIVE: 'positive'>)
    """
    if a.sign == b.sign:
        return BigInteger.from_digits(add_digits(a.digits, b.digits), a.sign)

    order = compare_digits(a.digits, b.digits)
    if order == 0:
        return ZERO
    if order > 0:
        return BigInteger.from_digits(subtract_digits(a.digits, b.digits), a.sign)
    return BigInteger.from_digits(subtract_digits(b.digits, a.digits), b.sign)


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """Знаковое вычитание: a - b = add(a, -b)."""
    return add(a, b.negate())


def increment(value: BigInteger) -> BigInteger:
    """value + 1."""
    return add(value, ONE)
