"""
Shifts — Десятичные сдвиги

Десятичные аналоги битового сдвига: влево = x10, вправо = //10 по магнитуде.
Знак сохраняется, ноль нормализуется в положительный.
Стоимость пропорциональна длине числа.
"""

from src.core.domain.big_integer import BigInteger
from src.core.math.digits import shift_digits_left, shift_digits_right


def shift_left(value: BigInteger, n: int = 1) -> BigInteger:
    """
    Умножение магнитуды на 10**n вставкой n младших нулей.

    Args:
        value: Исходное значение
        n: Количество разрядов (>= 0)

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> shift_left(parse_big_integer("-12")).digits
        (0, 2, 1)
    """
    return BigInteger.from_digits(shift_digits_left(value.digits, n), value.sign)


def shift_right(value: BigInteger, n: int = 1) -> BigInteger:
    """
    Деление магнитуды на 10**n с отбрасыванием младших цифр.

    Если цифр не осталось, результат — ноль.

    Raises:
        ValueError: Если n < 0
    """
    return BigInteger.from_digits(shift_digits_right(value.digits, n), value.sign)
