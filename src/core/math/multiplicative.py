"""
Multiplicative — Умножение BigInteger

- multiply_by_small_integer: один проход digit*k + carry (k — машинное целое)
- multiply: школьная свёртка цифр в len(a) + len(b) разрядов

Знак результата multiply: POSITIVE при совпадении знаков, иначе NEGATIVE.
Нулевой результат всегда положительный.
"""

from src.core.domain.big_integer import BigInteger, Sign
from src.core.math.digits import multiply_digits, multiply_digits_by_small


def multiply_by_small_integer(value: BigInteger, k: int) -> BigInteger:
    """
    Умножение на малое неотрицательное целое.

    Только магнитуда: знак k не поддерживается, вызывающий код ведёт знак
    отдельно. Знак результата = знак value.

    Args:
        value: Множимое
        k: Множитель, 0 <= k <= SMALL_INTEGER_MAX

    Returns:
        value * k

    Raises:
        ValueError: Если k не int или вне [0, SMALL_INTEGER_MAX]

    Examples:
        >>> multiply_by_small_integer(parse_big_integer("-125"), 8).digits
        (0, 0, 0, 1)
    """
    return BigInteger.from_digits(multiply_digits_by_small(value.digits, k), value.sign)


def multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Полное умножение (schoolbook).

    Examples:
        >>> multiply(parse_big_integer("999"), parse_big_integer("999")).digits
        (1, 0, 0, 8, 9, 9)
    """
    sign = Sign.POSITIVE if a.sign == b.sign else Sign.NEGATIVE
    return BigInteger.from_digits(multiply_digits(a.digits, b.digits), sign)
