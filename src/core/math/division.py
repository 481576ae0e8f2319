"""
Division — Целочисленное деление BigInteger с усечением

Делятся магнитуды; знак присоединяется к частному (NEGATIVE, если ровно
один операнд отрицательный), остаток получает знак делимого.
Это truncating division (округление к нулю), не floor division:

    -7 / 2  = -3,  remainder(-7, 2)  = -1
     7 / -2 = -3,  remainder(7, -2)  =  1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой делитель → DivisionByZero (нет fallback, нет частичного результата)
2. quotient * divisor + remainder == dividend
3. |remainder| < |divisor|
"""

from typing import NamedTuple

from src.core.domain.big_integer import BigInteger, Sign
from src.core.domain.errors import DivisionByZero
from src.core.math.digits import divmod_digits


class DivisionResult(NamedTuple):
    """Результат деления с остатком."""

    quotient: BigInteger
    remainder: BigInteger


def divide_with_remainder(dividend: BigInteger, divisor: BigInteger) -> DivisionResult:
    """
    Деление с остатком (truncating).

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        DivisionResult(quotient, remainder)

    Raises:
        DivisionByZero: Если divisor равен нулю
    """
    if divisor.is_zero():
        raise DivisionByZero(
            f"Division by zero: dividend has {dividend.digit_count()} digit(s)"
        )

    quotient_digits, remainder_digits = divmod_digits(dividend.digits, divisor.digits)

    quotient_sign = Sign.POSITIVE if dividend.sign == divisor.sign else Sign.NEGATIVE
    return DivisionResult(
        quotient=BigInteger.from_digits(quotient_digits, quotient_sign),
        remainder=BigInteger.from_digits(remainder_digits, dividend.sign),
    )


def divide(dividend: BigInteger, divisor: BigInteger) -> BigInteger:
    """
    Частное с усечением к нулю.

    Raises:
        DivisionByZero: Если divisor равен нулю

    Examples:
        >>> divide(parse_big_integer("36"), parse_big_integer("6")).digits
        (6,)
    """
    return divide_with_remainder(dividend, divisor).quotient


def remainder(dividend: BigInteger, divisor: BigInteger) -> BigInteger:
    """
    Остаток truncating division: dividend - divide(dividend, divisor) * divisor.

    Знак остатка совпадает со знаком делимого (ноль — положительный).

    Raises:
        DivisionByZero: Если divisor равен нулю
    """
    return divide_with_remainder(dividend, divisor).remainder
