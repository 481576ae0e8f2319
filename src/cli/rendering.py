"""
Rendering — Каноническая десятичная запись BigInteger

'-' ставится только для отрицательных ненулевых значений, далее цифры
от старшей к младшей. Ноль всегда "0".
"""

from src.core.domain.big_integer import NEGATIVE_PREFIX, BigInteger
from src.core.math.division import DivisionResult


def render(value: BigInteger) -> str:
    """
    Каноническая текстовая запись.

    Examples:
        >>> render(parse_big_integer("-007"))
        '-7'
        >>> render(parse_big_integer("-0"))
        '0'
    """
    body = "".join(str(digit) for digit in reversed(value.digits))
    if value.is_negative() and not value.is_zero():
        return NEGATIVE_PREFIX + body
    return body


def render_division_result(result: DivisionResult) -> str:
    """Частное и остаток через пробел."""
    return f"{render(result.quotient)} {render(result.remainder)}"
