"""
Comparison — Сравнение BigInteger

Два уровня:
- По магнитуде: знак никогда не учитывается
- Знаковое (total ordering): разные знаки решают сразу (negative < positive),
  одинаковые сводятся к сравнению магнитуд, с разворотом для отрицательных

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Для любых a, b выполняется ровно одно из a < b, a == b, a > b.
Ноль всегда положительный, поэтому -0 не нарушает totality.
"""

from src.core.domain.big_integer import BigInteger, Sign
from src.core.math.digits import compare_digits

# =============================================================================
# СРАВНЕНИЕ ПО МАГНИТУДЕ
# =============================================================================


def compare_magnitude(a: BigInteger, b: BigInteger) -> int:
    """
    Сравнение |a| и |b|.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|

    Examples:
        >>> compare_magnitude(parse_big_integer("-90"), parse_big_integer("9"))
        1
    """
    return compare_digits(a.digits, b.digits)


def greater_or_equal_magnitude(a: BigInteger, b: BigInteger) -> bool:
    """|a| >= |b| (равные магнитуды дают True)."""
    return compare_magnitude(a, b) >= 0


def less_equal_magnitude(a: BigInteger, b: BigInteger) -> bool:
    """|a| <= |b|."""
    return compare_magnitude(a, b) <= 0


# =============================================================================
# ЗНАКОВОЕ СРАВНЕНИЕ
# =============================================================================


def compare(a: BigInteger, b: BigInteger) -> int:
    """
    Знаковое сравнение (total ordering).

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare(parse_big_integer("-5"), parse_big_integer("3"))
        -1
        >>> compare(parse_big_integer("-5"), parse_big_integer("-30"))
        1
    """
    if a.sign != b.sign:
        return -1 if a.sign is Sign.NEGATIVE else 1

    result = compare_magnitude(a, b)
    if a.sign is Sign.NEGATIVE:
        # Большая магнитуда у отрицательных — "более отрицательное" число
        return -result
    return result


def less_than(a: BigInteger, b: BigInteger) -> bool:
    return compare(a, b) < 0


def less_equal(a: BigInteger, b: BigInteger) -> bool:
    return compare(a, b) <= 0


def greater_than(a: BigInteger, b: BigInteger) -> bool:
    return compare(a, b) > 0


def greater_equal(a: BigInteger, b: BigInteger) -> bool:
    return compare(a, b) >= 0


def equals(a: BigInteger, b: BigInteger) -> bool:
    """Равенство значений (совпадают цифры и знак)."""
    return compare(a, b) == 0
