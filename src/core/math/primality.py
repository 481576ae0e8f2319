"""
Primality — Делимость и проверка простоты BigInteger

Построено поверх деления, сложения, сравнения и integer_square_root.

Проверка простоты — перебор делителей 2, 3, 4, ... до floor(sqrt(n))
включительно. Прогресс перебора доступен через необязательный observer
(вызывается для каждого кандидата) и DEBUG-лог; вывода в консоль нет.
"""

import logging
from typing import Callable, Final, Optional

from src.core.domain.big_integer import ONE, BigInteger, parse_big_integer
from src.core.math.additive import increment
from src.core.math.comparison import compare_magnitude, less_equal
from src.core.math.division import remainder
from src.core.math.square_root import integer_square_root

logger = logging.getLogger(__name__)

# Первый кандидат в делители при переборе
FIRST_TRIAL_DIVISOR: Final[BigInteger] = parse_big_integer("2")

# Наблюдатель за перебором: получает каждого кандидата до проверки
CandidateObserver = Callable[[BigInteger], None]


def is_divisible_by(dividend: BigInteger, divisor: BigInteger) -> bool:
    """
    Делится ли dividend на divisor без остатка.

    Эквивалентно повторному сокращению делимого на остаток до тех пор,
    пока остаток не станет нулём или меньше делителя, но выполняет
    одно деление. Знак делимого игнорируется; ноль делится на любой
    ненулевой делитель.

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        True если остаток от деления равен нулю

    Raises:
        DivisionByZero: Если divisor равен нулю

    Examples:
        >>> is_divisible_by(parse_big_integer("36"), parse_big_integer("6"))
        True
    """
    return remainder(dividend.magnitude(), divisor).is_zero()


def is_prime(value: BigInteger, observer: Optional[CandidateObserver] = None) -> bool:
    """
    Проверка простоты перебором делителей.

    Args:
        value: Проверяемое число
        observer: Необязательный callback, получает каждого кандидата

    Returns:
        False для отрицательных и для магнитуд <= 1;
        False при первом найденном делителе в [2, isqrt(value)];
        True если делителей нет

    Examples:
        >>> is_prime(parse_big_integer("17"))
        True
        >>> is_prime(parse_big_integer("25"))
        False
    """
    if value.is_negative() or compare_magnitude(value, ONE) <= 0:
        return False

    bound = integer_square_root(value)
    candidate = FIRST_TRIAL_DIVISOR

    while less_equal(candidate, bound):
        if observer is not None:
            observer(candidate)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Trial divisor %s", "".join(map(str, reversed(candidate.digits))))

        if is_divisible_by(value, candidate):
            return False

        candidate = increment(candidate)

    return True
