"""
Square Root — Целочисленный квадратный корень

Десятичный аналог классического побитового алгоритма: вместо битов
обрабатываются пары десятичных цифр, начиная со старшей.

Для каждой пары:
    remainder = remainder * 100 + pair
    d = max{d in 0..9 : (20 * root + d) * d <= remainder}
    remainder -= (20 * root + d) * d
    root = root * 10 + d

Результат — точный floor(sqrt(value)). Используются только сдвиги,
умножение на малое целое, сложение/вычитание магнитуд и сравнение.
"""

from typing import Final

from src.core.domain.big_integer import BigInteger
from src.core.math.digits import (
    add_digits,
    compare_digits,
    multiply_digits_by_small,
    shift_digits_left,
    subtract_digits,
)

# Количество цифр, обрабатываемых за один шаг
DIGITS_PER_STEP: Final[int] = 2

# Множитель текущего корня в пробном делителе (2 * 10)
TRIAL_ROOT_FACTOR: Final[int] = 20


def integer_square_root(value: BigInteger) -> BigInteger:
    """
    floor(sqrt(value)) для неотрицательного value.

    Args:
        value: Неотрицательное число

    Returns:
        Наибольшее r, такое что r * r <= value

    Raises:
        ValueError: Если value отрицательное

    Examples:
        >>> integer_square_root(parse_big_integer("36")).digits
        (6,)
        >>> integer_square_root(parse_big_integer("99")).digits
        (9,)
    """
    if value.is_negative():
        raise ValueError("integer_square_root is undefined for negative values")

    digits = list(value.digits)
    if len(digits) % DIGITS_PER_STEP:
        digits.append(0)

    root = [0]
    remainder = [0]

    for i in range(len(digits) - DIGITS_PER_STEP, -1, -DIGITS_PER_STEP):
        remainder = add_digits(
            shift_digits_left(remainder, DIGITS_PER_STEP), digits[i:i + DIGITS_PER_STEP]
        )

        base = multiply_digits_by_small(root, TRIAL_ROOT_FACTOR)
        digit = 9
        trial = multiply_digits_by_small(add_digits(base, [digit]), digit)
        while compare_digits(trial, remainder) > 0:
            digit -= 1
            trial = multiply_digits_by_small(add_digits(base, [digit]), digit)

        remainder = subtract_digits(remainder, trial)
        root = add_digits(shift_digits_left(root), [digit])

    return BigInteger.from_digits(root)
