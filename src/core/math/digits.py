"""
Digits — Примитивы над магнитудами

Операции над сырыми little-endian последовательностями десятичных цифр
(младшая цифра первой). Знак здесь не существует: все функции работают
только с магнитудами и всегда возвращают новый нормализованный list.

Машинная арифметика используется только для одной цифры и переноса
(carry/borrow), никогда для многозначных чисел.

Все функции ожидают нормализованные входы (см. normalize_digits).
"""

from typing import Final, Sequence

from src.core.domain.big_integer import DECIMAL_BASE, normalize_digits

# Максимальный множитель для multiply_digits_by_small (signed 32-bit)
SMALL_INTEGER_MAX: Final[int] = 2**31 - 1


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение магнитуд.

    Более длинная последовательность больше; при равной длине решает первая
    различающаяся цифра, начиная со старшей (конец little-endian списка).

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for a_digit, b_digit in zip(reversed(a), reversed(b)):
        if a_digit != b_digit:
            return 1 if a_digit > b_digit else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение магнитуд с переносом.

    Итоговый перенос добавляет новую старшую цифру.
    """
    result: list[int] = []
    carry = 0

    for i in range(max(len(a), len(b))):
        a_digit = a[i] if i < len(a) else 0
        b_digit = b[i] if i < len(b) else 0
        total = a_digit + b_digit + carry
        result.append(total % DECIMAL_BASE)
        carry = total // DECIMAL_BASE

    if carry:
        result.append(carry)

    return normalize_digits(result)


def subtract_digits(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Вычитание магнитуд с заёмом (borrow).

    Если digit - borrow < 0, к разности прибавляется 10 и заём переходит
    в следующий разряд.

    Args:
        larger: Уменьшаемое, |larger| >= |smaller|
        smaller: Вычитаемое

    Returns:
        Нормализованная разность (все нули → [0])

    Raises:
        ValueError: Если |larger| < |smaller| (ошибка вызывающего кода)
    """
    if compare_digits(larger, smaller) < 0:
        raise ValueError(
            "subtract_digits requires |larger| >= |smaller|; "
            "order operands with compare_digits first"
        )

    result: list[int] = []
    borrow = 0

    for i in range(len(larger)):
        smaller_digit = smaller[i] if i < len(smaller) else 0
        diff = larger[i] - smaller_digit - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize_digits(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_digits_by_small(a: Sequence[int], k: int) -> list[int]:
    """
    Умножение магнитуды на малое неотрицательное целое.

    Один проход: digit*k + carry, в разряд пишется остаток по 10,
    перенос — частное. Оставшийся перенос даёт дополнительные цифры.

    Args:
        a: Магнитуда
        k: Множитель, 0 <= k <= SMALL_INTEGER_MAX

    Raises:
        ValueError: Если k не int или вне диапазона
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f"small multiplier must be int, got {type(k).__name__}")
    if not 0 <= k <= SMALL_INTEGER_MAX:
        raise ValueError(f"small multiplier must be in [0, {SMALL_INTEGER_MAX}], got {k}")

    result: list[int] = []
    carry = 0

    for digit in a:
        product = digit * k + carry
        result.append(product % DECIMAL_BASE)
        carry = product // DECIMAL_BASE

    while carry:
        result.append(carry % DECIMAL_BASE)
        carry //= DECIMAL_BASE

    return normalize_digits(result)


def multiply_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Школьное умножение (свёртка цифр).

    Результат занимает len(a) + len(b) разрядов; для каждой пары (i, j)
    в result[i+j] накапливается a[i]*b[j] + carry, переполнение уходит
    в следующий разряд.
    """
    result = [0] * (len(a) + len(b))

    for i, a_digit in enumerate(a):
        carry = 0
        for j, b_digit in enumerate(b):
            product = a_digit * b_digit + result[i + j] + carry
            result[i + j] = product % DECIMAL_BASE
            carry = product // DECIMAL_BASE
        # Разряд i + len(b) ещё не тронут строкой i, поэтому carry < 10
        result[i + len(b)] += carry

    return normalize_digits(result)


# =============================================================================
# СДВИГИ
# =============================================================================


def shift_digits_left(a: Sequence[int], n: int = 1) -> list[int]:
    """Умножение магнитуды на 10**n (вставка n младших нулей)."""
    if n < 0:
        raise ValueError(f"shift count must be non-negative, got {n}")
    if list(a) == [0]:
        return [0]
    return [0] * n + list(a)


def shift_digits_right(a: Sequence[int], n: int = 1) -> list[int]:
    """
    Деление магнитуды на 10**n с отбрасыванием n младших цифр.

    Если цифр не осталось — результат [0].
    """
    if n < 0:
        raise ValueError(f"shift count must be non-negative, got {n}")
    return normalize_digits(a[n:])


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_digits(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[list[int], list[int]]:
    """
    Деление магнитуд: частное и остаток.

    Повторное вычитание с ускорением через степени десяти: пока остаток
    >= делителя, делитель сдвигается влево (x10) вместе с параллельным
    счётчиком, начиная с 1, пока следующий сдвиг не превысил бы остаток.
    Найденное кратное вычитается из остатка, счётчик прибавляется к частному.

    Args:
        dividend: Магнитуда делимого
        divisor: Магнитуда делителя (ненулевая)

    Returns:
        (quotient, remainder), remainder < divisor

    Raises:
        ValueError: Если divisor == [0] (проверка на ноль — уровнем выше)
    """
    if list(divisor) == [0]:
        raise ValueError("divmod_digits requires a non-zero divisor")

    remainder = list(dividend)
    quotient = [0]

    while compare_digits(remainder, divisor) >= 0:
        scaled = list(divisor)
        count = [1]

        while True:
            next_scaled = shift_digits_left(scaled)
            if compare_digits(next_scaled, remainder) > 0:
                break
            scaled = next_scaled
            count = shift_digits_left(count)

        remainder = subtract_digits(remainder, scaled)
        quotient = add_digits(quotient, count)

    return quotient, remainder
