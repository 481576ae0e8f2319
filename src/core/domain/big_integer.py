"""
BigInteger — Десятичное целое произвольной точности

Immutable Pydantic модель: последовательность десятичных цифр (little-endian,
младшая цифра первой) и знак.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits никогда не пуст, каждая цифра в диапазоне 0..9
2. Старшая цифра ненулевая, кроме нуля, который хранится ровно как (0,)
3. Ноль всегда имеет знак POSITIVE
4. Сравнение по магнитуде никогда не смотрит на sign

Благодаря инвариантам 2-3 равенство полей (==) совпадает с равенством чисел.
"""

from enum import Enum
from typing import Final, Iterable

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.errors import InvalidFormat

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (единственное поддерживаемое)
DECIMAL_BASE: Final[int] = 10

# Допустимые символы цифр (только ASCII, без unicode-цифр)
ASCII_DIGITS: Final[str] = "0123456789"

# Префикс отрицательного числа в текстовой записи
NEGATIVE_PREFIX: Final[str] = "-"


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def flipped(self) -> "Sign":
        """Противоположный знак."""
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.POSITIVE


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_digits(digits: Iterable[int]) -> list[int]:
    """
    Удаление незначащих нулей со старшего конца последовательности.

    Удаляет нули, пока последний элемент не станет ненулевым или не
    останется ровно одна цифра. Пустая последовательность становится [0].
    Идемпотентна.

    Args:
        digits: Цифры little-endian (младшая первой)

    Returns:
        Новый нормализованный список цифр

    Examples:
        >>> normalize_digits([3, 2, 1, 0, 0])
        [3, 2, 1]
        >>> normalize_digits([0, 0, 0])
        [0]
        >>> normalize_digits([])
        [0]
    """
    result = list(digits)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    if not result:
        result.append(0)
    return result


# =============================================================================
# BIGINTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое десятичное целое неограниченной магнитуды.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Прямое создание требует уже нормализованных цифр; для произвольной
    последовательности используйте from_digits.
    """

    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Десятичные цифры, младшая первой"
    )
    sign: Sign = Field(default=Sign.POSITIVE, description="Знак числа")

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра должна быть в диапазоне 0..9."""
        for position, digit in enumerate(v):
            if not 0 <= digit < DECIMAL_BASE:
                raise ValueError(
                    f"digit {digit} at position {position} is outside 0..{DECIMAL_BASE - 1}"
                )
        return v

    @model_validator(mode="after")
    def validate_normalized(self) -> "BigInteger":
        """Проверка нормализации: нет старших нулей, ноль только положительный."""
        if len(self.digits) > 1 and self.digits[-1] == 0:
            raise ValueError(
                f"digits must not end with most-significant zeros, got {self.digits}"
            )
        if self.digits == (0,) and self.sign is Sign.NEGATIVE:
            raise ValueError("zero must carry positive sign")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(
        cls, digits: Iterable[int], sign: Sign = Sign.POSITIVE
    ) -> "BigInteger":
        """
        Создание из произвольной little-endian последовательности цифр.

        Нормализует цифры и приводит знак нуля к POSITIVE.

        Args:
            digits: Цифры little-endian (могут содержать старшие нули)
            sign: Знак результата (игнорируется для нуля)

        Returns:
            Нормализованный BigInteger
        """
        normalized = normalize_digits(digits)
        if normalized == [0]:
            sign = Sign.POSITIVE
        return cls(digits=tuple(normalized), sign=sign)

    @classmethod
    def from_string(cls, text: str) -> "BigInteger":
        """Парсинг текстовой записи (см. parse_big_integer)."""
        return parse_big_integer(text)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.digits == (0,)

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def is_positive(self) -> bool:
        """Строго больше нуля."""
        return self.sign is Sign.POSITIVE and not self.is_zero()

    def digit_count(self) -> int:
        """Количество значащих десятичных цифр (у нуля — 1)."""
        return len(self.digits)

    # -------------------------------------------------------------------------
    # Знаковые преобразования
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        """
        Смена знака.

        Ноль остаётся положительным нулём.
        """
        if self.is_zero():
            return self
        return BigInteger(digits=self.digits, sign=self.sign.flipped())

    def magnitude(self) -> "BigInteger":
        """Абсолютное значение."""
        if self.sign is Sign.POSITIVE:
            return self
        return BigInteger(digits=self.digits, sign=Sign.POSITIVE)


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_big_integer(text: str) -> BigInteger:
    """
    Парсинг знакового десятичного целого.

    Формат: необязательный '-' и одна или более ASCII цифр.
    Старшие нули нормализуются сразу, "-0" становится положительным нулём.

    Args:
        text: Текстовая запись числа

    Returns:
        Нормализованный BigInteger

    Raises:
        InvalidFormat: Пустая строка, одиночный '-', любой символ кроме цифр
            после знака, либо входное значение не str

    Examples:
        >>> parse_big_integer("-120").digits
        (0, 2, 1)
        >>> parse_big_integer("007").digits
        (7,)
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"Big integer literal must be str, got {type(text).__name__}")

    if text.startswith(NEGATIVE_PREFIX):
        sign = Sign.NEGATIVE
        body = text[len(NEGATIVE_PREFIX):]
    else:
        sign = Sign.POSITIVE
        body = text

    if not body:
        raise InvalidFormat(f"Big integer literal has no digits: {text!r}")

    for char in body:
        if char not in ASCII_DIGITS:
            raise InvalidFormat(
                f"Invalid character {char!r} in big integer literal {text!r}"
            )

    digits = [ord(char) - ord("0") for char in reversed(body)]
    return BigInteger.from_digits(digits, sign)


# =============================================================================
# ОБЩИЕ ЗНАЧЕНИЯ
# =============================================================================

ZERO: Final[BigInteger] = BigInteger(digits=(0,))
ONE: Final[BigInteger] = BigInteger(digits=(1,))
