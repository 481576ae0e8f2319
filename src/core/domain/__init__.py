"""
Domain models and errors.

Contains the BigInteger value type, its Sign and the engine exceptions.
"""

from src.core.domain.big_integer import (
    ASCII_DIGITS,
    DECIMAL_BASE,
    NEGATIVE_PREFIX,
    ONE,
    ZERO,
    BigInteger,
    Sign,
    normalize_digits,
    parse_big_integer,
)
from src.core.domain.errors import BigIntegerError, DivisionByZero, InvalidFormat

__all__ = [
    # Constants
    "ASCII_DIGITS",
    "DECIMAL_BASE",
    "NEGATIVE_PREFIX",
    "ONE",
    "ZERO",
    # Value type
    "BigInteger",
    "Sign",
    "normalize_digits",
    "parse_big_integer",
    # Errors
    "BigIntegerError",
    "DivisionByZero",
    "InvalidFormat",
]
