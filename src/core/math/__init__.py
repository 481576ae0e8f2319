"""
Core math modules для BigInteger engine

Арифметика над десятичными цифрами "с нуля": сравнение, сложение,
вычитание, умножение, деление, квадратный корень, простота.
"""

# Digits — магнитудные примитивы
from src.core.math.digits import (
    SMALL_INTEGER_MAX,
    add_digits,
    compare_digits,
    divmod_digits,
    multiply_digits,
    multiply_digits_by_small,
    shift_digits_left,
    shift_digits_right,
    subtract_digits,
)

# Comparison
from src.core.math.comparison import (
    compare,
    compare_magnitude,
    equals,
    greater_equal,
    greater_or_equal_magnitude,
    greater_than,
    less_equal,
    less_equal_magnitude,
    less_than,
)

# Shifts
from src.core.math.shifts import shift_left, shift_right

# Additive
from src.core.math.additive import (
    add,
    increment,
    magnitude_add,
    magnitude_subtract,
    subtract,
)

# Multiplicative
from src.core.math.multiplicative import multiply, multiply_by_small_integer

# Division
from src.core.math.division import (
    DivisionResult,
    divide,
    divide_with_remainder,
    remainder,
)

# Derived
from src.core.math.square_root import integer_square_root
from src.core.math.primality import (
    FIRST_TRIAL_DIVISOR,
    CandidateObserver,
    is_divisible_by,
    is_prime,
)

__all__ = [
    # Digits — Constants
    "SMALL_INTEGER_MAX",
    # Digits — Magnitude primitives
    "add_digits",
    "compare_digits",
    "divmod_digits",
    "multiply_digits",
    "multiply_digits_by_small",
    "shift_digits_left",
    "shift_digits_right",
    "subtract_digits",
    # Comparison
    "compare",
    "compare_magnitude",
    "equals",
    "greater_equal",
    "greater_or_equal_magnitude",
    "greater_than",
    "less_equal",
    "less_equal_magnitude",
    "less_than",
    # Shifts
    "shift_left",
    "shift_right",
    # Additive
    "add",
    "increment",
    "magnitude_add",
    "magnitude_subtract",
    "subtract",
    # Multiplicative
    "multiply",
    "multiply_by_small_integer",
    # Division — Types
    "DivisionResult",
    # Division — Functions
    "divide",
    "divide_with_remainder",
    "remainder",
    # Derived — Constants
    "FIRST_TRIAL_DIVISOR",
    # Derived — Types
    "CandidateObserver",
    # Derived — Functions
    "integer_square_root",
    "is_divisible_by",
    "is_prime",
]
