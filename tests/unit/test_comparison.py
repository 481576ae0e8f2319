"""
Тесты для сравнения BigInteger

Проверяет:
1. Сравнение по магнитуде (знак игнорируется)
2. Знаковое total ordering
3. Согласованность сравнения со знаком subtract(a, b)
"""

import itertools

import pytest

from src.core.domain import parse_big_integer
from src.core.math.additive import subtract
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

SAMPLES = ["0", "1", "-1", "9", "-9", "10", "-10", "123", "-123", "132", "-999", "1000"]


class TestMagnitudeComparison:
    """Тесты compare_magnitude и производных"""

    def test_sign_ignored(self) -> None:
        assert compare_magnitude(parse_big_integer("-90"), parse_big_integer("9")) == 1
        assert compare_magnitude(parse_big_integer("-9"), parse_big_integer("9")) == 0

    def test_greater_or_equal_includes_equal(self) -> None:
        a = parse_big_integer("-555")
        b = parse_big_integer("555")
        assert greater_or_equal_magnitude(a, b)
        assert greater_or_equal_magnitude(b, a)

    def test_less_equal_magnitude(self) -> None:
        assert less_equal_magnitude(parse_big_integer("99"), parse_big_integer("-100"))
        assert not less_equal_magnitude(parse_big_integer("101"), parse_big_integer("-100"))


class TestSignedComparison:
    """Тесты знакового сравнения"""

    def test_different_signs_decide_immediately(self) -> None:
        assert less_than(parse_big_integer("-1000"), parse_big_integer("1"))
        assert greater_than(parse_big_integer("0"), parse_big_integer("-1"))

    def test_both_negative_reversed(self) -> None:
        """Большая магнитуда у отрицательных — меньшее число"""
        assert less_than(parse_big_integer("-30"), parse_big_integer("-5"))
        assert compare(parse_big_integer("-5"), parse_big_integer("-30")) == 1

    def test_equal_values(self) -> None:
        a = parse_big_integer("-42")
        assert equals(a, parse_big_integer("-042"))
        assert less_equal(a, a)
        assert greater_equal(a, a)
        assert not less_than(a, a)

    def test_zero_forms_equal(self) -> None:
        assert equals(parse_big_integer("-0"), parse_big_integer("0"))

    @pytest.mark.parametrize("a_text, b_text", list(itertools.product(SAMPLES, SAMPLES)))
    def test_totality_agrees_with_int_and_subtract(self, a_text: str, b_text: str) -> None:
        a = parse_big_integer(a_text)
        b = parse_big_integer(b_text)

        outcomes = [less_than(a, b), equals(a, b), greater_than(a, b)]
        assert outcomes.count(True) == 1

        expected = (int(a_text) > int(b_text)) - (int(a_text) < int(b_text))
        assert compare(a, b) == expected

        difference = subtract(a, b)
        if difference.is_zero():
            assert compare(a, b) == 0
        elif difference.is_negative():
            assert compare(a, b) == -1
        else:
            assert compare(a, b) == 1
