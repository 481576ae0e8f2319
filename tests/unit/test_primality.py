"""
Тесты для is_divisible_by и is_prime

Проверяет:
1. Делимость с учётом знаков и нуля
2. DivisionByZero для нулевого делителя
3. Простоту малых чисел против эталонного перебора
4. Квадраты простых (граница перебора включительно)
5. Observer и DEBUG-лог вместо вывода в консоль
"""

import logging

import pytest

from src.cli.rendering import render
from src.core.domain import DivisionByZero, parse_big_integer
from src.core.math.primality import FIRST_TRIAL_DIVISOR, is_divisible_by, is_prime


def p(text: str):
    return parse_big_integer(text)


def reference_is_prime(n: int) -> bool:
    """Эталон на int (только для тестов)."""
    if n < 2:
        return False
    return all(n % d for d in range(2, int(n**0.5) + 1))


class TestIsDivisibleBy:
    """Тесты is_divisible_by"""

    def test_example(self) -> None:
        assert is_divisible_by(p("36"), p("6"))

    def test_not_divisible(self) -> None:
        assert not is_divisible_by(p("37"), p("6"))
        assert not is_divisible_by(p("5"), p("36"))

    def test_signs_ignored_for_divisibility(self) -> None:
        assert is_divisible_by(p("-36"), p("6"))
        assert is_divisible_by(p("36"), p("-6"))
        assert not is_divisible_by(p("-37"), p("-6"))

    def test_zero_dividend(self) -> None:
        assert is_divisible_by(p("0"), p("5"))

    def test_large(self) -> None:
        a = 12345678901234567890 * 987654321
        assert is_divisible_by(p(str(a)), p("987654321"))
        assert not is_divisible_by(p(str(a + 1)), p("987654321"))

    @pytest.mark.parametrize("text", ["0", "36", "-1"])
    def test_zero_divisor_raises(self, text: str) -> None:
        with pytest.raises(DivisionByZero):
            is_divisible_by(p(text), p("0"))


class TestIsPrime:
    """Тесты is_prime"""

    def test_examples(self) -> None:
        assert is_prime(p("17"))
        assert not is_prime(p("18"))
        assert not is_prime(p("1"))

    def test_zero_and_negatives_not_prime(self) -> None:
        assert not is_prime(p("0"))
        assert not is_prime(p("-1"))
        assert not is_prime(p("-7"))

    @pytest.mark.parametrize("text", ["4", "9", "25", "49", "121", "169"])
    def test_squares_of_primes_are_composite(self, text: str) -> None:
        assert not is_prime(p(text))

    @pytest.mark.parametrize("n", range(0, 150))
    def test_matches_reference(self, n: int) -> None:
        assert is_prime(p(str(n))) == reference_is_prime(n)

    @pytest.mark.parametrize("text", ["7919", "104729"])
    def test_larger_primes(self, text: str) -> None:
        assert is_prime(p(text))

    def test_larger_composite(self) -> None:
        assert not is_prime(p(str(7919 * 104729)))

    def test_first_trial_divisor(self) -> None:
        assert FIRST_TRIAL_DIVISOR == p("2")


class TestPrimalityObserver:
    """Прогресс перебора — через observer и лог"""

    def test_observer_receives_candidates_up_to_isqrt(self) -> None:
        seen: list[str] = []
        assert is_prime(p("29"), observer=lambda candidate: seen.append(render(candidate)))
        assert seen == ["2", "3", "4", "5"]

    def test_observer_stops_at_first_divisor(self) -> None:
        seen: list[str] = []
        assert not is_prime(p("15"), observer=lambda candidate: seen.append(render(candidate)))
        assert seen == ["2", "3"]

    def test_observer_not_called_for_trivial_values(self) -> None:
        seen: list[str] = []
        is_prime(p("1"), observer=lambda candidate: seen.append(render(candidate)))
        is_prime(p("3"), observer=lambda candidate: seen.append(render(candidate)))
        assert seen == []

    def test_debug_log(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="src.core.math.primality")
        is_prime(p("11"))
        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Trial divisor 2", "Trial divisor 3"]

    def test_no_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        is_prime(p("97"))
        captured = capsys.readouterr()
        assert captured.out == ""
