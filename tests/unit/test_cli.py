"""
Тесты для bigint-calc и render

Проверяет:
1. Каноническую запись render
2. Выполнение каждой операции из командной строки
3. JSON вывод через контракты
4. Коды выхода для InvalidFormat, DivisionByZero и неверной арности
"""

import json

import pytest

from src.cli.main import (
    EXIT_DIVISION_BY_ZERO,
    EXIT_OK,
    EXIT_USAGE,
    OPERATIONS,
    format_result,
    main,
)
from src.cli.rendering import render, render_division_result
from src.core.contracts import from_contract
from src.core.domain import ZERO, parse_big_integer
from src.core.math.division import divide_with_remainder


class TestRender:
    """Тесты render"""

    def test_zero_has_no_sign(self) -> None:
        assert render(ZERO) == "0"
        assert render(parse_big_integer("-0")) == "0"

    def test_negative(self) -> None:
        assert render(parse_big_integer("-00450")) == "-450"

    def test_division_result(self) -> None:
        result = divide_with_remainder(parse_big_integer("-7"), parse_big_integer("2"))
        assert render_division_result(result) == "-3 -1"


class TestFormatResult:
    """Тесты format_result"""

    def test_bool(self) -> None:
        assert format_result(True, as_json=False) == "true"
        assert format_result(False, as_json=True) == "false"

    def test_int(self) -> None:
        assert format_result(-1, as_json=False) == "-1"


class TestMain:
    """Тесты main(argv)"""

    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["add", "123", "-23"], "100"),
            (["sub", "5", "12"], "-7"),
            (["mul", "999", "999"], "998001"),
            (["div", "-7", "2"], "-3"),
            (["mod", "-7", "2"], "-1"),
            (["divmod", "100", "7"], "14 2"),
            (["sqrt", "36"], "6"),
            (["is-prime", "17"], "true"),
            (["is-prime", "18"], "false"),
            (["divisible", "36", "6"], "true"),
            (["compare", "-5", "3"], "-1"),
        ],
    )
    def test_operations(self, argv, expected, capsys) -> None:
        assert main(argv) == EXIT_OK
        assert capsys.readouterr().out.strip() == expected

    def test_every_operation_registered(self) -> None:
        assert set(OPERATIONS) == {
            "add", "sub", "mul", "div", "mod", "divmod",
            "sqrt", "is-prime", "divisible", "compare",
        }

    def test_json_output(self, capsys) -> None:
        assert main(["mul", "-12", "12", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert from_contract(data) == parse_big_integer("-144")

    def test_json_divmod(self, capsys) -> None:
        assert main(["divmod", "-7", "2", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["quotient"] == {"sign": "negative", "digits": [3]}

    def test_invalid_operand(self, capsys) -> None:
        assert main(["add", "12x", "1"]) == EXIT_USAGE
        assert "12x" in capsys.readouterr().err

    def test_division_by_zero(self, capsys) -> None:
        assert main(["div", "10", "0"]) == EXIT_DIVISION_BY_ZERO
        assert "Division by zero" in capsys.readouterr().err

    def test_divisible_by_zero(self) -> None:
        assert main(["divisible", "10", "0"]) == EXIT_DIVISION_BY_ZERO

    def test_negative_sqrt(self, capsys) -> None:
        assert main(["sqrt", "-4"]) == EXIT_USAGE
        assert "negative" in capsys.readouterr().err

    def test_wrong_arity(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["sqrt", "4", "9"])
        assert exc_info.value.code == EXIT_USAGE

    def test_unknown_operation(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["pow", "2", "3"])
        assert exc_info.value.code == EXIT_USAGE

    def test_trace_reports_candidates(self, caplog, capsys) -> None:
        caplog.set_level("INFO", logger="src.cli.main")
        assert main(["is-prime", "29", "--trace"]) == EXIT_OK
        messages = [record.getMessage() for record in caplog.records if record.name == "src.cli.main"]
        assert messages == [
            "Trying divisor 2",
            "Trying divisor 3",
            "Trying divisor 4",
            "Trying divisor 5",
        ]
        assert capsys.readouterr().out.strip() == "true"
