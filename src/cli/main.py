"""
bigint-calc — Выполнение одной операции BigInteger из командной строки

Usage:
    bigint-calc add 123 -23
    bigint-calc divmod -7 2
    bigint-calc is-prime 104729 --trace --log-level DEBUG
    bigint-calc mul 999 999 --json

Exit codes:
    0 — успех
    1 — деление на ноль
    2 — некорректный операнд или использование
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Final, List, Optional, Sequence

from src.cli.rendering import render, render_division_result
from src.core.contracts import division_result_to_contract, to_contract
from src.core.domain import BigInteger, DivisionByZero, InvalidFormat, parse_big_integer
from src.core.math import (
    DivisionResult,
    add,
    compare,
    divide,
    divide_with_remainder,
    integer_square_root,
    is_divisible_by,
    is_prime,
    multiply,
    remainder,
    subtract,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Переменная окружения с уровнем логирования по умолчанию
LOG_LEVEL_ENV: Final[str] = "BIGINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_OK: Final[int] = 0
EXIT_DIVISION_BY_ZERO: Final[int] = 1
EXIT_USAGE: Final[int] = 2


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


@dataclass(frozen=True)
class Operation:
    """Описание операции командной строки."""

    arity: int
    handler: Callable[..., Any]
    help: str


def _trace_candidate(candidate: BigInteger) -> None:
    logger.info("Trying divisor %s", render(candidate))


OPERATIONS: Final[Dict[str, Operation]] = {
    "add": Operation(2, add, "a + b"),
    "sub": Operation(2, subtract, "a - b"),
    "mul": Operation(2, multiply, "a * b"),
    "div": Operation(2, divide, "a / b, truncated toward zero"),
    "mod": Operation(2, remainder, "remainder of a / b, sign of a"),
    "divmod": Operation(2, divide_with_remainder, "quotient and remainder"),
    "sqrt": Operation(1, integer_square_root, "floor(sqrt(a))"),
    "is-prime": Operation(1, is_prime, "primality of a"),
    "divisible": Operation(2, is_divisible_by, "whether b divides a"),
    "compare": Operation(2, compare, "-1, 0 or 1"),
}


def format_result(result: Any, as_json: bool) -> str:
    """Текстовое или JSON представление результата операции."""
    if isinstance(result, BigInteger):
        return json.dumps(to_contract(result)) if as_json else render(result)
    if isinstance(result, DivisionResult):
        if as_json:
            return json.dumps(division_result_to_contract(result))
        return render_division_result(result)
    if isinstance(result, bool):
        return json.dumps(result) if as_json else str(result).lower()
    return json.dumps(result) if as_json else str(result)


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigint-calc",
        description="Run one arbitrary-precision decimal integer operation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\n".join(
            f"  {name:<10} {operation.help}" for name, operation in OPERATIONS.items()
        ),
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS),
                        help="Operation to run")
    parser.add_argument("operands", nargs="+",
                        help="Decimal integer operands")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON contracts")
    parser.add_argument("--trace", action="store_true",
                        help="Log every trial divisor of is-prime at INFO level")
    parser.add_argument("--log-level", type=str.upper,
                        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level
    if args.trace and logging.getLevelName(level) > logging.INFO:
        level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)

    operation = OPERATIONS[args.operation]
    if len(args.operands) != operation.arity:
        parser.error(
            f"{args.operation} expects {operation.arity} operand(s), got {len(args.operands)}"
        )

    try:
        operands: List[BigInteger] = [parse_big_integer(text) for text in args.operands]
    except InvalidFormat as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    kwargs: Dict[str, Any] = {}
    if args.operation == "is-prime" and args.trace:
        kwargs["observer"] = _trace_candidate

    logger.debug("Running %s on %d operand(s)", args.operation, len(operands))

    try:
        result = operation.handler(*operands, **kwargs)
    except DivisionByZero as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_DIVISION_BY_ZERO
    except ValueError as e:
        # integer_square_root отрицательного числа
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    print(format_result(result, args.json))
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
