"""
Serialization — BigInteger <-> JSON контракт

Формат (big_integer.json):
    {"schema_version": "1", "sign": "negative", "digits": [3, 2, 1]}  # -123

Цифры хранятся little-endian, как в модели. Десериализация проходит
два уровня проверки:
1. jsonschema — структура, типы, диапазон цифр
2. pydantic — инварианты нормализации (нет старших нулей, ноль положительный)
"""

from typing import Any, Dict, Final

from src.core.contracts.validators import validate_big_integer, validate_division_result
from src.core.domain.big_integer import BigInteger, Sign
from src.core.math.division import DivisionResult

# Версия формата контрактов
CONTRACT_SCHEMA_VERSION: Final[str] = "1"


def _value_payload(value: BigInteger) -> Dict[str, Any]:
    return {"sign": value.sign.value, "digits": list(value.digits)}


def _value_from_payload(payload: Dict[str, Any]) -> BigInteger:
    return BigInteger(digits=tuple(payload["digits"]), sign=Sign(payload["sign"]))


def to_contract(value: BigInteger) -> Dict[str, Any]:
    """
    Сериализация BigInteger в big_integer контракт.

    Returns:
        dict, проходящий validate_big_integer
    """
    return {"schema_version": CONTRACT_SCHEMA_VERSION, **_value_payload(value)}


def from_contract(data: Dict[str, Any]) -> BigInteger:
    """
    Десериализация big_integer контракта.

    Raises:
        jsonschema.ValidationError: Нарушение схемы
        pydantic.ValidationError: Ненормализованные цифры или отрицательный ноль
    """
    validate_big_integer(data)
    return _value_from_payload(data)


def division_result_to_contract(result: DivisionResult) -> Dict[str, Any]:
    """Сериализация DivisionResult в division_result контракт."""
    return {
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "quotient": _value_payload(result.quotient),
        "remainder": _value_payload(result.remainder),
    }


def division_result_from_contract(data: Dict[str, Any]) -> DivisionResult:
    """
    Десериализация division_result контракта.

    Raises:
        jsonschema.ValidationError: Нарушение схемы
        pydantic.ValidationError: Ненормализованные цифры или отрицательный ноль
    """
    validate_division_result(data)
    return DivisionResult(
        quotient=_value_from_payload(data["quotient"]),
        remainder=_value_from_payload(data["remainder"]),
    )
