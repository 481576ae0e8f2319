"""
Contract Validation Module

Модуль для валидации и сериализации JSON контрактов BigInteger engine.
"""

from .serialization import (
    CONTRACT_SCHEMA_VERSION,
    division_result_from_contract,
    division_result_to_contract,
    from_contract,
    to_contract,
)
from .validators import (
    BigIntegerValidator,
    ContractValidator,
    DivisionResultValidator,
    SchemaLoader,
    validate_big_integer,
    validate_division_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    "DivisionResultValidator",
    # Functions
    "validate_big_integer",
    "validate_division_result",
    # Serialization
    "CONTRACT_SCHEMA_VERSION",
    "to_contract",
    "from_contract",
    "division_result_to_contract",
    "division_result_from_contract",
]
