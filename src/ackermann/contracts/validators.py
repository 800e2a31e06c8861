"""
JSON Schema Contract Validators

Проверка JSON payload запроса и результата A(m, n) по контрактам
contracts/schema/ackermann_request.json и contracts/schema/ackermann_result.json.

Валидатор каждой схемы строится один раз (meta-validation схемы при загрузке)
и переиспользуется. Нарушение контракта → ContractViolation со списком
всех ошибок, а не только первой.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

# Корень проекта: 4 уровня вверх от этого файла
SCHEMA_DIR = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"

REQUEST_CONTRACT = "ackermann_request"
RESULT_CONTRACT = "ackermann_result"


class ContractViolation(ValueError):
    """
    Payload не соответствует JSON Schema контракту.

    Attributes:
        contract: Имя нарушенного контракта
        errors: Ошибки в виде "<json path>: <message>", отсортированные по пути
    """

    def __init__(self, contract: str, errors: List[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract} contract violated: " + "; ".join(errors))


def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


@lru_cache(maxsize=None)
def contract_validator(schema_name: str) -> Draft202012Validator:
    """Валидатор контракта (строится один раз на схему)."""
    return Draft202012Validator(load_schema(schema_name))


def _check_contract(schema_name: str, data: Dict[str, Any]) -> None:
    errors = sorted(
        contract_validator(schema_name).iter_errors(data),
        key=lambda e: list(e.path),
    )
    if errors:
        raise ContractViolation(
            schema_name, [f"{e.json_path}: {e.message}" for e in errors]
        )


def validate_ackermann_request(data: Dict[str, Any]) -> None:
    """
    Проверка payload запроса.

    Raises:
        ContractViolation: Если payload не соответствует ackermann_request.json
    """
    _check_contract(REQUEST_CONTRACT, data)


def validate_ackermann_result(data: Dict[str, Any]) -> None:
    """
    Проверка payload результата.

    Raises:
        ContractViolation: Если payload не соответствует ackermann_result.json
    """
    _check_contract(RESULT_CONTRACT, data)
