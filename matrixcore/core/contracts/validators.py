"""
JSON Schema контракт словарного представления матрицы

Схема лежит в schema/matrix.json рядом с модулем и проверяет только
структуру: обязательные поля, типы, отсутствие лишних ключей.
Согласованность n_rows/n_cols со строками проверяет MatrixPayload.

Matrix.from_payload прогоняет словарь через validate_matrix_payload
до построения модели, поэтому лишний ключ отклоняется ValidationError.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"

MATRIX_SCHEMA = "matrix"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Результат кэшируется по (schema_name, schema_dir): повторный вызов
    возвращает тот же объект.

    Raises:
        FileNotFoundError: Если файла schema_dir/<schema_name>.json нет
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


def _format_error(error: ValidationError) -> str:
    location = "".join(
        f"[{part}]" if isinstance(part, int) else f".{part}" for part in error.absolute_path
    )
    return f"payload{location}: {error.message}"


class MatrixContractValidator:
    """
    Проверка словаря {"n_rows", "n_cols", "rows"} против matrix.json.

    Args:
        schema: Готовая схема; по умолчанию загружается matrix.json
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema if schema is not None else load_schema(MATRIX_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое (по приоритету jsonschema) нарушение схемы
        """
        self._validator.validate(dict(data))

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(dict(data))

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(dict(data))

    def describe_errors(self, data: Mapping[str, Any]) -> List[str]:
        """Все нарушения в виде 'payload.rows[0][1]: <сообщение>', по пути."""
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [_format_error(error) for error in errors]


@lru_cache(maxsize=1)
def _matrix_validator() -> MatrixContractValidator:
    return MatrixContractValidator()


def validate_matrix_payload(data: Mapping[str, Any]) -> None:
    """
    Структурная проверка словарного представления матрицы.

    Raises:
        ValidationError: Если данные не соответствуют matrix.json
    """
    _matrix_validator().validate(data)
