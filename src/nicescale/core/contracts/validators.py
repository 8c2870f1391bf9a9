"""
JSON Schema Contract Validators

Проверка входящих запросов на построение тиков (tick_request.json) до
создания TickRequest. Схема проверяет форму данных: пара чисел в domain,
целый tick_count >= 1, известный mode. NaN проходит тип number и
отсекается уже моделью.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator


TICK_REQUEST_SCHEMA = "tick_request"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов из contracts/schema/ (package data).

    Каждая схема проходит meta-validation при первой загрузке и кэшируется.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# TICK REQUEST VALIDATOR
# =============================================================================


class TickRequestValidator:
    """Валидатор tick_request контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or _SCHEMA_LOADER).load_schema(TICK_REQUEST_SCHEMA)
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения, упорядоченные по пути поля в запросе."""
        return iter(sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.path))))


def validate_tick_request(data: Dict[str, Any]) -> None:
    """
    Проверка dict запроса против tick_request.json.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    TickRequestValidator().validate(data)
