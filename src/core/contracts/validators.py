"""
JSON Schema Contract Validators

Проверка JSON payload'ов вычислителя по формальным контрактам.
Оба валидатора собираются один раз при импорте модуля и переиспользуются
всеми вызовами.

Схемы (src/core/contracts/schema/):
- evaluation_request.json: запрос {"expression": "..."}
- evaluation_result.json: результат {"expression", "operator", "value"}
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

REQUEST_SCHEMA: Final = "evaluation_request"
RESULT_SCHEMA: Final = "evaluation_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с meta-валидацией.

    По умолчанию читает каталог schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени (без расширения .json).

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

    def build_validator(self, schema_name: str) -> Draft202012Validator:
        """Валидатор Draft 2020-12 для схемы schema_name."""
        return Draft202012Validator(self.load_schema(schema_name))


# =============================================================================
# VALIDATORS
# =============================================================================

_SCHEMA_LOADER = SchemaLoader()
_REQUEST_VALIDATOR: Final = _SCHEMA_LOADER.build_validator(REQUEST_SCHEMA)
_RESULT_VALIDATOR: Final = _SCHEMA_LOADER.build_validator(RESULT_SCHEMA)


def validate_evaluation_request(data: Dict[str, Any]) -> None:
    """
    Валидация evaluation_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _REQUEST_VALIDATOR.validate(data)


def validate_evaluation_result(data: Dict[str, Any]) -> None:
    """
    Валидация evaluation_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _RESULT_VALIDATOR.validate(data)
