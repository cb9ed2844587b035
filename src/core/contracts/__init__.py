"""
Contract Validation Module

Модуль для валидации JSON контрактов вычислителя (запрос и результат).
"""

from .validators import (
    REQUEST_SCHEMA,
    RESULT_SCHEMA,
    SchemaLoader,
    validate_evaluation_request,
    validate_evaluation_result,
)

__all__ = [
    # Schema names
    "REQUEST_SCHEMA",
    "RESULT_SCHEMA",
    # Loader
    "SchemaLoader",
    # Functions
    "validate_evaluation_request",
    "validate_evaluation_result",
]
