"""
Expression — Модели выражения и результата вычисления

Immutable Pydantic модели:
- ParsedExpression: разобранное выражение (operand1, operator, operand2)
- EvaluationResult: результат вычисления с исходным выражением

Модели создаются и потребляются в рамках одного вызова evaluate
и нигде не сохраняются.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.digit_sequence import is_decimal_literal

# =============================================================================
# CONSTANTS
# =============================================================================

# Результат: без ведущих нулей, знак только у ненулевого значения
RESULT_VALUE_PATTERN: Final[str] = r"^(0|-?[1-9][0-9]*)$"


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Арифметический оператор"""

    ADD = "+"
    SUBTRACT = "-"


# =============================================================================
# MODELS
# =============================================================================


class ParsedExpression(BaseModel):
    """
    Разобранное выражение "operand1 operator operand2".

    Immutable модель (frozen=True). Операнды хранятся как есть,
    без удаления ведущих нулей.
    """

    operand1: str = Field(..., description="Левый операнд")
    operator: Operator = Field(..., description="Оператор (+ или -)")
    operand2: str = Field(..., description="Правый операнд")

    model_config = {"frozen": True}

    @field_validator("operand1", "operand2")
    @classmethod
    def validate_decimal_literal(cls, v: str) -> str:
        """Операнд: непустая строка из ASCII-цифр (ведущие нули допустимы)"""
        if not is_decimal_literal(v):
            raise ValueError(f"operand must be a non-empty ASCII decimal literal, got {v!r}")
        return v

    def to_text(self) -> str:
        """Каноническая запись выражения: "a + b"."""
        return f"{self.operand1} {self.operator.value} {self.operand2}"


class EvaluationResult(BaseModel):
    """
    Результат вычисления выражения.

    value: Decimal Literal с опциональным знаком "-", без ведущих нулей.
    Ноль всегда записывается как "0" (никогда "-0").
    """

    expression: str = Field(..., description="Исходное выражение (как передано вызывающим кодом)")
    operator: Operator = Field(..., description="Применённый оператор")
    value: str = Field(..., pattern=RESULT_VALUE_PATTERN, description="Результат вычисления")

    model_config = {"frozen": True}

    @property
    def is_negative(self) -> bool:
        """True для отрицательного результата."""
        return self.value.startswith("-")

    @property
    def magnitude(self) -> str:
        """Модуль результата без знака."""
        return self.value.lstrip("-")
