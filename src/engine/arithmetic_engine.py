"""Arithmetic Engine — разбор и вычисление выражения "a + b" / "a - b"

Точка входа вычислителя:
- Разбор и валидация выражения по грамматике (regex, полное совпадение)
- Диспетчеризация по оператору (сложение / вычитание)
- Применение знака и рендеринг результата в строку

Грамматика (полное совпадение, только ASCII-пробелы и ASCII-цифры):
    \\s*  digits  \\s*  [+-]  \\s*  digits  \\s*

Ошибки:
- InvalidFormat: выражение не соответствует грамматике (ошибка ввода)
- UnexpectedOperator: оператор вне {+, -} дошёл до диспетчеризации
  (нарушение внутреннего инварианта, а не ошибка пользователя)

Engine stateless: хранит только immutable конфигурацию, поэтому один
экземпляр можно использовать из нескольких потоков.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Final, Optional

from src.core.contracts import validate_evaluation_request, validate_evaluation_result
from src.core.domain.expression import EvaluationResult, Operator, ParsedExpression
from src.core.math.digit_sequence import to_literal
from src.core.math.digitwise_arithmetic import add_magnitudes, subtract_magnitudes

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# operand1, operator, operand2; re.ASCII исключает не-ASCII цифры и пробелы
EXPRESSION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\s*(\d+)\s*([+-])\s*(\d+)\s*", re.ASCII
)

INVALID_FORMAT_MESSAGE: Final[str] = (
    "Invalid expression format. Expected format: 'operand1 + or - operand2'"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Выражение не соответствует грамматике "operand1 (+|-) operand2".

    Выражение отвергается целиком, частичного восстановления нет.
    Восстановление возможно только через повторный ввод исправленного выражения.
    """


class UnexpectedOperator(RuntimeError):
    """
    Оператор вне {+, -} дошёл до диспетчеризации.

    Грамматика допускает только "+" и "-", поэтому это исключение означает
    дефект в коде, а не ошибку ввода. Вызывающий код должен отличать его
    от InvalidFormat.
    """


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация Arithmetic Engine.

    Параметры ограничения входных данных.
    """

    # Максимальная длина операнда в цифрах (None = без ограничения)
    max_operand_digits: Optional[int] = None

    def __post_init__(self):
        if self.max_operand_digits is not None and self.max_operand_digits < 1:
            raise ValueError(
                f"max_operand_digits must be >= 1, got {self.max_operand_digits}"
            )


# =============================================================================
# ENGINE
# =============================================================================


class ArithmeticEngine:
    """Вычислитель выражений над целыми числами произвольной длины.

    Порядок работы evaluate:
    1. Разбор выражения (parse) → ParsedExpression
    2. Диспетчеризация по оператору (compute)
    3. Поразрядное сложение или вычитание
    4. Нормализация и рендеринг результата
    """

    def __init__(self, config: EngineConfig | None = None):
        """Инициализация Engine.

        Args:
            config: конфигурация engine (опционально, используется default)
        """
        self.config = config or EngineConfig()

    def parse(self, expression: str) -> ParsedExpression:
        """Разбор выражения в (operand1, operator, operand2).

        Args:
            expression: выражение вида "123 + 456"

        Returns:
            ParsedExpression

        Raises:
            InvalidFormat: если выражение не соответствует грамматике
                или операнд превышает max_operand_digits
        """
        match = EXPRESSION_PATTERN.fullmatch(expression)
        if match is None:
            logger.info("Rejected expression %r: grammar mismatch", expression)
            raise InvalidFormat(INVALID_FORMAT_MESSAGE)

        operand1, operator, operand2 = match.groups()

        limit = self.config.max_operand_digits
        if limit is not None and max(len(operand1), len(operand2)) > limit:
            logger.info("Rejected expression %r: operand longer than %d digits", expression, limit)
            raise InvalidFormat(f"Operand exceeds the limit of {limit} digits")

        parsed = ParsedExpression(
            operand1=operand1,
            operator=Operator(operator),
            operand2=operand2,
        )
        logger.debug("Parsed expression: %s", parsed.to_text())
        return parsed

    def compute(self, operand1: str, operator: Operator | str, operand2: str) -> str:
        """Диспетчеризация по оператору и вычисление результата.

        Args:
            operand1: левый операнд (Decimal Literal)
            operator: Operator или его символ
            operand2: правый операнд (Decimal Literal)

        Returns:
            Результат как строка (со знаком "-" для отрицательного)

        Raises:
            UnexpectedOperator: если оператор не "+" и не "-"
        """
        try:
            resolved = Operator(operator)
        except ValueError as e:
            logger.error("Unexpected operator reached dispatch: %r", operator)
            raise UnexpectedOperator(f"Unexpected operator: {operator}") from e

        if resolved is Operator.ADD:
            return to_literal(add_magnitudes(operand1, operand2))

        is_negative, digits = subtract_magnitudes(operand1, operand2)
        return ("-" if is_negative else "") + to_literal(digits)

    def evaluate_detailed(self, expression: str) -> EvaluationResult:
        """Вычисление выражения с возвратом полной модели результата.

        Raises:
            InvalidFormat: выражение не соответствует грамматике
            UnexpectedOperator: нарушение внутреннего инварианта
        """
        parsed = self.parse(expression)
        value = self.compute(parsed.operand1, parsed.operator, parsed.operand2)
        return EvaluationResult(
            expression=expression,
            operator=parsed.operator,
            value=value,
        )

    def evaluate(self, expression: str) -> str:
        """Вычисление выражения.

        Args:
            expression: выражение вида "987654321 - 123456789"

        Returns:
            Результат как строка, например "864197532" или "-5"
        """
        return self.evaluate_detailed(expression).value

    def evaluate_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Вычисление по JSON payload с проверкой контрактов.

        Args:
            data: запрос {"expression": "..."} (evaluation_request)

        Returns:
            Результат {"expression", "operator", "value"} (evaluation_result)

        Raises:
            ValidationError: payload не соответствует контракту
            InvalidFormat: выражение не соответствует грамматике
        """
        validate_evaluation_request(data)
        payload = self.evaluate_detailed(data["expression"]).model_dump(mode="json")
        validate_evaluation_result(payload)
        return payload


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def evaluate(expression: str) -> str:
    """Вычисление выражения engine'ом с конфигурацией по умолчанию.

    Raises:
        InvalidFormat: выражение не соответствует грамматике
        UnexpectedOperator: нарушение внутреннего инварианта
    """
    return ArithmeticEngine().evaluate(expression)
