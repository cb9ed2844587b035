"""
Domain models and value objects.

Contains the expression value objects: Operator, ParsedExpression, EvaluationResult.
"""

from src.core.domain.expression import (
    RESULT_VALUE_PATTERN,
    EvaluationResult,
    Operator,
    ParsedExpression,
)

__all__ = [
    # Patterns
    "RESULT_VALUE_PATTERN",
    # Expression models
    "Operator",
    "ParsedExpression",
    "EvaluationResult",
]
