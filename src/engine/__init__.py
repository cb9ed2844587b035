"""Engine — разбор и вычисление выражений над числами произвольной длины."""

from .arithmetic_engine import (
    EXPRESSION_PATTERN,
    ArithmeticEngine,
    EngineConfig,
    InvalidFormat,
    UnexpectedOperator,
    evaluate,
)

__all__ = [
    "EXPRESSION_PATTERN",
    "ArithmeticEngine",
    "EngineConfig",
    "InvalidFormat",
    "UnexpectedOperator",
    "evaluate",
]
