"""
Core math modules для bigint-calc

Поразрядная арифметика над десятичными числами произвольной длины.
"""

# Digit Sequence
from src.core.math.digit_sequence import (
    ASCII_DIGITS,
    DIGIT_BASE,
    from_literal,
    is_decimal_literal,
    normalize_literal,
    strip_leading_zeros,
    to_literal,
)

# Digitwise Arithmetic
from src.core.math.digitwise_arithmetic import (
    add_magnitudes,
    compare_magnitudes,
    is_smaller,
    subtract_magnitudes,
)

__all__ = [
    # Digit Sequence — Constants
    "ASCII_DIGITS",
    "DIGIT_BASE",
    # Digit Sequence — Functions
    "from_literal",
    "is_decimal_literal",
    "normalize_literal",
    "strip_leading_zeros",
    "to_literal",
    # Digitwise Arithmetic — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "is_smaller",
    "subtract_magnitudes",
]
