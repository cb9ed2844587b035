"""
Digit Sequence — поразрядное представление десятичных чисел

Модуль обеспечивает преобразование между десятичной строкой (Decimal Literal)
и последовательностью цифр, с которой работают поразрядные алгоритмы:
- from_literal: строка → стек цифр (старший разряд в начале списка)
- to_literal: стек цифр → строка (стек опустошается)
- strip_leading_zeros: нормализация стека результата
- normalize_literal: нормализация строки (удаление ведущих нулей)

Стек реализован как обычный list[int]: append/pop с конца списка.
После from_literal вызов pop() возвращает младший разряд первым.
Алгоритмы кладут цифры результата начиная с младшего разряда, поэтому
старший разряд оказывается на вершине стека, и to_literal выводит
цифры в правильном порядке слева направо.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый элемент последовательности в диапазоне [0, 9]
2. Последовательность валидного числа никогда не пустая (минимум: "0")
3. Нормализация оставляет минимум одну цифру
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
DIGIT_BASE: Final[int] = 10

# Допустимые символы Decimal Literal (только ASCII)
ASCII_DIGITS: Final[str] = "0123456789"

_ORD_ZERO: Final[int] = ord("0")


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def from_literal(literal: str) -> list[int]:
    """
    Преобразование Decimal Literal в стек цифр.

    Порядок символов сохраняется: старший разряд имеет индекс 0,
    младший находится на вершине стека. Строка не перепроверяется: вызывающий код
    (Arithmetic Engine) гарантирует, что в ней только ASCII-цифры.

    Args:
        literal: Непустая строка из цифр 0-9

    Returns:
        Список цифр в порядке чтения

    Examples:
        >>> from_literal("1203")
        [1, 2, 0, 3]
    """
    return [ord(char) - _ORD_ZERO for char in literal]


def to_literal(digits: list[int]) -> str:
    """
    Вывод стека цифр в строку.

    Стек опустошается: цифры снимаются с вершины, поэтому стек результата
    (старший разряд сверху) превращается в строку слева направо.
    Ведущие нули НЕ удаляются (см. strip_leading_zeros).

    Args:
        digits: Стек цифр (будет опустошён)

    Returns:
        Строковое представление

    Examples:
        >>> to_literal([0, 0, 0, 1])  # 1000, младший разряд снизу
        '1000'
    """
    chars = []
    while digits:
        chars.append(ASCII_DIGITS[digits.pop()])
    return "".join(chars)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """
    Нормализация стека результата: снятие нулей с вершины.

    На вершине стека результата находится старший разряд. Нули снимаются, пока в стеке
    больше одной цифры, так что результат из одних нулей сворачивается в [0].

    Args:
        digits: Стек результата (изменяется на месте)

    Returns:
        Тот же список после нормализации

    Examples:
        >>> strip_leading_zeros([3, 2, 1, 0, 0])
        [3, 2, 1]
        >>> strip_leading_zeros([0, 0, 0])
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def normalize_literal(literal: str) -> str:
    """
    Удаление ведущих нулей из Decimal Literal.

    Examples:
        >>> normalize_literal("000123")
        '123'
        >>> normalize_literal("0000")
        '0'
    """
    return literal.lstrip("0") or "0"


def is_decimal_literal(text: str) -> bool:
    """
    Проверка, что строка является непустым Decimal Literal.

    Принимаются только ASCII-цифры: str.isdigit() здесь не подходит,
    так как пропускает цифры других алфавитов ("٣", "²").
    """
    return bool(text) and all(char in ASCII_DIGITS for char in text)
