"""
Digitwise Arithmetic — поразрядное сложение и вычитание

Модуль реализует арифметику над Decimal Literal произвольной длины без
использования целочисленных типов фиксированной разрядности:
- Сравнение модулей (compare_magnitudes / is_smaller)
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow) и определением знака

Все функции чистые: каждая создаёт собственные стеки цифр и не изменяет
входные строки. Сложность O(max(len(a), len(b))).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат нормализован: нет ведущих нулей, кроме единственного "0"
2. Нулевой результат никогда не имеет знака ("-0" невозможен)
3. Вычитание всегда выполняется как max(a, b) - min(a, b)

Сравнение модулей снимает ведущие нули ДО сравнения длин: иначе
"10" и "009" сравнивались бы как 2 цифры против 3 и вычитание
"10 - 009" дало бы неверный результат.
"""

from src.core.math.digit_sequence import (
    DIGIT_BASE,
    from_literal,
    normalize_literal,
    strip_leading_zeros,
)

# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение модулей двух Decimal Literal.

    Алгоритм:
        1. Удалить ведущие нули у обоих операндов
        2. Более короткая строка — меньшее число
        3. При равной длине — лексикографическое сравнение
           (для строк из цифр равной длины совпадает с числовым)

    Args:
        a: Первый операнд (только цифры, ведущие нули допустимы)
        b: Второй операнд

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare_magnitudes("5", "10")
        -1
        >>> compare_magnitudes("007", "7")
        0
        >>> compare_magnitudes("10", "009")
        1
    """
    a = normalize_literal(a)
    b = normalize_literal(b)

    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    if a == b:
        return 0
    elif a < b:
        return -1
    else:
        return 1


def is_smaller(a: str, b: str) -> bool:
    """Проверка, что модуль a строго меньше модуля b."""
    return compare_magnitudes(a, b) < 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitudes(a: str, b: str) -> list[int]:
    """
    Поразрядное сложение двух Decimal Literal.

    На каждом шаге снимается младшая цифра каждого операнда (0, если
    операнд исчерпан), к сумме добавляется перенос:
        sum = d1 + d2 + carry
        digit = sum % 10, carry = sum // 10
    Цикл завершается, когда оба стека пусты и перенос равен 0.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Нормализованный стек результата (старший разряд на вершине)

    Examples:
        >>> from src.core.math.digit_sequence import to_literal
        >>> to_literal(add_magnitudes("999", "1"))
        '1000'
    """
    stack1 = from_literal(a)
    stack2 = from_literal(b)
    result: list[int] = []

    carry = 0
    while stack1 or stack2 or carry:
        digit1 = stack1.pop() if stack1 else 0
        digit2 = stack2.pop() if stack2 else 0

        total = digit1 + digit2 + carry
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    # Операнды с ведущими нулями ("000 + 0") дают нули на вершине
    return strip_leading_zeros(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_magnitudes(a: str, b: str) -> tuple[bool, list[int]]:
    """
    Поразрядное вычитание b из a с определением знака.

    Если |a| < |b|, операнды меняются местами и результат помечается
    отрицательным. Затем вычисляется беззнаковая разность:
        diff = d1 - d2 - borrow
        если diff < 0: diff += 10, borrow = 1, иначе borrow = 0
    Цикл идёт по цифрам уменьшаемого (он не короче вычитаемого после
    нормализации). Ведущие нули снимаются до минимума в одну цифру.

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        (is_negative, digits):
            - is_negative: True только для ненулевого отрицательного результата
            - digits: нормализованный стек модуля разности

    Examples:
        >>> subtract_magnitudes("5", "10")
        (True, [5])
        >>> subtract_magnitudes("10", "10")
        (False, [0])
    """
    is_negative = False
    if is_smaller(a, b):
        a, b = b, a
        is_negative = True

    minuend = from_literal(a)
    subtrahend = from_literal(b)
    result: list[int] = []

    borrow = 0
    while minuend:
        digit1 = minuend.pop()
        digit2 = subtrahend.pop() if subtrahend else 0

        diff = digit1 - digit2 - borrow
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    # Вычитаемое длиннее только за счёт ведущих нулей: оставшиеся цифры равны нулю
    strip_leading_zeros(result)

    if result == [0]:
        is_negative = False

    return (is_negative, result)
