"""
Naturals — Arbitrary-Precision Non-Negative Integer Primitives

Модуль задаёт натуральные числа (arbitrary-precision non-negative integers)
поверх встроенного Python int и набор примитивов, которых достаточно для
вычисления гипероператоров:
- Проверка домена (только int >= 0, без bool и float)
- Вычитание без ухода в отрицательные значения
- Тест младшего бита и сдвиг вправо на 1 бит (для binary exponentiation)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Натуральное число всегда >= 0
2. Float никогда не используется (точность важнее всего)
3. Отрицательный результат вычитания → NaturalUnderflow, а не wrap-around
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

N0: Final[int] = 0
N1: Final[int] = 1
N2: Final[int] = 2
N3: Final[int] = 3

# Числа длиннее этого порога описываются в сообщениях об ошибках через
# bit_length: str() огромного int медленный и ограничен
# sys.get_int_max_str_digits().
DESCRIBE_MAX_BITS: Final[int] = 256


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NaturalDomainViolation(ValueError):
    """
    Значение вне домена натуральных чисел.

    Возникает на входе публичных функций, если аргумент отрицательный,
    не является int (float, str, None) или является bool.
    """
    pass


class NaturalUnderflow(ArithmeticError):
    """
    Вычитание дало бы отрицательный результат.

    Означает нарушенный инвариант вызывающего кода (minuend >= subtrahend),
    поэтому никогда не перехватывается внутри библиотеки.
    """
    pass


# =============================================================================
# ПРОВЕРКА ДОМЕНА
# =============================================================================


def describe_natural(value: int) -> str:
    """
    Короткое текстовое описание целого числа для сообщений об ошибках.

    Examples:
        >>> describe_natural(42)
        '42'
        >>> describe_natural(2**1000)
        '<1001-bit integer>'
    """
    if value.bit_length() > DESCRIBE_MAX_BITS:
        sign = "-" if value < 0 else ""
        return f"<{sign}{value.bit_length()}-bit integer>"
    return str(value)


def is_natural(value: object) -> bool:
    """
    Проверка, является ли значение натуральным числом.

    bool отвергается явно: True/False формально являются int в Python,
    но как аргументы гипероператора это почти всегда ошибка вызова.

    Examples:
        >>> is_natural(0)
        True
        >>> is_natural(10**100)
        True
        >>> is_natural(-1)
        False
        >>> is_natural(2.0)
        False
        >>> is_natural(True)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_natural(value: object, name: str) -> int:
    """
    Валидация натурального числа.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        NaturalDomainViolation: Если value не int, bool или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise NaturalDomainViolation(
            f"{name} must be a non-negative integer, got {type(value).__name__} {value!r}"
        )

    if value < 0:
        raise NaturalDomainViolation(
            f"{name} must be non-negative, got {describe_natural(value)}"
        )

    return value


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def natural_sub(minuend: int, subtrahend: int) -> int:
    """
    Вычитание натуральных чисел.

    Args:
        minuend: Уменьшаемое
        subtrahend: Вычитаемое

    Returns:
        minuend - subtrahend (>= 0)

    Raises:
        NaturalUnderflow: Если minuend < subtrahend
    """
    if minuend < subtrahend:
        raise NaturalUnderflow(
            f"Natural subtraction underflow: "
            f"{describe_natural(minuend)} - {describe_natural(subtrahend)} < 0"
        )
    return minuend - subtrahend


def lowest_bit(value: int) -> bool:
    """Тест младшего бита."""
    return bool(value & N1)


def halve(value: int) -> int:
    """Сдвиг вправо на 1 бит (floor division by two)."""
    return value >> N1
