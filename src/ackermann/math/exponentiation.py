"""
Binary Exponentiation — base^exp для натуральных чисел

Модуль вычисляет точную степень натуральных чисел повторным возведением
в квадрат (exponentiation by squaring): число умножений пропорционально
количеству бит в exp, а не самому exp.

Встроенный pow() здесь не используется сознательно: алгоритм должен
работать только через примитивы natural-типа (умножение, тест бита,
сдвиг вправо), без float и без неявных приведений.

Вырожденные случаи (проверяются в этом порядке):
    base == 0 или exp == 1  →  base
    base == 1 или exp == 0  →  1

Следствие порядка проверок: binary_pow(0, 0) == 0.
"""

from src.ackermann.math.naturals import (
    N0,
    N1,
    halve,
    lowest_bit,
    validate_natural,
)


def binary_pow(base: int, exp: int) -> int:
    """
    Точное возведение в степень base^exp.

    Алгоритм:
        out = 1
        while exp > 1:
            if exp & 1: out *= base
            base *= base
            exp >>= 1
        return out * base

    Цикл останавливается на exp == 1, поэтому последний множитель
    домножается после цикла, без лишнего возведения в квадрат.

    Args:
        base: Основание (натуральное)
        exp: Показатель (натуральное)

    Returns:
        base^exp (натуральное, без потери точности)

    Raises:
        NaturalDomainViolation: Если base или exp не натуральные

    Examples:
        >>> binary_pow(2, 10)
        1024
        >>> binary_pow(3, 0)
        1
        >>> binary_pow(0, 5)
        0
        >>> binary_pow(7, 1)
        7
    """
    validate_natural(base, "base")
    validate_natural(exp, "exp")

    if base == N0 or exp == N1:
        return base

    if base == N1 or exp == N0:
        return N1

    out = N1
    while exp > N1:
        if lowest_bit(exp):
            out *= base
        base *= base
        exp = halve(exp)

    return out * base
