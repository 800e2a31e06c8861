"""
Reference Ackermann — классическая рекурсия на явном стеке

Эталонная реализация для сверки значений на малых аргументах:

    A(0, n) = n + 1
    A(m, 0) = A(m - 1, 1)
    A(m, n) = A(m - 1, A(m, n - 1))

Рекурсия развёрнута в цикл с явным стеком отложенных значений m, поэтому
стек интерпретатора не растёт. Число шагов равно числу вызовов наивной
рекурсии и быстро становится огромным, поэтому работа ограничена max_steps.
"""

from typing import Final

from src.ackermann.math.hyperoperation import HyperOpResourceExhausted
from src.ackermann.math.naturals import N0, N1, validate_natural

# Бюджет шагов по умолчанию (A(3, 8) требует ~2.8 млн шагов)
REFERENCE_MAX_STEPS_DEFAULT: Final[int] = 10_000_000


def ackermann_reference(
    m: int,
    n: int,
    max_steps: int = REFERENCE_MAX_STEPS_DEFAULT,
) -> int:
    """
    A(m, n) по определению, через явный стек.

    Args:
        m: Первый аргумент (натуральное)
        n: Второй аргумент (натуральное)
        max_steps: Максимальное число шагов редукции

    Returns:
        A(m, n)

    Raises:
        NaturalDomainViolation: Если m или n не натуральные
        HyperOpResourceExhausted: Если превышен max_steps

    Examples:
        >>> ackermann_reference(2, 3)
        9
        >>> ackermann_reference(3, 3)
        61
    """
    validate_natural(m, "m")
    validate_natural(n, "n")

    pending = [m]
    steps = 0
    while pending:
        steps += 1
        if steps > max_steps:
            raise HyperOpResourceExhausted(
                f"Reference Ackermann exceeded max_steps={max_steps}"
            )

        m = pending.pop()
        if m == N0:
            n += N1
        elif n == N0:
            pending.append(m - N1)
            n = N1
        else:
            pending.append(m - N1)
            pending.append(m)
            n -= N1

    return n
