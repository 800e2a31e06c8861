"""
Ackermann–Péter function

Двухаргументная функция Аккермана–Петер, выраженная через гипероператоры:

    A(m, n) = H_m(2, n + 3) - 3

Благодаря этому тождеству глубина рекурсии ограничена m (порядком
гипероператора), а не самим значением функции, как в наивной рекурсии
A(m, n) = A(m - 1, A(m, n - 1)).

Инвариант: H_m(2, n + 3) >= 3 для всех m, n >= 0, поэтому вычитание
не уходит в отрицательные значения. Нарушение → NaturalUnderflow.

ВНИМАНИЕ: значения растут астрономически. A(4, 2) = 2^65536 - 3 ещё
вычислимо, A(4, 3) уже нет. Превышение лимитов → HyperOpResourceExhausted.
"""

from typing import Optional

from src.ackermann.math.hyperoperation import HyperOpLimits, hyper_op
from src.ackermann.math.naturals import N2, N3, natural_sub, validate_natural


def A(m: int, n: int, limits: Optional[HyperOpLimits] = None) -> int:
    """
    Функция Аккермана–Петер A(m, n).

    Args:
        m: Первый аргумент (натуральное), задаёт порядок гипероператора
        n: Второй аргумент (натуральное)
        limits: Лимиты ресурсов (default: DEFAULT_LIMITS)

    Returns:
        A(m, n) (натуральное, точное)

    Raises:
        NaturalDomainViolation: Если m или n не натуральные
        HyperOpResourceExhausted: Если вычисление превысило лимиты
        NaturalUnderflow: Если нарушен инвариант H_m(2, n + 3) >= 3

    Examples:
        >>> A(2, 2)
        7
        >>> A(3, 3)
        61
        >>> A(4, 1)
        65533
    """
    validate_natural(m, "m")
    validate_natural(n, "n")

    return natural_sub(hyper_op(m, N2, n + N3, limits), N3)


ackermann = A
