"""
Hyperoperation — итеративный вычислитель иерархии гипероператоров

Модуль вычисляет n-й гипероператор H_n(a, b) для натуральных чисел:
    H_0(a, b) = b + 1            (successor, a игнорируется)
    H_1(a, b) = a + b            (addition)
    H_2(a, b) = a * b            (multiplication)
    H_3(a, b) = a ^ b            (exponentiation, binary_pow)
    H_n(a, 0) = 1                (n >= 4)
    H_n(a, b) = H_{n-1}(a, H_n(a, b - 1))   (n >= 4, right-associated)

Рекурсия идёт только по порядку n, по b выполняется цикл:
    acc = a
    повторить b - 1 раз: acc = H_{n-1}(a, acc)

Глубина рекурсии ограничена n, число итераций ограничено b.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат точный (arbitrary precision), float не используется
2. Глубина рекурсии <= order (контролируется HyperOpLimits.max_order)
3. Рост промежуточных значений контролируется HyperOpLimits.max_result_bits
4. RecursionError/MemoryError → HyperOpResourceExhausted (без частичного результата)
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.ackermann.math.exponentiation import binary_pow
from src.ackermann.math.naturals import (
    N0,
    N1,
    N2,
    N3,
    describe_natural,
    lowest_bit,
    validate_natural,
)

# =============================================================================
# ЛИМИТЫ РЕСУРСОВ
# =============================================================================

# Максимальный порядок гипероператора.
# Каждый порядок выше 3 добавляет один кадр стека; значение держит глубину
# рекурсии ниже стандартного sys.getrecursionlimit() == 1000.
MAX_ORDER_DEFAULT: Final[int] = 512

# Максимальный размер промежуточного/итогового результата в битах.
# 2^32 бит ≈ 512 MiB на одно число.
MAX_RESULT_BITS_DEFAULT: Final[int] = 1 << 32


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HyperOpResourceExhausted(RuntimeError):
    """
    Вычисление превысило доступные ресурсы.

    Причины:
    1. order > max_order (заранее, до начала вычислений)
    2. Промежуточный результат превысил max_result_bits
    3. RecursionError или MemoryError интерпретатора

    Частичного результата нет: для роста уровня Аккермана он бессмыслен.
    Повтор вычисления ничего не меняет (функция детерминирована).
    """
    pass


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class HyperOpLimits:
    """Лимиты ресурсов для hyper_op.

    max_result_bits=None отключает контроль размера результата;
    тогда исчерпание памяти проявится как MemoryError интерпретатора.
    """

    max_order: int = MAX_ORDER_DEFAULT
    max_result_bits: Optional[int] = MAX_RESULT_BITS_DEFAULT

    def __post_init__(self):
        if self.max_order < 0:
            raise ValueError(f"max_order must be non-negative, got {self.max_order}")
        if self.max_result_bits is not None and self.max_result_bits <= 0:
            raise ValueError(
                f"max_result_bits must be positive or None, got {self.max_result_bits}"
            )


DEFAULT_LIMITS: Final[HyperOpLimits] = HyperOpLimits()


# =============================================================================
# КОНТРОЛЬ РАЗМЕРА
# =============================================================================


def _check_result_bits(value: int, limits: HyperOpLimits) -> int:
    if limits.max_result_bits is not None and value.bit_length() > limits.max_result_bits:
        raise HyperOpResourceExhausted(
            f"Intermediate result has {value.bit_length()} bits, "
            f"limit is {limits.max_result_bits} bits"
        )
    return value


def _check_pow_bits(base: int, exp: int, limits: HyperOpLimits) -> None:
    """Проверка размера base^exp до вычисления.

    Нижняя граница: bit_length(base^exp) >= (bit_length(base) - 1) * exp + 1
    для base >= 2. Отказ только если результат гарантированно больше лимита.
    """
    if limits.max_result_bits is None or base < N2 or exp < N2:
        return

    min_bits = (base.bit_length() - N1) * exp + N1
    if min_bits > limits.max_result_bits:
        raise HyperOpResourceExhausted(
            f"base^exp would have at least {describe_natural(min_bits)} bits, "
            f"limit is {limits.max_result_bits} bits"
        )


# =============================================================================
# HYPEROPERATION
# =============================================================================


def _hyper_op(order: int, base: int, exp: int, limits: HyperOpLimits) -> int:
    if order == N0:
        return exp + N1
    if order == N1:
        return base + exp
    if order == N2:
        return _check_result_bits(base * exp, limits)
    if order == N3:
        # Нижняя граница отсекает заведомо огромные степени до вычисления,
        # точный размер проверяется после
        _check_pow_bits(base, exp, limits)
        return _check_result_bits(binary_pow(base, exp), limits)

    if exp == N0:
        return N1

    # H_n(1, b) == 1 для n >= 3; цикл дал бы тот же результат за b - 1 шагов
    if base == N1:
        return N1

    # H_3(0, b) == 0 (binary_pow проверяет base == 0 первым), отсюда:
    #   H_4(0, b) == 0 для b >= 1
    #   H_n(0, b) == 1 для чётного b, 0 для нечётного (n >= 5)
    if base == N0:
        if order == N3 + N1:
            return N0
        return N0 if lowest_bit(exp) else N1

    inner = order - N1
    out = base
    remaining = exp - N1
    while remaining > N0:
        out = _check_result_bits(_hyper_op(inner, base, out, limits), limits)
        remaining -= N1

    return out


def hyper_op(
    order: int,
    base: int,
    exp: int,
    limits: Optional[HyperOpLimits] = None,
) -> int:
    """
    Гипероператор порядка order: H_order(base, exp).

    Args:
        order: Порядок гипероператора n (натуральное)
        base: Основание a (натуральное)
        exp: Показатель b (натуральное)
        limits: Лимиты ресурсов (default: DEFAULT_LIMITS)

    Returns:
        H_order(base, exp) (натуральное, точное)

    Raises:
        NaturalDomainViolation: Если какой-либо аргумент не натуральный
        HyperOpResourceExhausted: Если превышен лимит порядка, размера
            результата, глубины стека или памяти

    Examples:
        >>> hyper_op(0, 100, 5)
        6
        >>> hyper_op(2, 6, 7)
        42
        >>> hyper_op(4, 2, 3)
        16
        >>> hyper_op(4, 3, 2)
        27
    """
    validate_natural(order, "order")
    validate_natural(base, "base")
    validate_natural(exp, "exp")

    if limits is None:
        limits = DEFAULT_LIMITS

    if order > limits.max_order:
        raise HyperOpResourceExhausted(
            f"order={order} exceeds max_order={limits.max_order}"
        )

    try:
        return _hyper_op(order, base, exp, limits)
    except RecursionError as e:
        raise HyperOpResourceExhausted(
            f"Recursion depth exhausted at order={order}"
        ) from e
    except MemoryError as e:
        raise HyperOpResourceExhausted(
            f"Memory exhausted at order={order}"
        ) from e
