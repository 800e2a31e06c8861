"""
Тесты для Hyperoperation

Проверяемые инварианты:
1. Порядки 0-3: successor, addition, multiplication, exponentiation
2. Порядок 0 игнорирует base
3. Порядок >= 4: H_n(a, 0) == 1, тетрация на малых значениях
4. Лимиты ресурсов → HyperOpResourceExhausted
"""

import pytest

from src.ackermann.math.exponentiation import binary_pow
from src.ackermann.math.hyperoperation import (
    DEFAULT_LIMITS,
    MAX_ORDER_DEFAULT,
    MAX_RESULT_BITS_DEFAULT,
    HyperOpLimits,
    HyperOpResourceExhausted,
    hyper_op,
)
from src.ackermann.math.naturals import NaturalDomainViolation


SMALL = range(0, 7)


# =============================================================================
# ТЕСТЫ: Порядки 0-3
# =============================================================================


class TestLowOrders:
    def test_successor(self):
        for b in SMALL:
            for e in SMALL:
                assert hyper_op(0, b, e) == e + 1

    def test_successor_ignores_base(self):
        results = {hyper_op(0, b, 41) for b in (0, 1, 2, 10**40)}
        assert results == {42}

    def test_addition(self):
        for b in SMALL:
            for e in SMALL:
                assert hyper_op(1, b, e) == b + e

    def test_multiplication(self):
        for b in SMALL:
            for e in SMALL:
                assert hyper_op(2, b, e) == b * e

    def test_exponentiation_matches_binary_pow(self):
        for b in SMALL:
            for e in SMALL:
                assert hyper_op(3, b, e) == binary_pow(b, e)

    def test_exponentiation_values(self):
        assert hyper_op(3, 2, 10) == 1024
        assert hyper_op(3, 3, 4) == 81
        assert hyper_op(3, 5, 0) == 1


# =============================================================================
# ТЕСТЫ: Порядки >= 4
# =============================================================================


class TestTetrationAndBeyond:
    def test_tetration_reference_values(self):
        assert hyper_op(4, 2, 2) == 4
        assert hyper_op(4, 2, 3) == 16
        assert hyper_op(4, 3, 2) == 27

    def test_tetration_larger(self):
        assert hyper_op(4, 2, 4) == 65536
        assert hyper_op(4, 3, 3) == 3**27
        assert hyper_op(4, 2, 5) == 2**65536

    def test_exp_one_returns_base(self):
        for order in (4, 5, 6, 10):
            assert hyper_op(order, 7, 1) == 7

    def test_exp_zero_returns_one(self):
        for order in (4, 5, 6, 20):
            for b in (0, 1, 2, 99):
                assert hyper_op(order, b, 0) == 1

    def test_base_one(self):
        for order in (4, 5, 100):
            assert hyper_op(order, 1, 10**30) == 1

    def test_base_two_exp_two_is_four(self):
        """H_n(2, 2) == 4 для всех n >= 1."""
        for order in range(1, 30):
            assert hyper_op(order, 2, 2) == 4

    def test_pentation(self):
        # 2↑↑↑3 = 2↑↑(2↑↑2) = 2↑↑4 = 65536
        assert hyper_op(5, 2, 3) == 65536
        # 3↑↑↑2 = 3↑↑3 = 3^27
        assert hyper_op(5, 3, 2) == 3**27

    def test_base_zero_small(self):
        """H_4(0, b) == 0, H_n(0, b) чередуется 1/0 по чётности b (n >= 5)."""
        for e in range(1, 8):
            assert hyper_op(4, 0, e) == 0
        for order in (5, 6, 9):
            assert [hyper_op(order, 0, e) for e in range(0, 6)] == [1, 0, 1, 0, 1, 0]

    def test_base_zero_matches_recursive_definition(self):
        for order in (4, 5, 6):
            for e in range(1, 8):
                expected = hyper_op(order - 1, 0, hyper_op(order, 0, e - 1))
                assert hyper_op(order, 0, e) == expected, (order, e)

    def test_base_zero_huge_exp_returns(self):
        """Огромный exp при base == 0 не приводит к 10^30 итерациям."""
        assert hyper_op(4, 0, 10**30) == 0
        assert hyper_op(5, 0, 10**30) == 1
        assert hyper_op(5, 0, 10**30 + 1) == 0

    def test_recursive_definition(self):
        """H_n(a, b) == H_{n-1}(a, H_n(a, b - 1))."""
        for order, b, e in [(4, 2, 4), (4, 3, 3), (5, 2, 3)]:
            assert hyper_op(order, b, e) == hyper_op(order - 1, b, hyper_op(order, b, e - 1))


# =============================================================================
# ТЕСТЫ: Домен и лимиты
# =============================================================================


class TestDomain:
    def test_negative_order_rejected(self):
        with pytest.raises(NaturalDomainViolation, match="order"):
            hyper_op(-1, 2, 2)

    def test_negative_base_rejected(self):
        with pytest.raises(NaturalDomainViolation, match="base"):
            hyper_op(2, -2, 2)

    def test_negative_exp_rejected(self):
        with pytest.raises(NaturalDomainViolation, match="exp"):
            hyper_op(2, 2, -2)

    def test_bool_rejected(self):
        with pytest.raises(NaturalDomainViolation):
            hyper_op(True, 2, 2)


class TestHyperOpLimits:
    def test_defaults(self):
        assert DEFAULT_LIMITS.max_order == MAX_ORDER_DEFAULT
        assert DEFAULT_LIMITS.max_result_bits == MAX_RESULT_BITS_DEFAULT

    def test_frozen(self):
        limits = HyperOpLimits()
        with pytest.raises(AttributeError):
            limits.max_order = 10

    def test_invalid_max_order(self):
        with pytest.raises(ValueError, match="max_order"):
            HyperOpLimits(max_order=-1)

    def test_invalid_max_result_bits(self):
        with pytest.raises(ValueError, match="max_result_bits"):
            HyperOpLimits(max_result_bits=0)

    def test_order_above_limit_rejected(self):
        with pytest.raises(HyperOpResourceExhausted, match="max_order"):
            hyper_op(11, 2, 2, HyperOpLimits(max_order=10))

    def test_order_at_limit_allowed(self):
        assert hyper_op(10, 2, 2, HyperOpLimits(max_order=10)) == 4

    def test_pow_bits_checked_before_computing(self):
        limits = HyperOpLimits(max_result_bits=1000)
        assert hyper_op(3, 2, 999, limits) == 2**999
        with pytest.raises(HyperOpResourceExhausted, match="bits"):
            hyper_op(3, 2, 1000, limits)

    def test_pow_result_checked_after_computing(self):
        """Для base=3 нижняя граница (99 + 1 бит) проходит, но 3^99 имеет 157 бит."""
        with pytest.raises(HyperOpResourceExhausted, match="157 bits"):
            hyper_op(3, 3, 99, HyperOpLimits(max_result_bits=100))

    def test_pow_result_within_limit(self):
        assert hyper_op(3, 3, 99, HyperOpLimits(max_result_bits=157)) == 3**99

    def test_tetration_accumulator_checked(self):
        """3↑↑3 = 3^27 = 7625597484987 имеет 43 бита."""
        with pytest.raises(HyperOpResourceExhausted, match="43 bits"):
            hyper_op(4, 3, 3, HyperOpLimits(max_result_bits=30))
        assert hyper_op(4, 3, 3, HyperOpLimits(max_result_bits=43)) == 7625597484987

    def test_result_never_exceeds_limit(self):
        limits = HyperOpLimits(max_result_bits=64)
        for order in range(2, 6):
            for b in range(2, 8):
                for e in range(0, 6):
                    try:
                        value = hyper_op(order, b, e, limits)
                    except HyperOpResourceExhausted:
                        continue
                    assert value.bit_length() <= 64, (order, b, e)

    def test_multiplication_bits_checked(self):
        limits = HyperOpLimits(max_result_bits=64)
        with pytest.raises(HyperOpResourceExhausted, match="bits"):
            hyper_op(2, 2**40, 2**40, limits)

    def test_tetration_exhausts_default_limit(self):
        """2↑↑6 = 2^(2^65536) не помещается в MAX_RESULT_BITS_DEFAULT."""
        with pytest.raises(HyperOpResourceExhausted):
            hyper_op(4, 2, 6)

    def test_unlimited_bits(self):
        limits = HyperOpLimits(max_result_bits=None)
        assert hyper_op(4, 2, 4, limits) == 65536

    def test_recursion_error_translated(self, monkeypatch):
        import src.ackermann.math.hyperoperation as hyperoperation

        def _boom(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(hyperoperation, "_hyper_op", _boom)
        with pytest.raises(HyperOpResourceExhausted, match="Recursion") as exc_info:
            hyperoperation.hyper_op(4, 2, 2)
        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_memory_error_translated(self, monkeypatch):
        import src.ackermann.math.hyperoperation as hyperoperation

        def _boom(*args, **kwargs):
            raise MemoryError()

        monkeypatch.setattr(hyperoperation, "_hyper_op", _boom)
        with pytest.raises(HyperOpResourceExhausted, match="Memory") as exc_info:
            hyperoperation.hyper_op(4, 2, 2)
        assert isinstance(exc_info.value.__cause__, MemoryError)
