"""Tests for polynomial arithmetic and precision promotion."""

from __future__ import annotations

import numpy as np
import pytest

from trig_polys import (
    NumericProfile,
    TrigPoly,
    add,
    allclose,
    divide,
    multiply,
    negate,
    pad_to,
    random_trig_poly,
    scale,
    subtract,
)
from trig_polys.analysis import promote


@pytest.fixture
def polys():
    p1 = random_trig_poly(102, rng=1)
    p2 = random_trig_poly(201, rng=2)
    return p1, p2


@pytest.fixture
def x():
    return np.linspace(0.0, 2.0 * np.pi, 2000)


class TestAgainstPointwise:
    """Every operator must agree with the same operation on point values."""

    def test_negate(self, polys, x) -> None:
        p1, _ = polys
        np.testing.assert_allclose((-p1)(x), -(p1(x)))

    def test_add(self, polys, x) -> None:
        p1, p2 = polys
        np.testing.assert_allclose((p1 + p2)(x), p1(x) + p2(x), rtol=1e-10, atol=1e-10)

    def test_subtract(self, polys, x) -> None:
        p1, p2 = polys
        np.testing.assert_allclose((p1 - p2)(x), p1(x) - p2(x), rtol=1e-10, atol=1e-10)

    def test_multiply(self, polys, x) -> None:
        p1, p2 = polys
        np.testing.assert_allclose((p1 * p2)(x), p1(x) * p2(x), rtol=1e-8, atol=1e-8)


class TestAlgebra:
    def test_add_commutes_exactly(self, polys) -> None:
        p1, p2 = polys
        assert p1 + p2 == p2 + p1
        assert add(p1, p2) == add(p2, p1)

    def test_multiply_commutes_exactly(self, polys) -> None:
        p1, p2 = polys
        assert p1 * p2 == p2 * p1

    def test_degrees(self, polys) -> None:
        p1, p2 = polys
        assert (p1 + p2).n == max(p1.n, p2.n)
        assert multiply(p1, p2).n == p1.n + p2.n

    def test_subtract_self_is_zero(self, polys) -> None:
        p1, _ = polys
        d = subtract(p1, p1)
        assert d == TrigPoly(0.0, np.zeros(p1.n), np.zeros(p1.n))

    def test_negate_coefficients(self) -> None:
        assert negate(TrigPoly(1.0, [2.0], [-3.0])) == TrigPoly(-1.0, [-2.0], [3.0])

    def test_add_pads_shorter_operand(self) -> None:
        p = TrigPoly(1.0, [1.0, 2.0], [3.0, 4.0])
        q = TrigPoly(0.5, [10.0], [20.0])
        assert p + q == TrigPoly(1.5, [11.0, 2.0], [23.0, 4.0])

    def test_product_of_first_harmonics(self) -> None:
        # cos(x) * sin(x) = sin(2x) / 2
        c = TrigPoly(0.0, [1.0], [0.0])
        s = TrigPoly(0.0, [0.0], [1.0])
        prod = c * s
        assert prod.n == 2
        np.testing.assert_allclose(prod.to_vector(), [0.0, 0.0, 0.0, 0.0, 0.5], atol=1e-14)

        # cos(x)^2 = 1/2 + cos(2x)/2
        np.testing.assert_allclose((c * c).to_vector(), [0.5, 0.0, 0.5, 0.0, 0.0], atol=1e-14)

    def test_multiply_by_zero_degree_polynomials(self) -> None:
        a = TrigPoly.constant(2.0)
        b = TrigPoly.constant(3.0)
        prod = a * b
        assert prod.n == 0
        assert prod.a0 == pytest.approx(6.0)


class TestScalars:
    def test_add_scalar_shifts_constant(self, polys) -> None:
        p1, _ = polys
        assert (p1 + 3).a0 == p1.a0 + 3
        assert add(p1, 3.5).a0 == p1.a0 + 3.5
        np.testing.assert_array_equal((p1 + 3).ac, p1.ac)

    def test_scalar_addition_commutes(self, polys) -> None:
        p1, _ = polys
        assert p1 + np.pi == np.pi + p1

    def test_scalar_subtraction_order(self) -> None:
        p = TrigPoly(1.0, [2.0], [3.0])
        assert p - 1.0 == TrigPoly(0.0, [2.0], [3.0])
        assert 1.0 - p == TrigPoly(0.0, [-2.0], [-3.0])

    def test_scalar_multiplication_commutes(self, polys) -> None:
        p1, _ = polys
        assert p1 * np.pi == np.pi * p1

    def test_scalar_multiplication_skips_transform(self, polys) -> None:
        p1, _ = polys
        q = p1 * 2.0
        assert q.n == p1.n
        np.testing.assert_array_equal(q.to_vector(), 2.0 * p1.to_vector())

    def test_scale_matches_constant_product(self, polys) -> None:
        p1, _ = polys
        c = -1.75
        assert allclose(scale(p1, c), multiply(p1, TrigPoly.constant(c)))

    def test_division(self, polys) -> None:
        p1, _ = polys
        assert p1 / np.pi == p1 * (1 / np.pi)
        assert divide(p1, 4.0) == scale(p1, 0.25)

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            TrigPoly(1.0, [], []) / 0

    def test_unsupported_operands(self) -> None:
        p = TrigPoly(1.0, [2.0], [3.0])
        with pytest.raises(TypeError):
            p + "a"
        with pytest.raises(TypeError):
            p * (1 + 2j)
        with pytest.raises(TypeError):
            p / p
        with pytest.raises(TypeError):
            p + np.ones(3)
        with pytest.raises(TypeError):
            add(1.0, 2.0)


class TestPromotion:
    def test_wider_poly_wins(self) -> None:
        p = TrigPoly.constant(np.float32(2)) + TrigPoly.constant(np.float64(3))
        assert p.dtype == np.float64

    def test_single_precision_kept(self) -> None:
        p = TrigPoly.constant(np.float32(2)) + np.float32(3)
        assert p.dtype == np.float32

    def test_python_scalar_does_not_widen(self) -> None:
        p = random_trig_poly(3, rng=0, dtype=np.float32)
        assert (p + 1.5).dtype == np.float32
        assert (p * 1.5).dtype == np.float32
        assert (p / 3).dtype == np.float32

    def test_numpy_float64_scalar_widens(self) -> None:
        p = random_trig_poly(3, rng=0, dtype=np.float32)
        assert (p + np.float64(1.5)).dtype == np.float64

    def test_double_plus_single_scalar(self) -> None:
        p = TrigPoly.constant(np.float64(4)) + np.float32(3)
        assert p.dtype == np.float64

    def test_mixed_product(self) -> None:
        p32 = random_trig_poly(3, rng=0, dtype=np.float32)
        p64 = random_trig_poly(2, rng=1)
        prod = p32 * p64
        assert prod.dtype == np.float64
        assert prod.n == 5

    def test_promote_scalar(self) -> None:
        p = random_trig_poly(2, rng=0)
        a, b = promote(p, 2)
        assert a == p
        assert b == TrigPoly.constant(2.0)
        b2, a2 = promote(2, p)
        assert a2 == p
        assert b2 == TrigPoly.constant(2.0)


class TestAllclose:
    def test_pads_before_comparing(self) -> None:
        p = TrigPoly(1.0, [2.0], [3.0])
        assert allclose(p, pad_to(p, 4))
        assert not allclose(p, p + 1e-3)

    def test_custom_profile(self) -> None:
        p = TrigPoly(1.0, [2.0], [3.0])
        loose = NumericProfile.for_dtype(np.float64, rtol=0.0, atol=1e-2)
        assert allclose(p, p + 1e-3, profile=loose)

    def test_single_precision_tolerance(self) -> None:
        p = random_trig_poly(8, rng=2, dtype=np.float32)
        q = p * TrigPoly.constant(np.float32(1))
        assert allclose(p, q)
