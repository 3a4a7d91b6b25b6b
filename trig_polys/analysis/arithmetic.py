"""Arithmetic on trigonometric polynomials.

Addition and scaling act on coefficients directly. Multiplication goes through
the sample domain: both operands are evaluated on ``2n+1`` points with
``n = n1 + n2`` (the exact degree of the product), multiplied pointwise and
interpolated back, which costs O(n log n) instead of the O(n^2) convolution.

Scalars are promoted to constant polynomials. Python scalars are weakly typed
(``numpy.result_type`` rules), so they never widen a float32 polynomial, while
a numpy float64 scalar does.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Optional, Tuple

import numpy as np

from trig_polys.analysis.padding import pad_to
from trig_polys.analysis.transforms import evaluate, interpolate
from trig_polys.models.profile import NumericProfile
from trig_polys.models.trig_poly import TrigPoly

logger = logging.getLogger(__name__)


def _check_real(c: Any) -> None:
    if not isinstance(c, numbers.Real):
        raise TypeError(f"Expected a TrigPoly or a real scalar, got {type(c).__name__}")


def promote(p: Any, q: Any) -> Tuple[TrigPoly, TrigPoly]:
    """Return both operands as polynomials of one common dtype.

    A real scalar becomes an ``n = 0`` polynomial; the shared dtype is the
    wider of the two operand precisions.
    """
    if not isinstance(p, TrigPoly):
        if not isinstance(q, TrigPoly):
            raise TypeError("At least one operand must be a TrigPoly")
        q2, p2 = promote(q, p)
        return p2, q2
    if isinstance(q, TrigPoly):
        dt = np.result_type(p.dtype, q.dtype)
        return p.astype(dt), q.astype(dt)

    _check_real(q)
    dt = np.result_type(p.dtype, q)
    return p.astype(dt), TrigPoly.constant(dt.type(q))


def negate(p: TrigPoly) -> TrigPoly:
    return TrigPoly(-p.a0, -p.ac, -p.as_)


def add(p1: Any, p2: Any) -> TrigPoly:
    """Sum of two polynomials (or a polynomial and a scalar).

    The result has degree ``max(n1, n2)``.
    """
    p1, p2 = promote(p1, p2)
    n = max(p1.n, p2.n)
    p1 = pad_to(p1, n)
    p2 = pad_to(p2, n)
    return TrigPoly(p1.a0 + p2.a0, p1.ac + p2.ac, p1.as_ + p2.as_)


def subtract(p1: Any, p2: Any) -> TrigPoly:
    if not isinstance(p2, TrigPoly):
        _check_real(p2)
        return add(p1, -p2)
    return add(p1, negate(p2))


def scale(p: TrigPoly, c: Any) -> TrigPoly:
    """Multiply every coefficient of ``p`` by the scalar ``c``."""
    _check_real(c)
    p, _ = promote(p, c)
    c = p.dtype.type(c)
    return TrigPoly(p.a0 * c, p.ac * c, p.as_ * c)


def divide(p: TrigPoly, c: Any) -> TrigPoly:
    """Divide ``p`` by the scalar ``c``; same as ``scale(p, 1 / c)``."""
    _check_real(c)
    if c == 0:
        raise ZeroDivisionError("Cannot divide a TrigPoly by zero")
    return scale(p, 1 / c)


def multiply(p1: Any, p2: Any) -> TrigPoly:
    """Product of two polynomials, computed in the sample domain.

    The result has degree ``n1 + n2``. If either operand is a scalar the
    transform is skipped and :func:`scale` is used.
    """
    if not isinstance(p1, TrigPoly):
        return scale(p2, p1)
    if not isinstance(p2, TrigPoly):
        return scale(p1, p2)

    p1, p2 = promote(p1, p2)
    n = p1.n + p2.n
    logger.debug("multiply: n1=%d n2=%d -> n=%d", p1.n, p2.n, n)
    return interpolate(evaluate(pad_to(p1, n)) * evaluate(pad_to(p2, n)))


def allclose(p1: Any, p2: Any, profile: Optional[NumericProfile] = None) -> bool:
    """Approximate equality after padding both operands to a common degree.

    Tolerances come from ``profile``, by default the profile of the common
    dtype of the operands.
    """
    p1, p2 = promote(p1, p2)
    if profile is None:
        profile = NumericProfile.for_dtype(p1.dtype)
    n = max(p1.n, p2.n)
    return bool(
        np.allclose(
            pad_to(p1, n).to_vector(),
            pad_to(p2, n).to_vector(),
            rtol=profile.rtol,
            atol=profile.atol,
        )
    )
