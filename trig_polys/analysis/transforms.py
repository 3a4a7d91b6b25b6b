"""Coefficient <-> sample transforms in O(n log n).

A polynomial of harmonic degree ``n`` is sampled on the implicit angular grid
:math:`x_i = 2\\pi i/m`, ``i = 0..m-1``, with ``m = 2n+1`` points, which is
exactly enough to determine its ``2n+1`` coefficients.

Functions
---------
sample_points
    The angular grid for ``m`` samples.
evaluate
    Coefficients -> samples, via one complex DFT on a Hermitian-packed buffer.
evaluate_t
    Adjoint (transpose) of :func:`evaluate`.
interpolatev
    Samples -> flat coefficient vector; inverse of :func:`evaluate`.
interpolate
    Samples -> :class:`~trig_polys.models.trig_poly.TrigPoly`.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Union

import numpy as np

from trig_polys.analysis.dft import fft
from trig_polys.errors import ShapeError
from trig_polys.models.trig_poly import TrigPoly, _common_dtype, flat_shape

logger = logging.getLogger(__name__)

VectorOrPoly = Union[TrigPoly, Any]


def _flat_input(u: VectorOrPoly) -> np.ndarray:
    if isinstance(u, TrigPoly):
        return u.to_vector()
    u = np.asarray(u)
    return u.astype(_common_dtype(u), copy=False)


def sample_points(m: Union[TrigPoly, int]) -> np.ndarray:
    """Uniform grid ``2*pi*i/m`` for ``i = 0..m-1``.

    ``m`` is an odd sample count, or a polynomial whose ``degree`` is used.
    """
    if isinstance(m, TrigPoly):
        m = m.degree
    try:
        m = operator.index(m)
    except TypeError:
        raise ShapeError(f"Sample count must be an integer, got {m!r}") from None
    if m <= 0 or m % 2 != 1:
        raise ShapeError(f"Sample count must be a positive odd number, got {m}")
    return 2.0 * np.pi * np.arange(m) / float(m)


def evaluate(u: VectorOrPoly) -> np.ndarray:
    """Evaluate a polynomial on its ``2n+1`` uniformly spaced sample points.

    Parameters
    ----------
    u:
        A :class:`TrigPoly` or its flat vector ``[a0, ac..., as...]``.

    Returns
    -------
    ndarray
        Real samples at ``sample_points(2n+1)``, same dtype as the input.

    Notes
    -----
    The half-coefficients are placed at conjugate-symmetric bins,
    ``z[k] = (ac[k] + i as[k])/2`` and ``z[m-k] = (ac[k] - i as[k])/2``, so
    the forward DFT of ``z`` is real up to rounding. The imaginary part is
    discarded without checking.
    """
    u = _flat_input(u)
    m, n = flat_shape(u)

    ctype = np.result_type(u.dtype, np.complex64)
    z = np.empty(m, dtype=ctype)
    z[0] = u[0]
    up = u[1 : n + 1]
    un = u[n + 1 : m]
    z[1 : n + 1] = (up + 1j * un) / 2
    z[m - 1 : n : -1] = (up - 1j * un) / 2

    logger.debug("evaluate: n=%d m=%d", n, m)
    return np.real(fft(z)).astype(u.dtype, copy=False)


def evaluate_t(u: VectorOrPoly) -> np.ndarray:
    """Adjoint of :func:`evaluate` with respect to the standard inner product.

    For vectors ``u, v`` of equal odd length,
    ``dot(evaluate(u), v) == dot(u, evaluate_t(v))`` up to rounding.

    Returns ``[Re(X[0..n]), reversed(Im(X[n+1..m-1]))]`` where ``X = fft(u)``.
    """
    u = _flat_input(u)
    m, n = flat_shape(u)

    x = fft(u)
    out = np.concatenate((np.real(x[: n + 1]), np.imag(x[n + 1 : m])[::-1]))
    return out.astype(u.dtype, copy=False)


def interpolatev(u: Any) -> np.ndarray:
    """Flat coefficient vector of the polynomial taking sample values ``u``.

    Inverse of :func:`evaluate`: ``interpolatev(evaluate(c)) == c`` up to
    rounding. All entries of :func:`evaluate_t` are divided by ``n + 1/2``
    and the constant term by a further factor of two.
    """
    u = _flat_input(u)
    m, n = flat_shape(u)

    out = evaluate_t(u)
    out /= n + 0.5
    out[0] /= 2
    return out


def interpolate(u: Any) -> TrigPoly:
    """Polynomial taking sample values ``u`` on ``sample_points(len(u))``."""
    return TrigPoly.from_vector(interpolatev(u))
