"""Degree changes that only add or remove zero-order coefficients.

Functions
---------
pad_to
    Grow a polynomial (or its flat vector) to harmonic degree ``m`` with zeros.
pad_by
    Grow a polynomial by ``k`` harmonics.
truncate
    Drop trailing harmonics down to degree ``m``.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np

from trig_polys.errors import DegreeError
from trig_polys.models.trig_poly import TrigPoly, as_degree, flat_shape


def _pad_vector(u: Any, m: int) -> np.ndarray:
    """Pad a flat vector of length ``2n+1`` to ``2m+1``.

    The layout is ``[a0, ac(n), as(n)]``, so zeros go after each half block,
    not at the end: ``[a0, ac, 0.., as, 0..]``.
    """
    u = np.asarray(u)
    xn, xs = flat_shape(u)
    if m < xs:
        raise DegreeError(f"Cannot pad to smaller degree: {m} < {xs}")
    zeros = np.zeros(m - xs, dtype=u.dtype)
    return np.concatenate((u[: xs + 1], zeros, u[xs + 1 : xn], zeros))


def pad_to(p: Union[TrigPoly, Any], m: int) -> Union[TrigPoly, np.ndarray]:
    """Increase the harmonic degree of ``p`` to ``m``, padding with zeros.

    Parameters
    ----------
    p:
        A :class:`TrigPoly`, or a flat coefficient vector of odd length.
    m:
        Target harmonic degree; must be ``>= p.n``.

    Returns
    -------
    TrigPoly or ndarray
        Same kind as the input. ``a0`` and the dtype are unchanged.
    """
    m = as_degree(m)
    if not isinstance(p, TrigPoly):
        return _pad_vector(p, m)

    if m < p.n:
        raise DegreeError(f"Cannot pad to smaller degree: {m} < {p.n}")
    zeros = np.zeros(m - p.n, dtype=p.dtype)
    return TrigPoly(p.a0, np.concatenate((p.ac, zeros)), np.concatenate((p.as_, zeros)))


def pad_by(p: TrigPoly, k: int) -> TrigPoly:
    """Increase the harmonic degree of ``p`` by ``k``."""
    return pad_to(p, p.n + as_degree(k))


def truncate(p: TrigPoly, m: int) -> TrigPoly:
    """Reduce the harmonic degree of ``p`` to ``m`` by deleting coefficients.

    This is lossy unless the dropped coefficients are zero; the caller decides
    whether that is acceptable.
    """
    m = as_degree(m)
    if m > p.n:
        raise DegreeError(f"Cannot truncate to higher degree: {m} > {p.n}")
    if m < 0:
        raise DegreeError(f"Cannot truncate to negative degree: {m}")
    return TrigPoly(p.a0, p.ac[:m], p.as_[:m])
