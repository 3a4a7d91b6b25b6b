"""Direct evaluation at arbitrary points, independent of the DFT machinery.

Useful as an oracle for the transforms and for point queries off the uniform
sample grid. Cost is O(n) per point.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from trig_polys.errors import DegreeError
from trig_polys.models.trig_poly import TrigPoly, as_degree


def basis(n: int, x: Any) -> np.ndarray:
    """Basis row ``[1, cos(x)..cos(nx), sin(x)..sin(nx)]``.

    ``basis(p.n, x) @ p.to_vector() == p(x)``. For array ``x`` the result has
    shape ``x.shape + (2n+1,)``.
    """
    n = as_degree(n)
    if n < 0:
        raise DegreeError(f"n must be >= 0, got {n}")
    x = np.asarray(x, dtype=float)
    kx = np.multiply.outer(x, np.arange(1, n + 1))
    ones = np.ones(x.shape + (1,))
    return np.concatenate((ones, np.cos(kx), np.sin(kx)), axis=-1)


def evaluate_at(p: TrigPoly, x: Any) -> Any:
    """Value of ``a0 + sum_k ac[k] cos(kx) + as[k] sin(kx)`` at ``x``.

    Scalar ``x`` gives a scalar; array ``x`` gives an array of the same shape.
    The result has the dtype of ``p``.
    """
    values = np.asarray(basis(p.n, x) @ p.to_vector()).astype(p.dtype, copy=False)
    if np.ndim(values) == 0:
        return values[()]
    return values
