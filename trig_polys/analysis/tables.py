"""DataFrame views of a polynomial for inspection and export.

Functions
---------
harmonics_table
    One row per harmonic order with cosine/sine coefficients, amplitude and phase.
samples_table
    Sample grid and values from :func:`~trig_polys.analysis.transforms.evaluate`.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from trig_polys.analysis.transforms import evaluate, sample_points
from trig_polys.models.trig_poly import TrigPoly


def harmonics_table(p: TrigPoly) -> pd.DataFrame:
    """Coefficients of ``p`` per harmonic order.

    Convention: ``cos_k = ac[k]``, ``sin_k = as[k]``,
    ``amplitude = hypot(cos, sin)``, ``phase = atan2(sin, cos)``.
    Order 0 carries ``a0`` in the ``cos`` column and zero in ``sin``.

    Returns
    -------
    DataFrame
        Columns ``order``, ``cos``, ``sin``, ``amplitude``, ``phase``;
        ``n + 1`` rows.
    """
    cos = np.concatenate((np.asarray([p.a0], dtype=p.dtype), p.ac))
    sin = np.concatenate((np.zeros(1, dtype=p.dtype), p.as_))
    return pd.DataFrame(
        {
            "order": np.arange(p.n + 1, dtype=int),
            "cos": cos,
            "sin": sin,
            "amplitude": np.hypot(cos, sin),
            "phase": np.arctan2(sin, cos),
        }
    )


def samples_table(p: TrigPoly) -> pd.DataFrame:
    """Values of ``p`` on its ``2n+1`` uniform sample points.

    Returns
    -------
    DataFrame
        Columns ``x`` (angle in radians) and ``value``.
    """
    return pd.DataFrame({"x": sample_points(p), "value": evaluate(p)})
