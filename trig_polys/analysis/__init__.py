"""Transforms and arithmetic on :class:`~trig_polys.models.trig_poly.TrigPoly`.

Design principle:
  - The container (models) only stores and validates coefficients.
  - Analysis maps coefficients to samples and back through one complex DFT,
    and builds arithmetic on top of those transforms.

All functions are pure: they allocate and return new arrays or polynomials.
"""

from .padding import pad_by, pad_to, truncate
from .transforms import evaluate, evaluate_t, interpolate, interpolatev, sample_points
from .pointwise import basis, evaluate_at
from .arithmetic import add, allclose, divide, multiply, negate, promote, scale, subtract
from .tables import harmonics_table, samples_table

__all__ = [
    "pad_to",
    "pad_by",
    "truncate",
    "sample_points",
    "evaluate",
    "evaluate_t",
    "interpolatev",
    "interpolate",
    "basis",
    "evaluate_at",
    "promote",
    "negate",
    "add",
    "subtract",
    "multiply",
    "scale",
    "divide",
    "allclose",
    "harmonics_table",
    "samples_table",
]
