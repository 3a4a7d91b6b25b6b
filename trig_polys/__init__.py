"""trig_polys -- real trigonometric polynomials with FFT-based transforms.

A trigonometric polynomial of harmonic degree ``n`` is

    R(x) = a0 + sum_{k=1..n} ac[k] cos(kx) + as[k] sin(kx)

This package provides tools for:
- Storing polynomials by coefficients (immutable :class:`TrigPoly`)
- Evaluating on ``2n+1`` uniform points and interpolating back in O(n log n)
- The adjoint of the evaluation operator
- Arithmetic, with multiplication done in the sample domain
- Direct point evaluation and DataFrame views for inspection

Key principles:
- Single and double precision only; the wider precision wins when mixing
- No silent clamping: out-of-contract inputs raise
  :class:`~trig_polys.errors.ShapeError` or :class:`~trig_polys.errors.DegreeError`

Main subpackages:
- models: Data models (TrigPoly, NumericProfile)
- analysis: DFT primitive, transforms, padding, arithmetic, tables
"""

from .errors import DegreeError, ShapeError, TrigPolyError
from .models import (
    NumericProfile,
    TrigPoly,
    construct,
    degree,
    random_trig_poly,
    to_flat_vector,
)
from .analysis import (
    add,
    allclose,
    basis,
    divide,
    evaluate,
    evaluate_at,
    evaluate_t,
    harmonics_table,
    interpolate,
    interpolatev,
    multiply,
    negate,
    pad_by,
    pad_to,
    sample_points,
    samples_table,
    scale,
    subtract,
    truncate,
)

__version__ = "0.1.0"

__all__ = [
    "TrigPolyError",
    "ShapeError",
    "DegreeError",
    "TrigPoly",
    "NumericProfile",
    "construct",
    "degree",
    "random_trig_poly",
    "to_flat_vector",
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
