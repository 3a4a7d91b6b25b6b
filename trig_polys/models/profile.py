"""Numeric profile -- precision and tolerance settings in one place.

A NumericProfile groups the parameters that decide how results are compared
for a given floating-point precision.  It can be:

- Looked up from a dtype via :meth:`NumericProfile.for_dtype`
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np


SUPPORTED_DTYPES = ("float32", "float64")

_DEFAULT_TOLERANCES = {
    "float64": (1e-10, 1e-10),
    "float32": (1e-4, 1e-4),
}


@dataclass(frozen=True)
class NumericProfile:
    """Frozen numeric settings for one floating-point precision.

    Fields
    ------
    dtype : str
        Name of the floating dtype, one of ``"float32"`` or ``"float64"``.
    rtol : float
        Relative tolerance for approximate comparisons.
    atol : float
        Absolute tolerance for approximate comparisons.
    """

    dtype: str = "float64"
    rtol: float = 1e-10
    atol: float = 1e-10

    def __post_init__(self) -> None:
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {self.dtype!r}")
        if self.rtol < 0 or self.atol < 0:
            raise ValueError(f"Tolerances must be >= 0, got rtol={self.rtol}, atol={self.atol}")

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.dtype)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def for_dtype(cls, dtype: Any, **overrides: Any) -> NumericProfile:
        """Default profile for ``dtype`` with optional overrides.

        Example::

            profile = NumericProfile.for_dtype(np.float32, rtol=1e-3)
        """
        name = np.dtype(dtype).name
        if name not in _DEFAULT_TOLERANCES:
            raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {name!r}")
        rtol, atol = _DEFAULT_TOLERANCES[name]
        base: Dict[str, Any] = dict(dtype=name, rtol=rtol, atol=atol)
        base.update(overrides)
        return cls(**base)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> NumericProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        return cls(**dict(d))
