"""Coefficient container for real trigonometric polynomials.

A :class:`TrigPoly` of harmonic degree ``n`` represents

.. math::

    R(x) = a_0 + \\sum_{k=1}^{n} a^c_k \\cos(kx) + a^s_k \\sin(kx)

Its flat vector encoding is ``[a0, ac_1..ac_n, as_1..as_n]`` (length ``2n+1``),
which is the layout the transforms in :mod:`trig_polys.analysis` operate on.
"""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from trig_polys.errors import DegreeError, ShapeError
from trig_polys.models.profile import SUPPORTED_DTYPES


def _common_dtype(*parts: Any) -> np.dtype:
    """Most precise floating dtype among ``parts``.

    Empty plain sequences carry no dtype information and are skipped, so
    ``TrigPoly(np.float32(1), [], [])`` stays single precision.
    """
    dtypes = []
    for part in parts:
        arr = np.asarray(part)
        if arr.size == 0 and not isinstance(part, np.ndarray):
            continue
        dtypes.append(arr.dtype)
    if not dtypes:
        return np.dtype(np.float64)

    dt = np.result_type(*dtypes)
    if np.issubdtype(dt, np.complexfloating):
        raise TypeError(f"Coefficients must be real, got dtype {dt}")
    if np.issubdtype(dt, np.floating):
        if dt.name not in SUPPORTED_DTYPES:
            raise TypeError(f"Only {SUPPORTED_DTYPES} coefficients are supported, got dtype {dt}")
        return dt
    if np.issubdtype(dt, np.integer) or np.issubdtype(dt, np.bool_):
        return np.dtype(np.float64)
    raise TypeError(f"Coefficients must be real numbers, got dtype {dt}")


def as_degree(m: Any) -> int:
    """Harmonic degree argument as an int; non-integral values raise ``DegreeError``."""
    try:
        return operator.index(m)
    except TypeError:
        raise DegreeError(f"Degree must be an integer, got {m!r}") from None


def flat_shape(u: np.ndarray) -> Tuple[int, int]:
    """Return ``(m, n)`` for a 1-D vector of odd length ``m = 2n+1``.

    Raises
    ------
    ShapeError
        If ``u`` is not 1-D or its length is even.
    """
    if u.ndim != 1:
        raise ShapeError(f"Expected a 1D vector, got shape {u.shape}")
    m = int(u.shape[0])
    if m % 2 != 1:
        raise ShapeError(f"Only odd-length vectors are supported, got length {m}")
    return m, (m - 1) // 2


@dataclass(frozen=True, eq=False)
class TrigPoly:
    """Real trigonometric polynomial stored by its coefficients.

    Attributes
    ----------
    a0:
        Constant coefficient (numpy floating scalar).
    ac:
        Cosine coefficients for harmonics ``1..n``, read-only 1-D array.
    as_:
        Sine coefficients for harmonics ``1..n``, read-only 1-D array.

    Notes
    -----
    - ``n`` is derived from ``len(ac)``; it is never stored.
    - All three fields share one floating dtype, the most precise among the
      inputs. Integers are promoted to float64.
    - Arrays are copied on construction and made read-only.
    """

    a0: Any
    ac: Any
    as_: Any

    # Defer to our operators instead of numpy broadcasting over the instance.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        dt = _common_dtype(self.a0, self.ac, self.as_)

        a0 = np.asarray(self.a0)
        if a0.ndim != 0:
            raise ShapeError(f"a0 must be a scalar, got shape {a0.shape}")

        ac = np.array(self.ac, dtype=dt)
        as_ = np.array(self.as_, dtype=dt)
        if ac.ndim != 1 or as_.ndim != 1:
            raise ShapeError(f"ac and as_ must be 1D, got shapes {ac.shape} and {as_.shape}")
        if ac.shape != as_.shape:
            raise ShapeError(
                f"sin and cos coefficients must have same length, got {ac.shape[0]} and {as_.shape[0]}"
            )
        ac.setflags(write=False)
        as_.setflags(write=False)

        object.__setattr__(self, "a0", dt.type(a0))
        object.__setattr__(self, "ac", ac)
        object.__setattr__(self, "as_", as_)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def constant(cls, c: Any) -> TrigPoly:
        """Constant polynomial (``n = 0``) with the precision of ``c``."""
        dt = _common_dtype(c)
        return cls(c, np.empty(0, dtype=dt), np.empty(0, dtype=dt))

    @classmethod
    def from_vector(cls, u: Any) -> TrigPoly:
        """Build from a flat vector ``[a0, ac..., as...]`` of length ``2n+1``."""
        u = np.asarray(u)
        m, n = flat_shape(u)
        u = u.astype(_common_dtype(u), copy=False)
        return cls(u[0], u[1 : n + 1], u[n + 1 : m])

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TrigPoly:
        """Reconstruct from :meth:`to_dict` output."""
        dt = np.dtype(d.get("dtype", "float64"))
        return cls(
            dt.type(d["a0"]),
            np.asarray(d["ac"], dtype=dt),
            np.asarray(d["as"], dtype=dt),
        )

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------

    @property
    def n(self) -> int:
        """Harmonic degree, ``len(ac) == len(as_)``."""
        return int(self.ac.shape[0])

    @property
    def degree(self) -> int:
        """Number of coefficients, ``2n + 1``."""
        return 2 * self.n + 1

    @property
    def dtype(self) -> np.dtype:
        return self.ac.dtype

    def to_vector(self) -> np.ndarray:
        """Flat vector ``[a0, ac..., as...]``; inverse of :meth:`from_vector`."""
        return np.concatenate((np.asarray([self.a0], dtype=self.dtype), self.ac, self.as_))

    def astype(self, dtype: Any) -> TrigPoly:
        """Same coefficients converted to another floating dtype."""
        dt = np.dtype(dtype)
        if not np.issubdtype(dt, np.floating):
            raise TypeError(f"TrigPoly requires a floating dtype, got {dt}")
        return TrigPoly(dt.type(self.a0), self.ac.astype(dt), self.as_.astype(dt))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return {
            "dtype": self.dtype.name,
            "a0": float(self.a0),
            "ac": self.ac.tolist(),
            "as": self.as_.tolist(),
        }

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrigPoly):
            return NotImplemented
        return bool(
            self.n == other.n
            and self.a0 == other.a0
            and np.array_equal(self.ac, other.ac)
            and np.array_equal(self.as_, other.as_)
        )

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Operators (implemented in trig_polys.analysis.arithmetic)
    # ------------------------------------------------------------------

    def __call__(self, x: Any) -> Any:
        from trig_polys.analysis.pointwise import evaluate_at

        return evaluate_at(self, x)

    def __neg__(self) -> TrigPoly:
        from trig_polys.analysis.arithmetic import negate

        return negate(self)

    def __add__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import add

        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import add

        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import subtract

        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import subtract

        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import multiply

        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import multiply

        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other: Any) -> TrigPoly:
        from trig_polys.analysis.arithmetic import divide

        if not isinstance(other, numbers.Real):
            return NotImplemented
        return divide(self, other)


def _is_operand(x: Any) -> bool:
    return isinstance(x, (TrigPoly, numbers.Real))


def construct(*args: Any) -> TrigPoly:
    """Build a :class:`TrigPoly` from any of its accepted encodings.

    - ``construct(a0, ac, as_)``: explicit coefficients.
    - ``construct(c)`` with a real scalar: the constant polynomial.
    - ``construct(u)`` with a sequence: flat vector of odd length.
    """
    if len(args) == 3:
        return TrigPoly(*args)
    if len(args) == 1:
        (x,) = args
        if np.ndim(x) == 0:
            return TrigPoly.constant(x)
        return TrigPoly.from_vector(x)
    raise TypeError(f"construct() takes 1 or 3 arguments, got {len(args)}")


def to_flat_vector(p: TrigPoly) -> np.ndarray:
    """Flat vector ``[a0, ac..., as...]`` of length ``2n+1``."""
    return p.to_vector()


def degree(p: TrigPoly) -> int:
    """Number of independent real coefficients, ``2n + 1``."""
    return p.degree


def random_trig_poly(
    n: int,
    *,
    rng: Optional[np.random.Generator | int] = None,
    dtype: Any = np.float64,
) -> TrigPoly:
    """Polynomial of harmonic degree ``n`` with standard normal coefficients.

    Parameters
    ----------
    n:
        Harmonic degree, ``>= 0``.
    rng:
        Generator or seed passed to :func:`numpy.random.default_rng`.
    dtype:
        Floating dtype of the result.
    """
    n = as_degree(n)
    if n < 0:
        raise DegreeError(f"n must be >= 0, got {n}")
    gen = np.random.default_rng(rng)
    u = gen.standard_normal(2 * n + 1).astype(np.dtype(dtype))
    return TrigPoly.from_vector(u)
