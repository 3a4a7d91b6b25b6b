"""Exception taxonomy for trigonometric polynomial contracts.

Both classes derive from :class:`ValueError` so callers that already guard
numeric code with ``except ValueError`` keep working.
"""

from __future__ import annotations


class TrigPolyError(ValueError):
    """Base class for contract violations raised by :mod:`trig_polys`."""


class ShapeError(TrigPolyError):
    """Coefficient arrays have incompatible shapes.

    Raised when the cosine and sine coefficient lengths differ, when a flat
    coefficient vector has even length, or when an input is not 1-D.
    """


class DegreeError(TrigPolyError):
    """Requested harmonic degree is incompatible with the polynomial.

    Raised when padding to a smaller degree or truncating to a higher one.
    """
