"""Complex DFT primitive used by the coefficient/sample transforms.

Thin wrapper over :mod:`numpy.fft` (pocketfft, mixed radix) so every transform
goes through one place that validates its input.  No normalization is applied
in the forward direction; the inverse carries the usual ``1/m`` factor.

Functions
---------
fft
    Forward complex DFT of a 1-D vector.
ifft
    Inverse complex DFT of a 1-D vector.
"""

from __future__ import annotations

import logging

import numpy as np

from trig_polys.errors import ShapeError

logger = logging.getLogger(__name__)


def _as_vector(x) -> np.ndarray:
    z = np.asarray(x)
    if z.ndim != 1:
        raise ShapeError(f"DFT input must be 1D, got shape {z.shape}")
    return z


def fft(x) -> np.ndarray:
    r"""Forward complex DFT :math:`X_k = \sum_j x_j e^{-2\pi i jk/m}`.

    Single precision input stays single precision (complex64); everything
    else is computed in complex128.
    """
    z = _as_vector(x)
    logger.debug("forward DFT, length=%d dtype=%s", z.shape[0], z.dtype)
    return np.fft.fft(z)


def ifft(x) -> np.ndarray:
    """Inverse complex DFT, normalized by ``1/m``."""
    z = _as_vector(x)
    logger.debug("inverse DFT, length=%d dtype=%s", z.shape[0], z.dtype)
    return np.fft.ifft(z)
