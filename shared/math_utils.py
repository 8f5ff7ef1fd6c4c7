"""
SecurePass Mathematical Utilities
==================================

Statistics helpers used by the distribution auditor: symbol histograms
and Pearson's chi-squared goodness-of-fit test.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Abramowitz, M. & Stegun, I. A. (1964). Handbook of Mathematical
        Functions, 26.4.4 and 26.4.5.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating]
IntArray = NDArray[np.integer]


# ============================ Histograms ===================================


def symbol_counts(indices: Sequence[int] | IntArray, size: int) -> IntArray:
    """Histogram of integer symbol indices in ``[0, size)``.

    Args:
        indices: Observed symbol indices.
        size: Number of distinct symbols (histogram length).

    Returns:
        1-D int64 array of length *size* with occurrence counts.

    Raises:
        ValueError: If any index falls outside ``[0, size)``.
    """
    arr = np.asarray(indices, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= size):
        raise ValueError("Symbol index outside histogram range")
    return np.bincount(arr, minlength=size).astype(np.int64)


# ======================== Statistical Tests ================================


def chi_squared_sf(statistic: float, dof: int) -> float:
    """Upper tail probability of the chi-squared distribution.

    Integer degrees of freedom admit a finite sum: for even ``dof`` the
    tail is a truncated Poisson sum, for odd ``dof`` it is ``erfc``
    plus half-integer terms. Each term is evaluated in log space so
    large statistics underflow to zero instead of overflowing.

    Args:
        statistic: Observed chi-squared value.
        dof: Degrees of freedom (at least one).

    Returns:
        ``P(X >= statistic)`` for ``X ~ chi2(dof)``, in ``[0, 1]``.
    """
    if dof < 1:
        raise ValueError("Degrees of freedom must be at least 1")
    if statistic <= 0.0:
        return 1.0

    half = statistic / 2.0
    log_half = math.log(half)
    if dof % 2 == 0:
        head = 0.0
        offset = 0.0
    else:
        head = math.erfc(math.sqrt(half))
        offset = 0.5
    tail = sum(
        math.exp((i + offset) * log_half - half - math.lgamma(i + offset + 1.0))
        for i in range(dof // 2)
    )
    return min(1.0, head + tail)


def chi_squared_test(
    observed: FloatArray | IntArray, expected: FloatArray
) -> tuple[float, float]:
    """Pearson's chi-squared goodness-of-fit test [1].

    Args:
        observed: Observed frequency counts (1-D array of length *k*).
        expected: Expected frequency counts (1-D array of length *k*).

    Returns:
        Tuple of ``(chi2_statistic, p_value)`` with ``k - 1`` degrees of
        freedom; a single category always gives ``p_value == 1``.

    Raises:
        ValueError: If arrays differ in shape or expected contains zeros.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    chi2 = float(np.sum(np.square(observed - expected) / expected))
    if observed.size < 2:
        return chi2, 1.0
    return chi2, chi_squared_sf(chi2, observed.size - 1)
