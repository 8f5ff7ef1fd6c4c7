"""
Character Distribution Auditor
===============================

Statistical check that the generator's character draw is uniform over
the alphabet. Draws ``N`` indices with the same bias-free ``randbelow``
the generator uses, counts them, and runs Pearson's chi-squared
goodness-of-fit test against the uniform expectation ``N / k``.

A naive ``byte % k`` mapping fails this audit for alphabet sizes that do
not divide 256 once ``N`` is large enough; rejection sampling passes it.

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable ... Philosophical Magazine, 50(302).
    - NIST SP 800-22 Rev. 1a (2010). A Statistical Test Suite for Random
      and Pseudorandom Number Generators.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from shared.math_utils import chi_squared_test, symbol_counts
from securepass.core.errors import ValidationError
from securepass.core.models import DistributionAudit
from securepass.generators.secure_random import (
    RandomSource,
    SystemRandomSource,
    randbelow,
)


class DistributionAuditor:
    """Chi-squared uniformity audit of single-character draws.

    Usage::

        auditor = DistributionAuditor()
        audit = auditor.audit("ABCDEFGHJK", sample_size=20_000)
        assert audit.passed

    Args:
        random_source: Byte source under audit; defaults to the OS CSPRNG.
        significance: ``p_value`` below this rejects uniformity.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        significance: float = 1e-4,
    ) -> None:
        self._source = random_source or SystemRandomSource()
        self._significance = significance

    def audit(self, alphabet: str, sample_size: int = 10_000) -> DistributionAudit:
        """Sample *sample_size* draws from *alphabet* and test uniformity.

        Args:
            alphabet: Candidate characters (at least two).
            sample_size: Number of draws; at least the alphabet size.

        Returns:
            DistributionAudit with statistic, p-value and counts.

        Raises:
            ValidationError: Alphabet shorter than two characters or
                sample smaller than the alphabet.
        """
        k = len(alphabet)
        if k < 2:
            raise ValidationError("Distribution audit needs at least two characters")
        if sample_size < k:
            raise ValidationError(
                f"Sample size {sample_size} is smaller than the alphabet size {k}"
            )

        draws = [randbelow(self._source, k) for _ in range(sample_size)]
        observed = symbol_counts(draws, k)
        expected = np.full(k, sample_size / k, dtype=np.float64)

        chi2, p_value = chi_squared_test(observed, expected)
        max_deviation = float(np.max(np.abs(observed - expected) / expected))

        return DistributionAudit(
            alphabet_size=k,
            sample_size=sample_size,
            chi_squared=round(chi2, 4),
            p_value=p_value,
            significance=self._significance,
            passed=p_value >= self._significance,
            max_deviation=round(max_deviation, 4),
            counts=[int(c) for c in observed],
        )
