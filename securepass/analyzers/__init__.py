"""
SecurePass Analyzers
=====================

Strength estimation for arbitrary password strings and statistical
auditing of the generator's character draw.
"""

from securepass.analyzers.distribution import DistributionAuditor
from securepass.analyzers.strength import StrengthEstimator, evaluate

__all__ = [
    "DistributionAuditor",
    "StrengthEstimator",
    "evaluate",
]
