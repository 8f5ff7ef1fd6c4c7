"""
SecurePass Core Module
=======================

Data models and the error taxonomy. The engine lives in
:mod:`securepass.core.engine`.
"""

from securepass.core.errors import (
    EmptyAlphabetError,
    RandomSourceError,
    SecurePassError,
    UnknownTemplateError,
    UnsatisfiableConstraintError,
    ValidationError,
)
from securepass.core.models import (
    CharacterClass,
    DistributionAudit,
    GenerationOptions,
    GenerationReport,
    PasswordPattern,
    PasswordTemplate,
    StrengthResult,
    StrengthTier,
)

__all__ = [
    "CharacterClass",
    "DistributionAudit",
    "EmptyAlphabetError",
    "GenerationOptions",
    "GenerationReport",
    "PasswordPattern",
    "PasswordTemplate",
    "RandomSourceError",
    "SecurePassError",
    "StrengthResult",
    "StrengthTier",
    "UnknownTemplateError",
    "UnsatisfiableConstraintError",
    "ValidationError",
]
