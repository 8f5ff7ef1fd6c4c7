"""
SecurePass -- Secure Password Generation & Strength Estimation
===============================================================

Generates passwords from a cryptographically secure random source under
composition constraints, and scores the strength of any password.

Modules:
    - securepass.generators: Alphabet builder, secure random draws, generator
    - securepass.analyzers: Strength estimator and distribution auditor
    - securepass.core: Pydantic data models, error taxonomy, engine facade
    - securepass.templates: Named generation presets
    - securepass.output: Console rendering and readable formatting
    - securepass.cli: Click-based command-line interface

Library usage::

    from securepass import GenerationOptions, generate, evaluate

    password = generate(GenerationOptions(length=20, exclude_similar=True))
    result = evaluate(password)

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - NIST SP 800-90A Rev. 1 (2015). Random Number Generation Using
      Deterministic Random Bit Generators.
"""

from securepass.analyzers.strength import StrengthEstimator, evaluate
from securepass.core.errors import (
    EmptyAlphabetError,
    RandomSourceError,
    SecurePassError,
    UnsatisfiableConstraintError,
    ValidationError,
)
from securepass.core.models import GenerationOptions, StrengthResult, StrengthTier
from securepass.generators.charset import build_character_set
from securepass.generators.password import PasswordGenerator, generate

__version__ = "1.0.0"

__all__ = [
    "EmptyAlphabetError",
    "GenerationOptions",
    "PasswordGenerator",
    "RandomSourceError",
    "SecurePassError",
    "StrengthEstimator",
    "StrengthResult",
    "StrengthTier",
    "UnsatisfiableConstraintError",
    "ValidationError",
    "build_character_set",
    "evaluate",
    "generate",
]
