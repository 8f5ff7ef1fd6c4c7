"""
SecurePass Generators
======================

Alphabet construction, secure random draws and constrained password
generation.
"""

from securepass.generators.charset import alphabet_for, build_character_set
from securepass.generators.password import PasswordGenerator, generate
from securepass.generators.secure_random import (
    RandomSource,
    SystemRandomSource,
    randbelow,
)

__all__ = [
    "PasswordGenerator",
    "RandomSource",
    "SystemRandomSource",
    "alphabet_for",
    "build_character_set",
    "generate",
    "randbelow",
]
