"""
SecurePass Core Data Models
============================

Pydantic models for password generation and strength estimation.
These models are transient: constructed per call, never cached or
persisted, and free of presentation concerns (no colours, no localised
label text).

All models are serialisable to JSON and consumed by both the CLI output
layer and library callers.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CharacterClass(str, enum.Enum):
    """Character-class taxonomy shared by the builder and the estimator.

    ``OTHER`` is never requested for generation; the estimator uses it for
    characters outside the four canonical ranges (spaces, non-ASCII).
    """

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"
    OTHER = "other"


class StrengthTier(str, enum.Enum):
    """Qualitative strength tier, one per score value 0..4."""

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @classmethod
    def from_score(cls, score: int) -> StrengthTier:
        """Return the tier for a score in ``[0, 4]``."""
        return _TIERS_BY_SCORE[max(0, min(4, score))]

    @property
    def score(self) -> int:
        return _TIERS_BY_SCORE.index(self)


_TIERS_BY_SCORE: list[StrengthTier] = list(StrengthTier)


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class GenerationOptions(BaseModel):
    """Immutable password generation request.

    Types are checked strictly at construction; range rules (length in
    ``[4, 128]``, at least one class) are enforced by the generator so
    that they surface as :class:`~securepass.core.errors.ValidationError`.

    Attributes:
        length: Number of characters to produce.
        include_uppercase: Draw from ``A-Z``.
        include_lowercase: Draw from ``a-z``.
        include_numbers: Draw from ``0-9``.
        include_symbols: Draw from the canonical symbol range.
        exclude_similar: Remove visually confusable glyphs ``0 O 1 l I |``.
        prevent_repeating: Forbid two identical adjacent characters.
        exclude_characters: Extra characters removed from the alphabet.
        require_each_class: Every represented class appears at least once.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    prevent_repeating: bool = False
    exclude_characters: str = ""
    require_each_class: bool = False

    @property
    def selected_classes(self) -> tuple[CharacterClass, ...]:
        """Selected classes in canonical order."""
        flags = (
            (CharacterClass.UPPERCASE, self.include_uppercase),
            (CharacterClass.LOWERCASE, self.include_lowercase),
            (CharacterClass.NUMBERS, self.include_numbers),
            (CharacterClass.SYMBOLS, self.include_symbols),
        )
        return tuple(cls for cls, enabled in flags if enabled)


class PasswordTemplate(BaseModel):
    """Named generation preset."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    description: str
    options: GenerationOptions
    readable_format: bool = False


# ===================================================================== #
#  Strength Models
# ===================================================================== #


class PasswordPattern(BaseModel):
    """A detected low-entropy pattern.

    Attributes:
        pattern_type: ``sequential_chars``, ``repeated_chars``,
            ``keyboard_pattern``, ``weak_token`` or ``common_password``.
        value: The matched substring.
        position: Start index of the match.
        penalty: Bits deducted for this pattern.
    """

    pattern_type: str
    value: str
    position: int = 0
    penalty: float = 0.0


class StrengthResult(BaseModel):
    """Password strength estimate.

    ``score`` and ``label`` are the only classification outputs; mapping a
    tier to a colour or translated text is left to the presentation layer.

    Attributes:
        score: Discrete score in ``[0, 4]``.
        label: Tier identifier for ``score``.
        entropy: Effective entropy in bits after pattern deductions.
        raw_entropy: ``length * log2(pool_size)`` before deductions.
        pool_size: Effective alphabet size inferred from the string.
        length: Password length in characters.
        distinct_characters: Number of distinct characters used.
        character_classes: Classes observed in the string.
        patterns: Detected low-entropy patterns.
        feedback: Short improvement hints.
        crack_time: Average brute-force time at 10^9 guesses per second.
    """

    score: int = Field(default=0, ge=0, le=4)
    label: StrengthTier = StrengthTier.VERY_WEAK
    entropy: float = Field(default=0.0, ge=0.0)
    raw_entropy: float = Field(default=0.0, ge=0.0)
    pool_size: int = 0
    length: int = 0
    distinct_characters: int = 0
    character_classes: list[CharacterClass] = Field(default_factory=list)
    patterns: list[PasswordPattern] = Field(default_factory=list)
    feedback: list[str] = Field(default_factory=list)
    crack_time: str = "instant"


class GenerationReport(BaseModel):
    """A generated password together with its strength estimate.

    The password is excluded from ``repr`` so that reports can be logged
    or printed in tracebacks without revealing it.
    """

    password: str = Field(repr=False)
    strength: StrengthResult
    alphabet_size: int
    theoretical_entropy: float
    options: GenerationOptions


# ===================================================================== #
#  Distribution Audit Models
# ===================================================================== #


class DistributionAudit(BaseModel):
    """Chi-squared uniformity check of the character draw.

    Attributes:
        alphabet_size: Number of candidate characters ``k``.
        sample_size: Number of draws ``N``.
        chi_squared: Pearson statistic against the uniform ``N / k``.
        p_value: Upper-tail probability with ``k - 1`` degrees of freedom.
        significance: Rejection threshold for ``p_value``.
        passed: ``p_value >= significance``.
        max_deviation: Largest relative deviation of a count from ``N / k``.
        counts: Per-character draw counts in alphabet order.
    """

    alphabet_size: int
    sample_size: int
    chi_squared: float
    p_value: float
    significance: float
    passed: bool
    max_deviation: float
    counts: list[int] = Field(default_factory=list)
