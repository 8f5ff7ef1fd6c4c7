"""
Password Strength Estimator
============================

Scores any password string, generated or user-typed, from the string
alone. The estimate combines combinatorial entropy with deductions for
low-entropy patterns and maps the result onto five fixed tiers.

Entropy model:
    ``H = length * log2(A)`` where ``A`` is the summed size of the
    canonical character pools actually observed in the string
    (lowercase 26, uppercase 26, digits 10, ASCII symbols 32, other 100).

Pattern deductions (bits):
    - Sequential runs (abc, 987): 2.0 per character
    - Repeated runs (aaa, 111): 2.5 per character
    - Keyboard walks (qwe, asdf): 3.0 per character of the longest match
    - Weak tokens (password, admin): 2.0 per character
    - Exact common password: entropy capped at 5.0

Deductions only ever lower the estimate and are zero for a string that
exhibits none of the patterns.

Score thresholds (bits of effective entropy):
    - < 28: very_weak (0)
    - 28-36: weak (1)
    - 36-60: fair (2)
    - 60-80: strong (3)
    - 80+: very_strong (4)

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Weir, M., Aggarwal, S., Collins, M., & Stern, H. (2010). Testing
      Metrics for Password Creation Policies by Attacking Large Sets of
      Revealed Passwords. CCS.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import math
import re
import string
from typing import Iterable

from securepass.core.models import (
    CharacterClass,
    PasswordPattern,
    StrengthResult,
    StrengthTier,
)


# ===================================================================== #
#  Pools, Thresholds and Pattern Databases
# ===================================================================== #

_POOL_SIZES: dict[CharacterClass, int] = {
    CharacterClass.UPPERCASE: 26,
    CharacterClass.LOWERCASE: 26,
    CharacterClass.NUMBERS: 10,
    CharacterClass.SYMBOLS: len(string.punctuation),
    CharacterClass.OTHER: 100,
}

# Lower bounds (bits) for scores 1..4
SCORE_THRESHOLDS: tuple[float, float, float, float] = (28.0, 36.0, 60.0, 80.0)

SEQUENTIAL_PENALTY = 2.0
REPEATED_PENALTY = 2.5
KEYBOARD_PENALTY = 3.0
WEAK_TOKEN_PENALTY = 2.0
COMMON_PASSWORD_CAP = 5.0

_MIN_RUN = 3
_MIN_TOKEN = 4

_COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password", "123456", "123456789", "12345678", "12345", "1234",
    "1234567", "1234567890", "qwerty", "abc123", "password1",
    "password123", "admin", "letmein", "welcome", "monkey", "dragon",
    "master", "hello", "freedom", "whatever", "qazwsx", "trustno1",
    "111111", "000000", "123123", "654321", "iloveyou", "sunshine",
    "princess", "football", "baseball", "shadow", "superman", "login",
    "passw0rd", "qwerty123", "1q2w3e4r", "1qaz2wsx", "changeme",
    "default", "hunter2", "starwars", "access", "secret",
})

_KEYBOARD_ROWS: tuple[str, ...] = (
    "qwertyuiop", "asdfghjkl", "zxcvbnm",
    "1234567890", "!@#$%^&*()",
    "qazwsxedc", "1qaz2wsx3edc",
)
_KEYBOARD_WALKS: tuple[str, ...] = _KEYBOARD_ROWS + tuple(r[::-1] for r in _KEYBOARD_ROWS)

_WEAK_TOKENS: frozenset[str] = frozenset({
    "password", "passwd", "admin", "login", "user", "root", "guest",
    "test", "demo", "welcome", "master", "secret", "system", "computer",
    "internet", "letmein", "dragon", "monkey", "shadow", "qwerty",
    "love", "hello", "sunshine", "princess", "football", "baseball",
    "summer", "winter", "spring", "autumn", "access", "trustno",
})

_REPEATED_RE = re.compile(r"(.)\1{2,}", re.DOTALL)


class StrengthEstimator:
    """Estimates password strength from the string alone.

    The estimator is stateless apart from its immutable token list, so
    one instance can serve concurrent callers.

    Usage::

        estimator = StrengthEstimator()
        result = estimator.evaluate("Kj#8Mx!nP2Qr7$vW")
        print(result.label.value, f"{result.entropy:.1f} bits")

    Args:
        weak_tokens: Extra words treated as weak tokens, matched
            case-insensitively. Tokens shorter than four characters
            are ignored.
    """

    _GUESSES_PER_SECOND = 1e9

    def __init__(self, weak_tokens: Iterable[str] = ()) -> None:
        extra = {t.lower() for t in weak_tokens if len(t) >= _MIN_TOKEN}
        self._weak_tokens: tuple[str, ...] = tuple(sorted(_WEAK_TOKENS | extra))

    def evaluate(self, password: str) -> StrengthResult:
        """Estimate the strength of *password*.

        An empty string is a valid measurement: score 0, entropy 0.

        Args:
            password: Any string.

        Returns:
            StrengthResult with score, tier and entropy details.
        """
        if not password:
            return StrengthResult(
                score=0,
                label=StrengthTier.VERY_WEAK,
                entropy=0.0,
                feedback=["Password is empty."],
            )

        length = len(password)
        classes = classify(password)
        pool_size = sum(_POOL_SIZES[c] for c in classes)
        raw_entropy = length * math.log2(pool_size) if pool_size > 1 else 0.0

        patterns = self._detect_patterns(password)
        entropy = max(0.0, raw_entropy - sum(p.penalty for p in patterns))

        if password.lower() in _COMMON_PASSWORDS:
            capped = min(entropy, COMMON_PASSWORD_CAP)
            patterns.append(PasswordPattern(
                pattern_type="common_password",
                value=password,
                position=0,
                penalty=round(entropy - capped, 2),
            ))
            entropy = capped

        score = score_for_entropy(entropy)
        return StrengthResult(
            score=score,
            label=StrengthTier.from_score(score),
            entropy=round(entropy, 2),
            raw_entropy=round(raw_entropy, 2),
            pool_size=pool_size,
            length=length,
            distinct_characters=len(set(password)),
            character_classes=list(classes),
            patterns=patterns,
            feedback=self._feedback(length, classes, patterns, score),
            crack_time=self._crack_time(entropy),
        )

    # ------------------------------------------------------------------ #
    #  Pattern Detection
    # ------------------------------------------------------------------ #

    def _detect_patterns(self, password: str) -> list[PasswordPattern]:
        patterns: list[PasswordPattern] = []
        patterns.extend(detect_sequential_runs(password))
        patterns.extend(detect_repeated_runs(password))
        patterns.extend(detect_keyboard_walks(password))
        patterns.extend(self._detect_weak_tokens(password))
        return patterns

    def _detect_weak_tokens(self, password: str) -> list[PasswordPattern]:
        lowered = password.lower()
        patterns: list[PasswordPattern] = []
        for token in self._weak_tokens:
            idx = lowered.find(token)
            if idx >= 0:
                patterns.append(PasswordPattern(
                    pattern_type="weak_token",
                    value=password[idx: idx + len(token)],
                    position=idx,
                    penalty=len(token) * WEAK_TOKEN_PENALTY,
                ))
        return patterns

    # ------------------------------------------------------------------ #
    #  Feedback and crack time
    # ------------------------------------------------------------------ #

    @staticmethod
    def _feedback(
        length: int,
        classes: tuple[CharacterClass, ...],
        patterns: list[PasswordPattern],
        score: int,
    ) -> list[str]:
        feedback: list[str] = []
        if length < 12:
            feedback.append(f"Use at least 12 characters (currently {length}).")
        if len(classes) < 3:
            feedback.append("Mix uppercase, lowercase, numbers and symbols.")

        kinds = {p.pattern_type for p in patterns}
        if "common_password" in kinds:
            feedback.append("This is a commonly used password; never use it.")
        if "weak_token" in kinds:
            feedback.append("Avoid common words and names.")
        if "keyboard_pattern" in kinds:
            feedback.append("Avoid keyboard patterns such as qwerty or asdf.")
        if "sequential_chars" in kinds:
            feedback.append("Avoid sequences such as abc or 123.")
        if "repeated_chars" in kinds:
            feedback.append("Avoid runs of the same character.")

        if not feedback and score >= 3:
            feedback.append("Strong password.")
        return feedback

    @classmethod
    def _crack_time(cls, entropy_bits: float) -> str:
        """Average brute-force time: half the keyspace at 10^9 guesses/s."""
        log2_seconds = max(entropy_bits - 1, 0.0) - math.log2(cls._GUESSES_PER_SECOND)
        if log2_seconds > 100:
            return format_duration(math.inf)
        return format_duration(2 ** log2_seconds)


# ===================================================================== #
#  Module-level helpers
# ===================================================================== #


def classify(password: str) -> tuple[CharacterClass, ...]:
    """Character classes present in *password*, in canonical order."""
    found: set[CharacterClass] = set()
    for c in password:
        if c in string.ascii_uppercase:
            found.add(CharacterClass.UPPERCASE)
        elif c in string.ascii_lowercase:
            found.add(CharacterClass.LOWERCASE)
        elif c in string.digits:
            found.add(CharacterClass.NUMBERS)
        elif c in string.punctuation:
            found.add(CharacterClass.SYMBOLS)
        else:
            found.add(CharacterClass.OTHER)
    return tuple(c for c in CharacterClass if c in found)


def score_for_entropy(entropy: float) -> int:
    """Map effective entropy (bits) onto the fixed 0..4 score scale."""
    return sum(1 for threshold in SCORE_THRESHOLDS if entropy >= threshold)


def detect_sequential_runs(password: str) -> list[PasswordPattern]:
    """Runs of three or more characters whose code points step by +1 or -1."""
    patterns: list[PasswordPattern] = []
    n = len(password)
    start = 0
    while start < n - 1:
        step = ord(password[start + 1]) - ord(password[start])
        end = start + 1
        if step in (1, -1):
            while end + 1 < n and ord(password[end + 1]) - ord(password[end]) == step:
                end += 1
            run = end - start + 1
            if run >= _MIN_RUN:
                patterns.append(PasswordPattern(
                    pattern_type="sequential_chars",
                    value=password[start: end + 1],
                    position=start,
                    penalty=run * SEQUENTIAL_PENALTY,
                ))
        start = end
    return patterns


def detect_repeated_runs(password: str) -> list[PasswordPattern]:
    """Runs of three or more identical characters."""
    return [
        PasswordPattern(
            pattern_type="repeated_chars",
            value=match.group(),
            position=match.start(),
            penalty=len(match.group()) * REPEATED_PENALTY,
        )
        for match in _REPEATED_RE.finditer(password)
    ]


def detect_keyboard_walks(password: str) -> list[PasswordPattern]:
    """Longest substring (three or more) of each keyboard walk found."""
    lowered = password.lower()
    patterns: list[PasswordPattern] = []
    for walk in _KEYBOARD_WALKS:
        match = _longest_walk_match(walk, lowered)
        if match is not None:
            idx, size = match
            patterns.append(PasswordPattern(
                pattern_type="keyboard_pattern",
                value=password[idx: idx + size],
                position=idx,
                penalty=size * KEYBOARD_PENALTY,
            ))
    return patterns


def _longest_walk_match(walk: str, text: str) -> tuple[int, int] | None:
    """``(position, size)`` of the longest substring of *walk* in *text*."""
    for size in range(min(len(walk), len(text)), _MIN_RUN - 1, -1):
        for i in range(len(walk) - size + 1):
            idx = text.find(walk[i: i + size])
            if idx >= 0:
                return idx, size
    return None


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as a short human-readable string."""
    year = 86400 * 365
    if seconds < 1:
        return "instant"
    if seconds < 60:
        return f"{seconds:.0f} seconds"
    if seconds < 3600:
        return f"{seconds / 60:.0f} minutes"
    if seconds < 86400:
        return f"{seconds / 3600:.0f} hours"
    if seconds < year:
        return f"{seconds / 86400:.0f} days"
    if seconds < year * 1000:
        return f"{seconds / year:.0f} years"
    if seconds < year * 1e6:
        return f"{seconds / (year * 1000):.0f} thousand years"
    if seconds < year * 1e9:
        return f"{seconds / (year * 1e6):.0f} million years"
    return "centuries beyond measure"


def evaluate(password: str) -> StrengthResult:
    """Evaluate *password* with a default :class:`StrengthEstimator`."""
    return StrengthEstimator().evaluate(password)
