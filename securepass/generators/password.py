"""
Secure Password Generator
==========================

Draws passwords uniformly from the alphabet produced by the character set
builder, applying composition constraints without biasing the result.

Constraints never substitute a fixed fallback character:

- ``prevent_repeating``: a character equal to its predecessor is redrawn,
  so each position is uniform over the alphabet minus the previous
  character.
- ``require_each_class``: the number of valid completions is counted for
  every (positions left, classes covered, previous class) state, and each
  position is drawn with weights proportional to those counts. The result
  is uniform over all valid passwords and needs no retry loop.

The generator holds no state between calls and never logs, stores or
otherwise retains the passwords it returns.
"""

from __future__ import annotations

from typing import Optional

from securepass.core.errors import (
    EmptyAlphabetError,
    RandomSourceError,
    UnsatisfiableConstraintError,
    ValidationError,
)
from securepass.core.models import GenerationOptions
from securepass.generators.charset import alphabet_for, class_pools
from securepass.generators.secure_random import (
    RandomSource,
    SystemRandomSource,
    choice,
    randbelow,
)

MIN_LENGTH = 4
MAX_LENGTH = 128


def validate_options(options: GenerationOptions) -> None:
    """Check the range rules of *options*.

    Raises:
        ValidationError: ``length`` outside ``[4, 128]`` or no class selected.
    """
    if not MIN_LENGTH <= options.length <= MAX_LENGTH:
        raise ValidationError(
            f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH} "
            f"characters, got {options.length}"
        )
    if not options.selected_classes:
        raise ValidationError("At least one character class must be selected")


class PasswordGenerator:
    """Constrained secure password generator.

    Usage::

        generator = PasswordGenerator()
        password = generator.generate(GenerationOptions(length=20))

    Args:
        random_source: Secure byte source; defaults to the OS CSPRNG.
        max_redraws: Redraw limit per position for ``prevent_repeating``.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        *,
        max_redraws: int = 100,
    ) -> None:
        self._source = random_source or SystemRandomSource()
        self._max_redraws = max_redraws

    @property
    def random_source(self) -> RandomSource:
        return self._source

    def generate(self, options: GenerationOptions) -> str:
        """Generate one password.

        All precondition checks run before any random byte is read.

        Args:
            options: Generation request.

        Returns:
            Password of exactly ``options.length`` characters.

        Raises:
            ValidationError: Length out of range or no class selected.
            EmptyAlphabetError: Exclusions removed every character.
            UnsatisfiableConstraintError: Constraints admit no password.
            RandomSourceError: The random source is defective.
        """
        validate_options(options)

        alphabet = alphabet_for(options)
        if not alphabet:
            raise EmptyAlphabetError(
                "No characters remain after applying the exclusion rules"
            )

        if options.prevent_repeating and len(alphabet) == 1 and options.length > 1:
            raise UnsatisfiableConstraintError(
                f"Cannot avoid repeats with the single-character alphabet "
                f"{alphabet!r} for length {options.length}"
            )

        if not options.require_each_class:
            return self._draw(alphabet, options.length, options.prevent_repeating)

        pools = list(class_pools(options).values())
        table = completion_counts(
            [len(pool) for pool in pools], options.length, options.prevent_repeating
        )
        if table[options.length][0][len(pools)] == 0:
            raise UnsatisfiableConstraintError(
                f"Length {options.length} cannot hold one character from each "
                f"of {len(pools)} character classes"
            )
        return self._draw_covering(pools, table, options.length, options.prevent_repeating)

    def _draw(self, alphabet: str, length: int, prevent_repeating: bool) -> str:
        chars: list[str] = []
        for _ in range(length):
            char = choice(self._source, alphabet)
            if prevent_repeating and chars:
                redraws = 0
                while char == chars[-1]:
                    if redraws >= self._max_redraws:
                        raise RandomSourceError(
                            f"Adjacent repeat persisted after {self._max_redraws} redraws"
                        )
                    char = choice(self._source, alphabet)
                    redraws += 1
            chars.append(char)
        return "".join(chars)

    def _draw_covering(
        self,
        pools: list[str],
        table: list[list[list[int]]],
        length: int,
        prevent_repeating: bool,
    ) -> str:
        """Draw uniformly among passwords that use every pool at least once.

        One bounded integer is drawn per position over the number of valid
        completions; it selects both the class and the character.
        """
        sizes = [len(pool) for pool in pools]
        mask, prev_cls = 0, len(pools)
        chars: list[str] = []

        for remaining in range(length, 0, -1):
            below = table[remaining - 1]
            pick = randbelow(self._source, table[remaining][mask][prev_cls])
            for cls, pool in enumerate(pools):
                tail = below[mask | (1 << cls)][cls]
                weight = _choices(sizes, cls, prev_cls, prevent_repeating) * tail
                if pick < weight:
                    break
                pick -= weight

            if prevent_repeating and cls == prev_cls:
                pool = pool.replace(chars[-1], "")
            chars.append(pool[pick // tail])
            mask |= 1 << cls
            prev_cls = cls

        return "".join(chars)


def _choices(sizes: list[int], cls: int, prev_cls: int, prevent_repeating: bool) -> int:
    """Characters of class *cls* allowed right after a character of *prev_cls*."""
    if prevent_repeating and cls == prev_cls:
        return sizes[cls] - 1
    return sizes[cls]


def completion_counts(
    sizes: list[int], length: int, prevent_repeating: bool = False
) -> list[list[list[int]]]:
    """Count valid password completions for every generator state.

    ``table[r][mask][prev]`` is the number of ways to fill ``r`` more
    positions so that, together with the classes already in ``mask``,
    every class appears at least once. ``prev`` is the class of the
    previous character, or ``len(sizes)`` before the first position.

    Args:
        sizes: Pool size of each required class.
        length: Total password length.
        prevent_repeating: Forbid identical adjacent characters.

    Returns:
        Nested lists indexed ``[remaining][mask][prev]``.
    """
    k = len(sizes)
    full = (1 << k) - 1
    table = [[[0] * (k + 1) for _ in range(full + 1)] for _ in range(length + 1)]
    table[0][full] = [1] * (k + 1)

    for remaining in range(1, length + 1):
        below = table[remaining - 1]
        for mask in range(full + 1):
            for prev in range(k + 1):
                table[remaining][mask][prev] = sum(
                    _choices(sizes, cls, prev, prevent_repeating) * below[mask | (1 << cls)][cls]
                    for cls in range(k)
                )
    return table


def generate(
    options: GenerationOptions, random_source: Optional[RandomSource] = None
) -> str:
    """Generate one password with a default :class:`PasswordGenerator`."""
    return PasswordGenerator(random_source).generate(options)
