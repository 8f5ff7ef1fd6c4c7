"""
Character Set Builder
======================

Derives the effective generation alphabet from the requested character
classes and exclusion rules.

The alphabet is the concatenation of the canonical class ranges in the
fixed order uppercase, lowercase, numbers, symbols, minus excluded
characters. Identical inputs always produce the identical string, so
callers may memoise on the options and tests can assert exact output.
"""

from __future__ import annotations

from securepass.core.models import CharacterClass, GenerationOptions

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Visually confusable glyphs removed by ``exclude_similar``
SIMILAR_CHARACTERS = frozenset("0O1lI|")

CLASS_RANGES: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.NUMBERS: NUMBERS,
    CharacterClass.SYMBOLS: SYMBOLS,
}


def _strip(chars: str, excluded: frozenset[str] | set[str]) -> str:
    return "".join(c for c in chars if c not in excluded)


def _excluded(exclude_similar: bool, exclude_characters: str) -> set[str]:
    excluded = set(exclude_characters)
    if exclude_similar:
        excluded |= SIMILAR_CHARACTERS
    return excluded


def build_character_set(
    uppercase: bool,
    lowercase: bool,
    numbers: bool,
    symbols: bool,
    exclude_similar: bool = False,
    exclude_characters: str = "",
) -> str:
    """Build the generation alphabet.

    Args:
        uppercase: Include ``A-Z``.
        lowercase: Include ``a-z``.
        numbers: Include ``0-9``.
        symbols: Include the canonical symbol range.
        exclude_similar: Remove ``0 O 1 l I |`` whichever class supplied them.
        exclude_characters: Further characters to remove.

    Returns:
        Ordered string of distinct characters. Empty when no class is
        selected or exclusion removes everything; that is a valid result,
        the generator decides whether it is an error.
    """
    selected = (
        (uppercase, UPPERCASE),
        (lowercase, LOWERCASE),
        (numbers, NUMBERS),
        (symbols, SYMBOLS),
    )
    excluded = _excluded(exclude_similar, exclude_characters)
    return "".join(_strip(chars, excluded) for enabled, chars in selected if enabled)


def alphabet_for(options: GenerationOptions) -> str:
    """Build the alphabet described by *options*."""
    return build_character_set(
        options.include_uppercase,
        options.include_lowercase,
        options.include_numbers,
        options.include_symbols,
        exclude_similar=options.exclude_similar,
        exclude_characters=options.exclude_characters,
    )


def class_pools(options: GenerationOptions) -> dict[CharacterClass, str]:
    """Per-class filtered pools for the selected classes.

    Classes whose every character was excluded are omitted.
    """
    excluded = _excluded(options.exclude_similar, options.exclude_characters)
    pools: dict[CharacterClass, str] = {}
    for cls in options.selected_classes:
        pool = _strip(CLASS_RANGES[cls], excluded)
        if pool:
            pools[cls] = pool
    return pools
