"""
Readable password formatting for display.

Long passwords are easier to transcribe in groups of four. Grouping is a
display concern only; the separator is never part of the password.
"""

from __future__ import annotations

READABLE_MIN_LENGTH = 12


def format_readable(password: str, group_size: int = 4, separator: str = " ") -> str:
    """Split *password* into groups: ``"MyP@ssw0rd123!"`` -> ``"MyP@ ssw0 rd12 3!"``."""
    if group_size < 1:
        raise ValueError("group_size must be positive")
    return separator.join(
        password[i: i + group_size] for i in range(0, len(password), group_size)
    )


def unformat_readable(text: str, separator: str = " ") -> str:
    """Undo :func:`format_readable`."""
    return "".join(text.split(separator)) if separator else text


def display_text(password: str, readable: bool = False, separator: str = " ") -> str:
    """Readable form for passwords of twelve or more characters, else verbatim."""
    if readable and len(password) >= READABLE_MIN_LENGTH:
        return format_readable(password, separator=separator)
    return password
