"""
SecurePass Error Taxonomy
==========================

Every failure the core can report is a distinct subclass of
:class:`SecurePassError`. Errors are raised synchronously to the
immediate caller and never downgraded to default values.
"""

from __future__ import annotations


class SecurePassError(Exception):
    """Base class for all SecurePass errors."""


class ValidationError(SecurePassError, ValueError):
    """Generation options or call arguments are out of range.

    Raised before any randomness is consumed.
    """


class EmptyAlphabetError(SecurePassError):
    """Selected classes plus exclusion rules leave no usable characters."""


class UnsatisfiableConstraintError(SecurePassError):
    """The requested constraints cannot be met by any password.

    Raised when ``prevent_repeating`` is requested with a one-character
    alphabet and ``length > 1``, or when ``require_each_class`` needs more
    positions than the password has.
    """


class RandomSourceError(SecurePassError):
    """A bounded internal redraw loop was exhausted.

    Only reachable with a defective randomness source that keeps
    returning rejected values.
    """


class UnknownTemplateError(SecurePassError, KeyError):
    """No generation template is registered under the requested key."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown template"
