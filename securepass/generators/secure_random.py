"""
Secure Random Source
=====================

Injectable cryptographically secure byte source and a bias-free bounded
integer draw built on top of it.

Production code uses :class:`SystemRandomSource`, which reads the
operating-system CSPRNG through :func:`secrets.token_bytes`. Tests inject
deterministic doubles implementing the same one-method protocol.

Mapping random bytes onto ``[0, n)`` with a bare remainder over-weights
the low residues whenever ``n`` does not divide ``256 ** k``. ``randbelow``
avoids that by rejection sampling: values at or above the largest
multiple of ``n`` that fits in ``k`` bytes are discarded and redrawn.

Reference:
    NIST SP 800-90A Rev. 1 (2015), Appendix A.5.1 -- The Simple Discard
    Method.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from securepass.core.errors import RandomSourceError, ValidationError

# Upper bound on rejected draws for a single value. With a healthy source
# each draw is rejected with probability < 1/2.
MAX_REJECTIONS = 128


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can return *n* cryptographically secure random bytes."""

    def token_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """Operating-system entropy source."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


def randbelow(source: RandomSource, n: int) -> int:
    """Draw an integer uniformly from ``[0, n)``.

    Reads the fewest whole bytes whose range covers *n*, rejects values
    ``>= floor(256 ** k / n) * n`` and reduces the rest modulo *n*.

    Args:
        source: Secure byte source.
        n: Exclusive upper bound, ``n >= 1``.

    Returns:
        A uniformly distributed integer in ``[0, n)``.

    Raises:
        ValidationError: If ``n < 1``.
        RandomSourceError: If :data:`MAX_REJECTIONS` consecutive draws
            were rejected.
    """
    if n < 1:
        raise ValidationError(f"Upper bound must be >= 1, got {n}")
    if n == 1:
        return 0

    num_bytes = ((n - 1).bit_length() + 7) // 8
    span = 256 ** num_bytes
    limit = span - (span % n)

    for _ in range(MAX_REJECTIONS):
        value = int.from_bytes(source.token_bytes(num_bytes), "big")
        if value < limit:
            return value % n

    raise RandomSourceError(
        f"Random source rejected {MAX_REJECTIONS} consecutive draws for n={n}"
    )


def choice(source: RandomSource, alphabet: str) -> str:
    """Pick one character of *alphabet* uniformly."""
    return alphabet[randbelow(source, len(alphabet))]
