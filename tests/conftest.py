"""Shared fixtures: deterministic random-source doubles."""

from __future__ import annotations

import random

import pytest

from securepass.core.models import GenerationOptions


class SeededSource:
    """Reproducible byte source backed by :class:`random.Random`."""

    def __init__(self, seed: int = 1234) -> None:
        self._rng = random.Random(seed)

    def token_bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


class CyclicSource:
    """Emits 0, 1, ..., 255, 0, 1, ... one byte at a time."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def token_bytes(self, n: int) -> bytes:
        out = bytearray()
        for _ in range(n):
            out.append(self._next)
            self._next = (self._next + 1) % 256
        return bytes(out)


class ConstantSource:
    """Always returns the same byte value."""

    def __init__(self, value: int = 0) -> None:
        self._value = value

    def token_bytes(self, n: int) -> bytes:
        return bytes([self._value]) * n


class CountingSource:
    """Wraps another source and counts the bytes handed out."""

    def __init__(self, inner) -> None:
        self._inner = inner
        self.consumed = 0

    def token_bytes(self, n: int) -> bytes:
        self.consumed += n
        return self._inner.token_bytes(n)


@pytest.fixture
def seeded() -> SeededSource:
    return SeededSource()


@pytest.fixture
def cyclic() -> CyclicSource:
    return CyclicSource()


@pytest.fixture
def counting() -> CountingSource:
    return CountingSource(SeededSource(99))


@pytest.fixture
def default_options() -> GenerationOptions:
    return GenerationOptions()
