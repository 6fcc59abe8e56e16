"""Shared fixtures for the bignum test suite."""

import random
from typing import Callable, Tuple

import pytest

from bignum.words import MASK


@pytest.fixture
def rng() -> random.Random:
    return random.Random("BigNum")


@pytest.fixture
def native_divmod() -> Callable[[int, int], Tuple[int, int]]:
    """Truncating (C-style) divmod over Python ints."""

    def divmod_trunc(a: int, b: int) -> Tuple[int, int]:
        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            q = -q
        return q, a - q * b

    return divmod_trunc


@pytest.fixture
def edgy_words(rng: random.Random) -> Callable[[int], list]:
    """Word lists biased toward 0, 1, MASK and the top bit, which drive
    carries, borrows and the quotient correction paths."""
    choices = [0, 1, MASK, MASK - 1, 1 << 31, (1 << 31) - 1]

    def make(n: int) -> list:
        out = [rng.choice(choices) if rng.random() < 0.5 else rng.getrandbits(32) for _ in range(n)]
        if out[-1] == 0:
            out[-1] = 1
        return out

    return make
