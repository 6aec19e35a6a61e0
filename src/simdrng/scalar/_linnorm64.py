from __future__ import annotations
from typing import Optional

from simdrng.core import WordSource, SeedableRng
from simdrng.io import check_seed_u64
from simdrng.math import MASK64, bytes_from_words, words_from_bytes


LCG_MUL = 0x41C64E6D  #: Multiplier of the linear congruential step
LCG_INC = 1  #: Increment of the linear congruential step
NORM_MUL = 0xAEF17502108EF2D9  #: Multiplier of the output mix


class Linnorm64(WordSource, SeedableRng):
    """Linnorm64: a 64-bit linear congruential generator with an avalanche
    output mix. Not suitable for cryptographic purposes, but fast, with high
    statistical quality for a 64-bit state; every seed value is valid."""

    seed_size = 8
    x: int  #: 64-bit state

    def __init__(self, seed: Optional[bytes] = None) -> None:
        """Initialize state from 8 little-endian `seed` bytes."""
        (self.x,) = words_from_bytes(self.check_seed(seed), 1)

    @classmethod
    def new_unseeded(cls) -> Linnorm64:
        """Create with state 0. All generators created this way yield the same
        stream: prefer seeding explicitly."""
        return cls(bytes(cls.seed_size))

    def next_u64(self) -> int:
        self.x = (self.x * LCG_MUL + LCG_INC) & MASK64
        z = ((self.x ^ (self.x >> 32)) * NORM_MUL) & MASK64
        return z ^ (z >> 30)

    @classmethod
    def from_seed_u64(cls, seed: int) -> Linnorm64:
        """Create with state set directly to `seed`."""
        return cls(bytes_from_words([check_seed_u64(seed)]))
