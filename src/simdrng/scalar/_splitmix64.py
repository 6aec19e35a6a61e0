from __future__ import annotations
from typing import Optional

from simdrng.core import WordSource, SeedableRng
from simdrng.io import check_seed_u64
from simdrng.math import MASK64, bytes_from_words, words_from_bytes


GOLDEN_GAMMA = 0x9E3779B97F4A7C15  #: Additive increment of the state
MIX_MUL_A = 0xBF58476D1CE4E5B9  #: First avalanche multiplier
MIX_MUL_B = 0x94D049BB133111EB  #: Second avalanche multiplier


class SplitMix64(WordSource, SeedableRng):
    """SplitMix64: a Weyl sequence with golden-ratio increment, passed through
    an avalanche mix. Not suitable for cryptographic purposes, but fast, with a
    64-bit state in which every value (including zero) is a valid seed. This
    makes it the generator of choice for expanding 64-bit seeds of other
    generators."""

    seed_size = 8
    x: int  #: 64-bit state

    def __init__(self, seed: Optional[bytes] = None) -> None:
        """Initialize state from 8 little-endian `seed` bytes."""
        (self.x,) = words_from_bytes(self.check_seed(seed), 1)

    def next_u64(self) -> int:
        self.x = (self.x + GOLDEN_GAMMA) & MASK64
        z = self.x
        z = ((z ^ (z >> 30)) * MIX_MUL_A) & MASK64
        z = ((z ^ (z >> 27)) * MIX_MUL_B) & MASK64
        return z ^ (z >> 31)

    @classmethod
    def from_seed_u64(cls, seed: int) -> SplitMix64:
        """Create with state set directly to `seed`."""
        return cls(bytes_from_words([check_seed_u64(seed)]))
