from __future__ import annotations
from typing import Optional

import simdrng as sr
from simdrng.core import WordSource, SeedableRng
from simdrng.math import MASK64, rotl64, words_from_bytes
from simdrng.utils import stopwatch
from ._splitmix64 import SplitMix64


ROT_A = 55  #: Rotation of s0 in the state update
SHIFT_B = 14  #: Shift of s1 in the state update
ROT_C = 36  #: Rotation of s1 in the state update

#: Jump polynomial advancing the state by 2^64 steps
JUMP = (0xBEAC0467EBA5FACB, 0xD86B048B86AA9922)


class XoroShiro128(WordSource, SeedableRng):
    """Xoroshiro128+: xor/rotate/shift generator with a 128-bit state, returning
    the sum of its two state words. Not suitable for cryptographic purposes.
    The all-zero state is a fixed point producing only zeros, so seed with
    `from_seed_u64` (which expands through `SplitMix64`) unless the seed bytes
    are known to be non-zero."""

    seed_size = 16
    s0: int  #: First 64-bit state word
    s1: int  #: Second 64-bit state word

    def __init__(self, seed: Optional[bytes] = None) -> None:
        """Initialize (s0, s1) from 16 little-endian `seed` bytes.
        An all-zero seed is accepted unchanged, but logs a warning."""
        self.s0, self.s1 = words_from_bytes(self.check_seed(seed), 2)
        if not (self.s0 or self.s1):
            sr.log.warning("XoroShiro128 seeded with all-zero state: output is 0")

    def next_u64(self) -> int:
        s0 = self.s0
        s1 = self.s1
        result = (s0 + s1) & MASK64
        s1 ^= s0
        self.s0 = rotl64(s0, ROT_A) ^ s1 ^ ((s1 << SHIFT_B) & MASK64)
        self.s1 = rotl64(s1, ROT_C)
        return result

    @stopwatch(name="XoroShiro128.jump")
    def jump(self) -> None:
        """Advance by 2^64 steps, equivalent to 2^64 calls of `next_u64`.
        Repeated jumps yield non-overlapping sub-streams for parallel use."""
        t0 = t1 = 0
        for word in JUMP:
            for b in range(64):
                if (word >> b) & 1:
                    t0 ^= self.s0
                    t1 ^= self.s1
                self.next_u64()
        self.s0 = t0
        self.s1 = t1

    @classmethod
    def from_seed_u64(cls, seed: int) -> XoroShiro128:
        """Create from 16 seed bytes drawn from `SplitMix64` seeded with `seed`."""
        return cls.from_rng(SplitMix64.from_seed_u64(seed))
