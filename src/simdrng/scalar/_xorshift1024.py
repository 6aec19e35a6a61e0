from __future__ import annotations
import copy
from typing import Optional, Sequence

import simdrng as sr
from simdrng.core import WordSource, SeedableRng
from simdrng.math import MASK64, words_from_bytes
from simdrng.utils import stopwatch
from ._splitmix64 import SplitMix64


N_WORDS = 16  #: Number of 64-bit state words
OUT_MUL = 0x106689D45497FDB5  #: Output multiplier (1181783497276652981)

#: Jump polynomial advancing the state by 2^512 steps
JUMP = (
    0x84242F96ECA9C41D,
    0xA3C65B8776F96855,
    0x5B34A39F070B5837,
    0x4489AFFCE4F31A1E,
    0x2FFEEB0A48316F40,
    0xDC2D9891FE68C022,
    0x3659132BB12FEA70,
    0xAAC17D8EFA43CAB8,
    0xC4CB815590989B13,
    0x5EE975283D71C93B,
    0x691548C86C1BD540,
    0x7910C41D10A1E6A5,
    0x0B5FC64563B3E2A8,
    0x047F7684E9FC949D,
    0xB99181F2D8F685CA,
    0x284600E3F30E38C3,
)


class XorShift1024(WordSource, SeedableRng):
    """Xorshift1024*: xor-shift generator with a 1024-bit state, scrambled by an
    odd multiplier on output. Not suitable for cryptographic purposes.
    Supports `jump` by 2^512 steps to carve non-overlapping sub-streams, e.g. one
    per thread or process, from a single seed (see `split`).

    The all-zero state is a fixed point producing only zeros, so seed with
    `from_seed_u64` (which expands through `SplitMix64`) unless the seed bytes
    are known to be non-zero."""

    seed_size = 8 * N_WORDS
    state: list[int]  #: 16 64-bit state words
    p: int  #: Index of the most recently updated state word

    def __init__(self, seed: Optional[bytes] = None) -> None:
        """Initialize state from 128 little-endian `seed` bytes.
        An all-zero seed is accepted unchanged, but logs a warning."""
        self.state = words_from_bytes(self.check_seed(seed), N_WORDS)
        self.p = 0
        if not any(self.state):
            sr.log.warning("XorShift1024 seeded with all-zero state: output is 0")

    def next_u64(self) -> int:
        s0 = self.state[self.p]
        self.p = (self.p + 1) % N_WORDS
        s1 = self.state[self.p]
        s1 ^= (s1 << 31) & MASK64
        self.state[self.p] = s1 ^ s0 ^ (s1 >> 11) ^ (s0 >> 30)
        return (self.state[self.p] * OUT_MUL) & MASK64

    def jump(self) -> None:
        """Advance by 2^512 steps, equivalent to 2^512 calls of `next_u64`."""
        self.jump_with(JUMP)

    @stopwatch(name="XorShift1024.jump")
    def jump_with(self, polynomial: Sequence[int]) -> None:
        """Advance the state by the step count encoded in `polynomial`: 16 words
        holding the 1024 coefficients (least significant first) of x^n modulo the
        characteristic polynomial of the state transition, for a jump of n steps.
        In particular, a polynomial with the single bit k set (k < 1024)
        advances by exactly k steps."""
        if len(polynomial) != N_WORDS:
            raise sr.io.InvalidInputException(
                f"Jump polynomial must have {N_WORDS} words (got {len(polynomial)})"
            )
        t = [0] * N_WORDS
        for word in polynomial:
            for b in range(64):
                if (word >> b) & 1:
                    for j in range(N_WORDS):
                        t[j] ^= self.state[(j + self.p) % N_WORDS]
                self.next_u64()
        for j in range(N_WORDS):
            self.state[(j + self.p) % N_WORDS] = t[j]

    def split(self, n: int) -> list[XorShift1024]:
        """Return `n` independent copies of this generator, each one `jump`
        ahead of the previous, starting at the current state. This generator is
        left jumped past all of them, so that no stream overlaps another."""
        streams = []
        for _ in range(n):
            streams.append(copy.deepcopy(self))
            self.jump()
        sr.log.debug(f"XorShift1024: split into {n} sub-streams")
        return streams

    @classmethod
    def from_seed_u64(cls, seed: int) -> XorShift1024:
        """Create from 128 seed bytes drawn from `SplitMix64` seeded with `seed`."""
        return cls.from_rng(SplitMix64.from_seed_u64(seed))
