from __future__ import annotations
from typing import Optional

import numpy as np

import simdrng as sr
from simdrng.core import BatchCore, BlockRng, Lanes
from simdrng.scalar import SplitMix64
from simdrng.scalar._xoroshiro128 import ROT_A, SHIFT_B, ROT_C, JUMP
from simdrng.utils import StopWatch


class XoroShiro128x4Core(BatchCore):
    """Four Xoroshiro128+ lanes evaluated in lockstep.
    Each lane takes 16 seed bytes: lane `i` is seeded by bytes [16i, 16i + 16)."""

    lane_seed_size = 16
    seed_size = 64

    def _set_lane_words(self, lane_words: list[list[int]]) -> None:
        self.s0 = self.lanes.words([words[0] for words in lane_words])
        self.s1 = self.lanes.words([words[1] for words in lane_words])
        zero_lanes = [i for i, words in enumerate(lane_words) if not any(words)]
        if zero_lanes:
            sr.log.warning(
                f"XoroShiro128x4 seeded with all-zero state in lanes {zero_lanes}:"
                " output is 0 in those lanes"
            )

    def state_arrays(self) -> tuple:
        return (self.s0, self.s1)

    def next_batch(self) -> np.ndarray:
        lanes = self.lanes
        s0 = self.s0
        s1 = self.s1
        result = lanes.add_lanes(s0, s1)
        s1 = s1 ^ s0
        self.s0 = lanes.rotl(s0, ROT_A) ^ s1 ^ lanes.shl(s1, SHIFT_B)
        self.s1 = lanes.rotl(s1, ROT_C)
        return lanes.to_numpy(result)

    def jump(self) -> None:
        """Advance every lane by 2^64 steps, as `XoroShiro128.jump` does."""
        watch = StopWatch("XoroShiro128x4.jump", cuda=self.lanes.on_cuda)
        t0 = self.lanes.words([0] * self.n_lanes)
        t1 = self.lanes.words([0] * self.n_lanes)
        for word in JUMP:
            for b in range(64):
                if (word >> b) & 1:
                    t0 = t0 ^ self.s0
                    t1 = t1 ^ self.s1
                self.next_batch()
        self.s0 = t0
        self.s1 = t1
        watch.stop()

    @classmethod
    def from_seed_u64(
        cls, seed: int, lanes: Optional[Lanes] = None
    ) -> XoroShiro128x4Core:
        """Create from 64 seed bytes drawn from `SplitMix64` seeded with `seed`,
        making an all-zero lane state negligibly likely."""
        return cls.from_rng(SplitMix64.from_seed_u64(seed), lanes=lanes)


class XoroShiro128x4(BlockRng):
    """Xoroshiro128+ with four lanes, served one word at a time.
    Not suitable for cryptographic purposes."""

    core_type = XoroShiro128x4Core
    seed_size = XoroShiro128x4Core.seed_size

    def jump(self) -> None:
        """Advance every lane by 2^64 steps. Buffered words are discarded."""
        self.core.jump()
        self.reset()
