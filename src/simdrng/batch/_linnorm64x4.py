from __future__ import annotations
from typing import Optional

import numpy as np

from simdrng.core import BatchCore, BlockRng, Lanes
from simdrng.scalar import SplitMix64
from simdrng.scalar._linnorm64 import LCG_MUL, LCG_INC, NORM_MUL


class Linnorm64x4Core(BatchCore):
    """Four Linnorm64 lanes evaluated in lockstep."""

    seed_size = 32

    def _set_lane_words(self, lane_words: list[list[int]]) -> None:
        self.x = self.lanes.words([words[0] for words in lane_words])

    def state_arrays(self) -> tuple:
        return (self.x,)

    def next_batch(self) -> np.ndarray:
        lanes = self.lanes
        self.x = lanes.add(lanes.mul(self.x, LCG_MUL), LCG_INC)
        z = lanes.mul(self.x ^ lanes.shr(self.x, 32), NORM_MUL)
        return lanes.to_numpy(z ^ lanes.shr(z, 30))

    @classmethod
    def from_seed_u64(
        cls, seed: int, lanes: Optional[Lanes] = None
    ) -> Linnorm64x4Core:
        """Create from 32 seed bytes drawn from `SplitMix64` seeded with `seed`."""
        return cls.from_rng(SplitMix64.from_seed_u64(seed), lanes=lanes)


class Linnorm64x4(BlockRng):
    """Linnorm64 with four lanes, served one word at a time.
    Not suitable for cryptographic purposes."""

    core_type = Linnorm64x4Core
    seed_size = Linnorm64x4Core.seed_size
