from __future__ import annotations
from typing import Optional

import numpy as np

from simdrng.core import BatchCore, BlockRng, Lanes
from simdrng.scalar import Linnorm64
from simdrng.scalar._splitmix64 import GOLDEN_GAMMA, MIX_MUL_A, MIX_MUL_B


class SplitMix64x4Core(BatchCore):
    """Four SplitMix64 lanes evaluated in lockstep."""

    seed_size = 32

    def _set_lane_words(self, lane_words: list[list[int]]) -> None:
        self.x = self.lanes.words([words[0] for words in lane_words])

    def state_arrays(self) -> tuple:
        return (self.x,)

    def next_batch(self) -> np.ndarray:
        lanes = self.lanes
        self.x = lanes.add(self.x, GOLDEN_GAMMA)
        z = self.x
        z = lanes.mul(z ^ lanes.shr(z, 30), MIX_MUL_A)
        z = lanes.mul(z ^ lanes.shr(z, 27), MIX_MUL_B)
        return lanes.to_numpy(z ^ lanes.shr(z, 31))

    @classmethod
    def from_seed_u64(
        cls, seed: int, lanes: Optional[Lanes] = None
    ) -> SplitMix64x4Core:
        """Create from 32 seed bytes drawn from `Linnorm64` seeded with `seed`.
        Expanding with a different algorithm avoids correlating the lanes
        with the expansion stream."""
        return cls.from_rng(Linnorm64.from_seed_u64(seed), lanes=lanes)


class SplitMix64x4(BlockRng):
    """SplitMix64 with four lanes, served one word at a time.
    Not suitable for cryptographic purposes."""

    core_type = SplitMix64x4Core
    seed_size = SplitMix64x4Core.seed_size
