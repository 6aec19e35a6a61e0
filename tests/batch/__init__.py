import functools
from typing import Sequence, Type

import simdrng as sr
from simdrng.core import BatchCore, WordSource


#: Batch core classes with their scalar counterparts
BATCH_SCALAR_PAIRS: Sequence[tuple[Type[BatchCore], Type]] = (
    (sr.batch.SplitMix64x4Core, sr.SplitMix64),
    (sr.batch.Linnorm64x4Core, sr.Linnorm64),
    (sr.batch.XoroShiro128x4Core, sr.XoroShiro128),
)


@functools.cache
def get_reference_seed(n_bytes: int) -> bytes:
    """Reproducible seed bytes with distinct non-zero lanes."""
    return bytes((131 * i + 17) % 251 + 1 for i in range(n_bytes))


def get_lane_rngs(core_type: Type[BatchCore], scalar_type, seed: bytes) -> list:
    """Scalar generators seeded with each lane's slice of batch `seed`."""
    size = core_type.lane_seed_size
    return [
        scalar_type.from_seed(seed[i * size : (i + 1) * size])
        for i in range(core_type.n_lanes)
    ]


def lane_outputs(lane_rngs: Sequence[WordSource]) -> list[int]:
    """One draw from each scalar lane generator."""
    return [rng.next_u64() for rng in lane_rngs]
