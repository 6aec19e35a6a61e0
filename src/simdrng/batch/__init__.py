"""Batch generators: four lanes advanced in lockstep, buffered into word sources.
Lane `i` of each batch generator reproduces exactly the stream of the scalar
generator of the same algorithm, seeded with lane `i`'s slice of the seed."""
# List exported symbols for doc generation
__all__ = (
    "SplitMix64x4Core",
    "SplitMix64x4",
    "Linnorm64x4Core",
    "Linnorm64x4",
    "XoroShiro128x4Core",
    "XoroShiro128x4",
)

from ._splitmix64x4 import SplitMix64x4Core, SplitMix64x4
from ._linnorm64x4 import Linnorm64x4Core, Linnorm64x4
from ._xoroshiro128x4 import XoroShiro128x4Core, XoroShiro128x4
