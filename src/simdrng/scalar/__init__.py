"""Scalar generators, computing one 64-bit output per call."""
# List exported symbols for doc generation
__all__ = ("SplitMix64", "Linnorm64", "XoroShiro128", "XorShift1024")

from ._splitmix64 import SplitMix64
from ._linnorm64 import Linnorm64
from ._xoroshiro128 import XoroShiro128
from ._xorshift1024 import XorShift1024
