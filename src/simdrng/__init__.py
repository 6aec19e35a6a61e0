"""SimdRNG: scalar and 4-lane batch pseudo-random number generators"""
# List exported symbols for doc generation
__all__ = (
    "log",
    "rc",
    "io",
    "utils",
    "math",
    "core",
    "scalar",
    "batch",
    "WordSource",
    "SeedableRng",
    "BatchCore",
    "BlockRng",
    "SplitMix64",
    "Linnorm64",
    "XoroShiro128",
    "XorShift1024",
    "SplitMix64x4",
    "Linnorm64x4",
    "XoroShiro128x4",
)

import logging

log: logging.Logger = logging.getLogger("simdrng")  #: Log for the simdrng library

# Module import definition
from . import rc, io, utils, math, core, scalar, batch
from .core import WordSource, SeedableRng, BatchCore, BlockRng
from .scalar import SplitMix64, Linnorm64, XoroShiro128, XorShift1024
from .batch import SplitMix64x4, Linnorm64x4, XoroShiro128x4

__version__: str = "0.1.0"
