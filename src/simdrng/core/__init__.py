"""Shared generator abstractions: word sources, seeding and block buffering."""
# List exported symbols for doc generation
__all__ = (
    "WordSource",
    "SeedableRng",
    "Lanes",
    "NumpyLanes",
    "TorchLanes",
    "get_lanes",
    "BatchCore",
    "BlockRng",
)

from ._word_source import WordSource
from ._seedable import SeedableRng
from ._lanes import Lanes, NumpyLanes, TorchLanes, get_lanes
from ._block import BatchCore, BlockRng
