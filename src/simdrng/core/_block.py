from __future__ import annotations
from abc import abstractmethod
from typing import ClassVar, Optional, Type, TypeVar

import numpy as np

import simdrng as sr
from simdrng.io import fmt
from simdrng.math import words_from_bytes
from ._word_source import WordSource
from ._seedable import SeedableRng
from ._lanes import Lanes, get_lanes


BlockRngType = TypeVar("BlockRngType", bound="BlockRng")


class BatchCore(SeedableRng):
    """Batch core: four independent lane states advanced in lockstep, producing
    one 64-bit output per lane on each call. Lane `i` is seeded by bytes
    [i * lane_seed_size, (i + 1) * lane_seed_size) of the seed, and reproduces
    exactly the stream of the corresponding scalar generator with that seed."""

    n_lanes: ClassVar[int] = 4  #: Number of lanes
    lane_seed_size: ClassVar[int] = 8  #: Seed bytes per lane
    block_size: ClassVar[int] = 8  #: Number of 32-bit words in one `generate`
    lanes: Lanes  #: Lane arithmetic backend

    def __init__(self, seed: Optional[bytes] = None, lanes: Optional[Lanes] = None):
        """Initialize lanes from `seed` (default seed if None), evaluating them
        with `lanes` (default: backend selected in `simdrng.rc`)."""
        seed = self.check_seed(seed)
        self.lanes = get_lanes() if (lanes is None) else lanes
        self._set_lane_words(
            [
                words_from_bytes(
                    seed[i * self.lane_seed_size : (i + 1) * self.lane_seed_size],
                    self.lane_seed_size // 8,
                )
                for i in range(self.n_lanes)
            ]
        )
        sr.log.debug(f"{self!r} seeded")

    @abstractmethod
    def _set_lane_words(self, lane_words: list[list[int]]) -> None:
        """Set state from the little-endian seed words of each lane."""

    @abstractmethod
    def next_batch(self) -> np.ndarray:
        """Advance all lanes and return one 64-bit output per lane (uint64)."""

    def generate(self, results: np.ndarray) -> None:
        """Overwrite `results` (`block_size` uint32 words) with one batch.
        Each lane output fills two words, low half first, in lane order."""
        results[:] = self.next_batch().astype("<u8").view("<u4")

    @abstractmethod
    def state_arrays(self) -> tuple:
        """Lane state arrays, for inspection and logging."""

    def __repr__(self) -> str:
        states = ", ".join(
            fmt(self.lanes.to_numpy(state)) for state in self.state_arrays()
        )
        return f"{self.__class__.__name__}({states}, lanes={self.lanes!r})"


class BlockRng(WordSource, SeedableRng):
    """Word source serving the output of a batch core from a block buffer.
    A new block is generated only once all buffered words are consumed."""

    core_type: ClassVar[Type[BatchCore]]  #: Batch core class wrapped by subclass
    core: BatchCore  #: The wrapped batch core
    results: np.ndarray  #: Buffered block of uint32 words
    index: int  #: Cursor: words at indices below `index` are already consumed

    def __init__(self, core: Optional[BatchCore] = None) -> None:
        """Wrap `core` (default: `core_type` with its default seed)."""
        self.core = self.core_type() if (core is None) else core
        self.results = np.zeros(self.core.block_size, dtype=np.uint32)
        self.index = self.core.block_size  # empty: generate on first draw

    def reset(self) -> None:
        """Discard buffered words, so that the next draw generates a new block."""
        self.index = len(self.results)

    def generate_and_set(self, index: int) -> None:
        """Generate a new block and set the cursor to `index`."""
        assert index < len(self.results)
        self.core.generate(self.results)
        self.index = index

    def next_u32(self) -> int:
        if self.index >= len(self.results):
            self.generate_and_set(0)
        value = int(self.results[self.index])
        self.index += 1
        return value

    def next_u64(self) -> int:
        n_results = len(self.results)
        index = self.index
        if index < n_results - 1:
            self.index += 2
            return int(self.results[index]) | (int(self.results[index + 1]) << 32)
        elif index >= n_results:
            self.generate_and_set(2)
            return int(self.results[0]) | (int(self.results[1]) << 32)
        else:
            # One word left: it becomes the low half across the refill
            low = int(self.results[-1])
            self.generate_and_set(1)
            return low | (int(self.results[0]) << 32)

    @classmethod
    def from_seed(
        cls: Type[BlockRngType], seed: bytes, lanes: Optional[Lanes] = None
    ) -> BlockRngType:
        return cls(cls.core_type(seed, lanes))

    @classmethod
    def from_seed_u64(
        cls: Type[BlockRngType], seed: int, lanes: Optional[Lanes] = None
    ) -> BlockRngType:
        return cls(cls.core_type.from_seed_u64(seed, lanes))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.core!r}, index={self.index})"
