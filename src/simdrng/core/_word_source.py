from __future__ import annotations
from abc import ABC, abstractmethod

import numpy as np

from simdrng.math import MASK32, ceildiv


class WordSource(ABC):
    """Source of pseudo-random 32-bit words, 64-bit words and byte fills.
    Every generator in this library implements this interface. Instances are
    single-owner: drawing mutates the generator state, so an instance must not
    be shared between concurrent callers."""

    @abstractmethod
    def next_u64(self) -> int:
        """Return the next 64-bit word of the stream."""

    def next_u32(self) -> int:
        """Return the next 32-bit word of the stream.
        By default, this is the low half of one 64-bit draw."""
        return self.next_u64() & MASK32

    def next_u64s(self, n: int) -> np.ndarray:
        """Return the next `n` 64-bit words as a uint64 array,
        identical to `n` consecutive calls of `next_u64`."""
        return np.fromiter(
            (self.next_u64() for _ in range(n)), dtype=np.uint64, count=n
        )

    def fill_bytes(self, dest) -> None:
        """Fill writable bytes-like `dest` in place with little-endian 64-bit words.
        A final chunk shorter than 8 bytes takes the low-order bytes of one
        further draw; the unused high-order bytes of that draw are discarded."""
        view = memoryview(dest).cast("B")
        n_bytes = view.nbytes
        words = self.next_u64s(ceildiv(n_bytes, 8))
        view[:] = words.astype("<u8").tobytes()[:n_bytes]

    def try_fill_bytes(self, dest) -> None:
        """Fill `dest` like `fill_bytes`, raising `SeedSourceException` if the
        underlying source fails. Sources backed by fallible entropy override this;
        deterministic generators always succeed."""
        self.fill_bytes(dest)
