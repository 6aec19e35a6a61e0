from __future__ import annotations
from typing import Sequence

import numpy as np


MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


def rotl64(x: int, k: int) -> int:
    """Rotate 64-bit word `x` left by `k` bits (0 < k < 64)."""
    return ((x << k) & MASK64) | (x >> (64 - k))


def words_from_bytes(data: bytes, n_words: int) -> list[int]:
    """Decode `n_words` little-endian 64-bit words from the start of `data`."""
    assert len(data) >= 8 * n_words
    return [int(w) for w in np.frombuffer(data, dtype="<u8", count=n_words)]


def bytes_from_words(words: Sequence[int]) -> bytes:
    """Encode 64-bit `words` as consecutive little-endian bytes."""
    return np.array(words, dtype=np.uint64).astype("<u8").tobytes()


def to_signed64(x: int) -> int:
    """Two's complement signed interpretation of the 64-bit word `x`,
    as needed for int64 torch tensors."""
    x &= MASK64
    return x - (1 << 64) if x >> 63 else x


def ceildiv(num: int, den: int) -> int:
    """Compute ceil(num/den) with purely integer operations"""
    return (num + den - 1) // den
