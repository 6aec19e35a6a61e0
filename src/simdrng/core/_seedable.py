from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Type, TypeVar

from simdrng.io import InvalidSeedException
from ._word_source import WordSource


SeedableType = TypeVar("SeedableType", bound="SeedableRng")


class SeedableRng(ABC):
    """Construction of a generator from a fixed-size seed.
    Derived classes set `seed_size` and accept the seed bytes as the first
    argument of their constructor; seeds are decoded as little-endian words."""

    seed_size: ClassVar[int]  #: Number of seed bytes

    @classmethod
    def default_seed(cls) -> bytes:
        """Fixed seed 0, 1, ..., `seed_size` - 1 used when no seed is specified.
        Reproducible, but generators created this way are not independent."""
        return bytes(range(cls.seed_size))

    @classmethod
    def check_seed(cls, seed: Optional[bytes]) -> bytes:
        """Return `seed` as bytes after checking its length,
        or the default seed if `seed` is None."""
        if seed is None:
            return cls.default_seed()
        if not isinstance(seed, (bytes, bytearray, memoryview)):
            raise InvalidSeedException(
                f"Seed for {cls.__name__} must be bytes (got {type(seed).__name__})"
            )
        seed = bytes(seed)
        if len(seed) != cls.seed_size:
            raise InvalidSeedException.wrong_length(
                cls.__name__, cls.seed_size, len(seed)
            )
        return seed

    @classmethod
    def from_seed(cls: Type[SeedableType], seed: bytes, **kwargs) -> SeedableType:
        """Create generator from exactly `seed_size` bytes of `seed`."""
        return cls(seed, **kwargs)  # type: ignore

    @classmethod
    def from_rng(
        cls: Type[SeedableType], source: WordSource, **kwargs
    ) -> SeedableType:
        """Create generator with a seed of exactly `seed_size` bytes drawn from
        `source`. Failures of `source` propagate as `SeedSourceException`."""
        seed = bytearray(cls.seed_size)
        source.try_fill_bytes(seed)
        return cls.from_seed(bytes(seed), **kwargs)

    @classmethod
    @abstractmethod
    def from_seed_u64(cls: Type[SeedableType], seed: int, **kwargs) -> SeedableType:
        """Create generator from a single 64-bit value `seed`."""
