import numpy as np
import pytest
import simdrng as sr
from simdrng.core import WordSource


class CountingSource(WordSource):
    """Counter stream 1, 2, 3, ... recording the number of draws."""

    def __init__(self) -> None:
        self.n_draws = 0

    def next_u64(self) -> int:
        self.n_draws += 1
        return self.n_draws


class FailingSource(WordSource):
    """Source whose entropy is never available."""

    def next_u64(self) -> int:
        raise sr.io.SeedSourceException("entropy unavailable")

    def try_fill_bytes(self, dest) -> None:
        raise sr.io.SeedSourceException("entropy unavailable")


ALL_GENERATORS = (
    sr.SplitMix64,
    sr.Linnorm64,
    sr.XoroShiro128,
    sr.XorShift1024,
    sr.SplitMix64x4,
    sr.Linnorm64x4,
    sr.XoroShiro128x4,
)


@pytest.mark.parametrize("cls", ALL_GENERATORS)
@pytest.mark.parametrize("n_bytes", (0, 1, 7, 8, 9, 15, 16, 31, 45))
def test_fill_bytes_matches_words(cls, n_bytes: int) -> None:
    """Byte fills are little-endian words, with the final draw truncated."""
    rng1 = cls.from_seed_u64(12345)
    rng2 = cls.from_seed_u64(12345)
    dest = bytearray(n_bytes)
    rng1.fill_bytes(dest)
    expected = b"".join(
        rng2.next_u64().to_bytes(8, "little") for _ in range((n_bytes + 7) // 8)
    )
    assert bytes(dest) == expected[:n_bytes]
    # The truncated draw is not reused:
    assert rng1.next_u64() == rng2.next_u64()


@pytest.mark.parametrize("cls", ALL_GENERATORS)
def test_try_fill_bytes_succeeds(cls) -> None:
    rng1 = cls.from_seed_u64(3)
    rng2 = cls.from_seed_u64(3)
    dest1 = bytearray(21)
    dest2 = bytearray(21)
    rng1.try_fill_bytes(dest1)
    rng2.fill_bytes(dest2)
    assert dest1 == dest2


def test_fill_bytes_buffer_types() -> None:
    rng1 = sr.Linnorm64.from_seed_u64(8)
    rng2 = sr.Linnorm64.from_seed_u64(8)
    array = np.zeros(13, dtype=np.uint8)
    rng1.fill_bytes(array)
    view = memoryview(bytearray(13))
    rng2.fill_bytes(view)
    assert array.tobytes() == view.tobytes()
    with pytest.raises(TypeError):
        rng1.fill_bytes(bytes(8))


def test_next_u64s() -> None:
    rng1 = sr.XorShift1024.from_seed_u64(1)
    rng2 = sr.XorShift1024.from_seed_u64(1)
    words = rng1.next_u64s(25)
    assert words.dtype == np.uint64
    assert [int(w) for w in words] == [rng2.next_u64() for _ in range(25)]


@pytest.mark.parametrize("cls", ALL_GENERATORS)
def test_from_rng_draws_exact_seed(cls) -> None:
    source = CountingSource()
    rng = cls.from_rng(source)
    assert source.n_draws == cls.seed_size // 8
    seed = b"".join(i.to_bytes(8, "little") for i in range(1, source.n_draws + 1))
    reference = cls.from_seed(seed)
    assert [rng.next_u64() for _ in range(10)] == [
        reference.next_u64() for _ in range(10)
    ]


@pytest.mark.parametrize("cls", ALL_GENERATORS)
def test_from_rng_failure(cls) -> None:
    with pytest.raises(sr.io.SeedSourceException):
        cls.from_rng(FailingSource())


def test_seed_derivation_chain() -> None:
    """A generator seeded from another continues to be reproducible."""
    parent1 = sr.SplitMix64.from_seed_u64(77)
    parent2 = sr.SplitMix64.from_seed_u64(77)
    child1 = sr.XorShift1024.from_rng(sr.XoroShiro128.from_rng(parent1))
    child2 = sr.XorShift1024.from_rng(sr.XoroShiro128.from_rng(parent2))
    assert child1.next_u64s(10).tolist() == child2.next_u64s(10).tolist()
    assert parent1.next_u64() == parent2.next_u64()
