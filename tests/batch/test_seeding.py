import logging

import pytest
import simdrng as sr
from simdrng.math import bytes_from_words


def expansion_seed(source: sr.WordSource, n_bytes: int) -> bytes:
    seed = bytearray(n_bytes)
    source.fill_bytes(seed)
    return bytes(seed)


@pytest.mark.parametrize(
    "block_type, expander",
    (
        (sr.SplitMix64x4, sr.Linnorm64),
        (sr.Linnorm64x4, sr.SplitMix64),
        (sr.XoroShiro128x4, sr.SplitMix64),
    ),
)
@pytest.mark.parametrize("seed", (0, 1, 0xDEADBEEFCAFEBABE))
def test_cross_seeding(block_type, expander, seed: int) -> None:
    """64-bit seeds expand through the other algorithm's byte stream."""
    rng = block_type.from_seed_u64(seed)
    expected_seed = expansion_seed(
        expander.from_seed_u64(seed), block_type.seed_size
    )
    reference = block_type.from_seed(expected_seed)
    assert rng.next_u64s(40).tolist() == reference.next_u64s(40).tolist()


@pytest.mark.parametrize("block_type", (sr.SplitMix64x4, sr.Linnorm64x4))
def test_default_seed(block_type) -> None:
    assert block_type.default_seed() == bytes(range(32))
    rng = block_type()
    reference = block_type.from_seed(bytes(range(32)))
    assert rng.next_u64s(16).tolist() == reference.next_u64s(16).tolist()


def test_default_seed_lane_words() -> None:
    core = sr.batch.Linnorm64x4Core()
    expected = [
        int.from_bytes(bytes(range(8 * i, 8 * i + 8)), "little") for i in range(4)
    ]
    assert core.lanes.to_numpy(core.x).tolist() == expected


@pytest.mark.parametrize("seed", (1, 2, 3, 0xFFFFFFFFFFFFFFFF))
def test_xoroshiro128x4_not_degenerate(seed: int) -> None:
    core = sr.batch.XoroShiro128x4Core.from_seed_u64(seed)
    s0 = core.lanes.to_numpy(core.s0)
    s1 = core.lanes.to_numpy(core.s1)
    assert ((s0 != 0) | (s1 != 0)).all()


def test_xoroshiro128x4_zero_lane_warning(caplog) -> None:
    seed = bytes(16) + bytes_from_words([1, 2, 3, 4, 5, 6])
    with caplog.at_level(logging.WARNING, logger="simdrng"):
        core = sr.batch.XoroShiro128x4Core.from_seed(seed)
    assert "lanes [0]" in caplog.text
    assert all(int(core.next_batch()[0]) == 0 for _ in range(5))


@pytest.mark.parametrize("block_type", (sr.SplitMix64x4, sr.XoroShiro128x4))
def test_invalid_seed_length(block_type) -> None:
    with pytest.raises(sr.io.InvalidSeedException):
        block_type.from_seed(bytes(block_type.seed_size - 8))
