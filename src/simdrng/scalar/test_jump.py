import copy

import pytest
import simdrng as sr
from ._xorshift1024 import N_WORDS


def single_bit_polynomial(k: int) -> list[int]:
    """Jump polynomial x^k, which advances XorShift1024 by k steps (k < 1024)."""
    polynomial = [0] * N_WORDS
    polynomial[k // 64] = 1 << (k % 64)
    return polynomial


@pytest.mark.parametrize("k", (0, 1, 5, 16, 17, 100, 1023))
def test_jump_with_single_bit(k: int) -> None:
    """Jumping by polynomial x^k must equal drawing k values."""
    jumped = sr.XorShift1024.from_seed_u64(2024)
    stepped = copy.deepcopy(jumped)
    jumped.jump_with(single_bit_polynomial(k))
    for _ in range(k):
        stepped.next_u64()
    assert [jumped.next_u64() for _ in range(50)] == [
        stepped.next_u64() for _ in range(50)
    ]


@pytest.mark.parametrize("cls", (sr.XorShift1024, sr.XoroShiro128))
@pytest.mark.parametrize("n_steps", (0, 3, 40))
def test_jump_commutes_with_steps(cls, n_steps: int) -> None:
    """Jumping then drawing must equal drawing then jumping."""
    rng1 = cls.from_seed_u64(7)
    rng2 = cls.from_seed_u64(7)
    rng1.jump()
    out1 = [rng1.next_u64() for _ in range(n_steps)]
    out2 = [rng2.next_u64() for _ in range(n_steps)]
    rng2.jump()
    assert [rng1.next_u64() for _ in range(20)] == [
        rng2.next_u64() for _ in range(20)
    ]
    if n_steps:
        assert out1 != out2


@pytest.mark.parametrize("cls", (sr.XorShift1024, sr.XoroShiro128))
def test_jump_changes_stream(cls) -> None:
    rng1 = cls.from_seed_u64(11)
    rng2 = cls.from_seed_u64(11)
    rng2.jump()
    assert [rng1.next_u64() for _ in range(10)] != [
        rng2.next_u64() for _ in range(10)
    ]


def test_split() -> None:
    rng = sr.XorShift1024.from_seed_u64(5)
    reference = sr.XorShift1024.from_seed_u64(5)
    streams = rng.split(3)
    # First stream continues the original, next ones are one jump apart:
    assert streams[0].next_u64() == reference.next_u64()
    reference = sr.XorShift1024.from_seed_u64(5)
    reference.jump()
    assert streams[1].next_u64() == reference.next_u64()
    # Original is left beyond all streams:
    reference = sr.XorShift1024.from_seed_u64(5)
    for _ in range(3):
        reference.jump()
    assert rng.next_u64() == reference.next_u64()
    firsts = {stream.next_u64() for stream in streams}
    assert len(firsts) == 3


def test_jump_with_invalid_polynomial() -> None:
    rng = sr.XorShift1024.from_seed_u64(1)
    with pytest.raises(sr.io.InvalidInputException):
        rng.jump_with([1, 2, 3])


def main():
    """Time repeated jumps of the scalar generators."""
    sr.io.log_config()
    sr.rc.init()
    rng = sr.XorShift1024.from_seed_u64(0)
    rng_128 = sr.XoroShiro128.from_seed_u64(0)
    for _ in range(10):
        rng.jump()
        rng_128.jump()
    sr.utils.StopWatch.print_stats()


if __name__ == "__main__":
    main()
