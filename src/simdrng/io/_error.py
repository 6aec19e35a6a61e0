from __future__ import annotations
import numbers


class InvalidInputException(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidSeedException(InvalidInputException):
    """Seed of the wrong type, the wrong length, or out of range."""

    @classmethod
    def wrong_length(cls, name: str, expected: int, got: int) -> InvalidSeedException:
        return cls(f"Seed for {name} must be exactly {expected} bytes (got {got})")


class SeedSourceException(Exception):
    """Failure of an upstream word source while drawing seed or output bytes.
    Reserved for sources backed by fallible entropy: the generators in this
    library never raise it."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def check_seed_u64(seed: int) -> int:
    """Check that `seed` is an integer that fits in 64 bits unsigned, and return it
    as a Python int. Non-integers are rejected rather than truncated."""
    if not isinstance(seed, numbers.Integral):
        raise InvalidSeedException(
            f"Seed value must be an integer (got {type(seed).__name__})"
        )
    seed = int(seed)
    if not (0 <= seed < (1 << 64)):
        raise InvalidSeedException(f"Seed value {seed} does not fit in 64 bits")
    return seed
