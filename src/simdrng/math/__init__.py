"""Fixed-width integer arithmetic shared by the generators."""
# List exported symbols for doc generation
__all__ = (
    "MASK32",
    "MASK64",
    "rotl64",
    "words_from_bytes",
    "bytes_from_words",
    "to_signed64",
    "ceildiv",
)

from ._bits import (
    MASK32,
    MASK64,
    rotl64,
    words_from_bytes,
    bytes_from_words,
    to_signed64,
    ceildiv,
)
