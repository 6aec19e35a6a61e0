"""I/O functionality including logging and error reporting."""
# List exported symbols for doc generation
__all__ = (
    "log_config",
    "fmt",
    "InvalidInputException",
    "InvalidSeedException",
    "SeedSourceException",
    "check_seed_u64",
)

from ._log_config import log_config, fmt
from ._error import (
    InvalidInputException,
    InvalidSeedException,
    SeedSourceException,
    check_seed_u64,
)
