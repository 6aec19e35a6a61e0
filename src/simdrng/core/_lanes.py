"""Lockstep evaluation of four 64-bit lanes with numpy or torch arrays."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Sequence

import numpy as np
import torch

import simdrng as sr
from simdrng.math import to_signed64


class Lanes(ABC):
    """Wraparound 64-bit arithmetic on arrays of lane words.
    Lane arrays support `^` and `|` directly; the operations below provide
    modular arithmetic and logical shifts with no carry between lanes."""

    name: ClassVar[str]  #: Backend name, as selected in `simdrng.rc`

    @abstractmethod
    def words(self, values: Sequence[int]) -> Any:
        """Lane array holding unsigned 64-bit `values`."""

    @abstractmethod
    def to_numpy(self, x: Any) -> np.ndarray:
        """Unsigned 64-bit numpy copy of lane array `x`."""

    @abstractmethod
    def add(self, x: Any, c: int) -> Any:
        """`x + c` modulo 2^64 in each lane."""

    @abstractmethod
    def mul(self, x: Any, c: int) -> Any:
        """`x * c` modulo 2^64 in each lane."""

    @abstractmethod
    def shr(self, x: Any, k: int) -> Any:
        """Logical right shift of each lane by `k` bits (0 < k < 64)."""

    @abstractmethod
    def shl(self, x: Any, k: int) -> Any:
        """Left shift of each lane by `k` bits, discarding overflow."""

    @abstractmethod
    def add_lanes(self, x: Any, y: Any) -> Any:
        """`x + y` modulo 2^64, lane by lane."""

    @property
    def on_cuda(self) -> bool:
        """Whether lane arithmetic runs asynchronously on a CUDA device."""
        return False

    def rotl(self, x: Any, k: int) -> Any:
        """Rotate each lane left by `k` bits (0 < k < 64)."""
        return self.shl(x, k) | self.shr(x, 64 - k)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NumpyLanes(Lanes):
    """Lanes as numpy uint64 arrays, which wrap around natively."""

    name = "numpy"

    def words(self, values: Sequence[int]) -> np.ndarray:
        return np.array(values, dtype=np.uint64)

    def to_numpy(self, x: np.ndarray) -> np.ndarray:
        return x.copy()

    def add(self, x: np.ndarray, c: int) -> np.ndarray:
        return x + np.uint64(c)

    def mul(self, x: np.ndarray, c: int) -> np.ndarray:
        return x * np.uint64(c)

    def shr(self, x: np.ndarray, k: int) -> np.ndarray:
        return x >> np.uint64(k)

    def shl(self, x: np.ndarray, k: int) -> np.ndarray:
        return x << np.uint64(k)

    def add_lanes(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return x + y


class TorchLanes(Lanes):
    """Lanes as int64 torch tensors on `device`, holding the two's complement
    bit patterns of the unsigned words. Right shifts are masked to be logical,
    since torch shifts signed integers arithmetically."""

    name = "torch"
    device: torch.device  #: Device holding the lane tensors

    def __init__(self, device: Optional[torch.device] = None) -> None:
        self.device = sr.rc.device if (device is None) else device

    def words(self, values: Sequence[int]) -> torch.Tensor:
        return torch.tensor(
            [to_signed64(v) for v in values], dtype=torch.int64, device=self.device
        )

    def to_numpy(self, x: torch.Tensor) -> np.ndarray:
        return x.to(sr.rc.cpu).numpy().view(np.uint64).copy()

    def add(self, x: torch.Tensor, c: int) -> torch.Tensor:
        return x + to_signed64(c)

    def mul(self, x: torch.Tensor, c: int) -> torch.Tensor:
        return x * to_signed64(c)

    def shr(self, x: torch.Tensor, k: int) -> torch.Tensor:
        return (x >> k) & ((1 << (64 - k)) - 1)

    def shl(self, x: torch.Tensor, k: int) -> torch.Tensor:
        return x << k

    def add_lanes(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return x + y

    @property
    def on_cuda(self) -> bool:
        return self.device.type == "cuda"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(device={self.device})"


def get_lanes(backend: Optional[str] = None) -> Lanes:
    """Lane implementation for `backend` (default: as selected in `simdrng.rc`)."""
    backend = sr.rc.backend if (backend is None) else backend
    for cls in (NumpyLanes, TorchLanes):
        if cls.name == backend:
            return cls()
    raise sr.io.InvalidInputException(
        f"Lane backend '{backend}' not one of {', '.join(sr.rc.BACKENDS)}"
    )
