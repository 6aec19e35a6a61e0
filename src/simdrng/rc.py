"""Run configuration: lane backend and device used by the batch generators.
The import-time configuration evaluates batch lanes with numpy on the CPU.

Call `init` to select the torch lane backend and optionally a CUDA device, based on
arguments or on the environment variables SIMDRNG_BACKEND (`numpy` or `torch`) and
SIMDRNG_DEVICE (`cpu` or `cuda`). A CUDA device is only used when it is requested
and available; otherwise the torch backend falls back to the CPU.

The configuration is only read when a batch core is constructed: changing it later
does not affect generators that already exist.
"""
import os
import torch
import simdrng as sr
from typing import Optional


# List exported symbols for doc generation
__all__ = (
    "BACKENDS",
    "backend",
    "cpu",
    "device",
    "use_cuda",
    "init",
)

BACKENDS = ("numpy", "torch")  #: Supported lane backends
backend: str = "numpy"  #: Lane backend for batch generators
cpu: torch.device = torch.device("cpu")  #: CPU torch device
device: torch.device = cpu  #: Device for torch lanes (CPU / GPU)
use_cuda: bool = False  #: Whether `device` is a CUDA GPU


def init(
    *, backend_override: Optional[str] = None, device_override: Optional[str] = None
) -> None:
    """Initialize the lane backend and device used by batch generators.

    Parameters
    ----------
    backend_override
        If specified, override the lane backend (one of `BACKENDS`).
        Otherwise, use environment variable SIMDRNG_BACKEND, defaulting to numpy.
    device_override
        If specified, override the torch device (`cpu` or `cuda`).
        Otherwise, use environment variable SIMDRNG_DEVICE, defaulting to cpu.
        Only relevant for the torch lane backend."""

    # Select backend:
    global backend
    backend_name = backend_override or os.environ.get("SIMDRNG_BACKEND", "numpy")
    if backend_name not in BACKENDS:
        raise sr.io.InvalidInputException(
            f"Lane backend '{backend_name}' not one of {', '.join(BACKENDS)}"
        )
    backend = backend_name

    # Select device:
    global device, use_cuda
    device_name = device_override or os.environ.get("SIMDRNG_DEVICE", "cpu")
    if device_name not in {"cpu", "cuda"}:
        raise sr.io.InvalidInputException(
            f"Device '{device_name}' not one of cpu, cuda"
        )
    if device_name == "cuda" and torch.cuda.is_available():
        device = torch.device("cuda:0")
        use_cuda = True
    else:
        if device_name == "cuda":
            sr.log.warning("CUDA requested but not available: using CPU lanes.")
        device = cpu
        use_cuda = False
    sr.log.info(
        f"Lane backend: {backend}"
        + (f" on {device}" if backend == "torch" else "")
    )
