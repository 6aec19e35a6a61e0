from typing import Optional, Union
import logging
import sys

import numpy as np
import torch

from simdrng import rc, log


def log_config(
    *, output_file: Optional[str] = None, append: bool = True, verbose: bool = False
):
    """Configure logging globally for the simdrng library. It should typically
    only be necessary to call this once during start-up. Note that the default
    log configuration before calling this function is to pass warnings and errors
    on to the root logger.

    For further customization, directly modify the :class:`logging.Logger`
    object :attr:`~simdrng.log`, as required.

    Parameters
    ----------
    output_file
        Output file to write log to.
        Default = None implies log to stdout.
    append
        Whether log files should be appended or overwritten.
    verbose
        Whether to log debug information including module/line numbers of code.
    """

    # Create handler with appropriate output file and mode, if any:
    filemode = "a" if append else "w"
    handler = get_handler(output_file or "", filemode)

    # Set log format:
    handler.setFormatter(
        logging.Formatter(
            ("[%(module)s:%(lineno)d] " if verbose else "") + "%(message)s"
        )
    )

    # Set handler:
    log.handlers.clear()
    log.addHandler(handler)

    # Select log level:
    log.setLevel(logging.DEBUG if verbose else logging.INFO)


def fmt(array: Union[torch.Tensor, np.ndarray], **kwargs) -> str:
    """Standardized conversion of lane arrays (torch tensors or numpy arrays)
    for logging. 64-bit words are shown in hexadecimal by default.
    Keyword arguments are forwarded to `numpy.array2string`."""
    if isinstance(array, torch.Tensor):
        array = array.detach().to(rc.cpu).numpy()
    if array.dtype in (np.int64, np.uint64):
        array = array.view(np.uint64)
        kwargs.setdefault("formatter", {"int": lambda x: f"0x{int(x):016x}"})
    kwargs.setdefault("separator", ", ")
    return np.array2string(array, **kwargs)


def get_handler(filename: str, filemode: str) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename, mode=filemode)
    else:
        return logging.StreamHandler(sys.stdout)
