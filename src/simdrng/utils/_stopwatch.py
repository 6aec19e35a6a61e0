"""Timing of jumps and other long-running generator operations."""
from __future__ import annotations
import functools
import time
from typing import ClassVar, Union

import numpy as np
import torch

import simdrng as sr


class StopWatch:
    """Timer for one call of a named operation. Create it when the operation
    starts and call `stop` when it ends; durations accumulate by name.

    Torch lanes on a CUDA device run asynchronously, so operations on them are
    timed with CUDA events instead (`cuda=True`). The durations of those events
    are only collected on the next `get_stats` or `print_stats`."""

    name: str  #: Name of the timed operation
    cuda: bool  #: Whether this watch records CUDA events
    _start: Union[None, float, torch.cuda.Event]

    #: Durations in seconds, by operation name
    _durations: ClassVar[dict[str, list[float]]] = {}

    #: Recorded (name, start, stop) CUDA events not yet synchronized
    _pending: ClassVar[list[tuple[str, torch.cuda.Event, torch.cuda.Event]]] = []

    def __init__(self, name: str, cuda: bool = False) -> None:
        self.name = name
        self.cuda = cuda
        if cuda:
            self._start = torch.cuda.Event(enable_timing=True)
            self._start.record()
        else:
            self._start = time.perf_counter()

    def stop(self) -> None:
        """Record the duration since this watch started (only once)."""
        if self._start is None:
            return
        if self.cuda:
            end = torch.cuda.Event(enable_timing=True)
            end.record()
            self._pending.append((self.name, self._start, end))
        else:
            self._record(self.name, time.perf_counter() - self._start)
        self._start = None

    @classmethod
    def _record(cls, name: str, duration: float) -> None:
        cls._durations.setdefault(name, []).append(duration)

    @classmethod
    def _collect_pending(cls) -> None:
        if cls._pending:
            torch.cuda.synchronize()
            for name, start, end in cls._pending:
                cls._record(name, 1e-3 * start.elapsed_time(end))
            cls._pending.clear()

    @classmethod
    def get_stats(cls) -> dict[str, list[float]]:
        """Durations (in seconds) of all timed calls so far, by name."""
        cls._collect_pending()
        return {name: list(durations) for name, durations in cls._durations.items()}

    @classmethod
    def print_stats(cls) -> None:
        """Log the number of calls, total and median duration of each operation."""
        stats = cls.get_stats()
        if not stats:
            sr.log.info("StopWatch: no timed operations")
            return
        width = max(len(name) for name in stats)
        for name, durations in sorted(stats.items()):
            t = np.array(durations)
            sr.log.info(
                f"StopWatch: {name:{width}s} {len(t):5d} calls,"
                f" {t.sum():10.6f} s total, {np.median(t):10.6f} s median"
            )


def stopwatch(*, name: str):
    """Decorator timing every call of a function that runs on the CPU as `name`.
    Operations on torch lanes should use `StopWatch` with `cuda` set from the
    lanes instead."""

    def decorator(func):
        @functools.wraps(func)
        def timed(*args, **kwargs):
            watch = StopWatch(name)
            result = func(*args, **kwargs)
            watch.stop()
            return result

        return timed

    return decorator
