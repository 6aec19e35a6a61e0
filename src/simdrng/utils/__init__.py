"""Shared utility functions and classes"""
# List exported symbols for doc generation
__all__ = ("StopWatch", "stopwatch")

from ._stopwatch import StopWatch, stopwatch
