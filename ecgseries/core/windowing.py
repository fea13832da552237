# ecgseries/core/windowing.py
"""
Window helpers shared by TimeSeries.subset / TimeSeries.trim.

Both helpers assume the sample times are sorted ascending, which the
series guarantees only through append order.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from .annotation import Annotation


def annotation_bounds(
    annotations: Iterable[Annotation],
    pivot: float,
    category: int,
    default_upper: float,
    *,
    default_lower: float = 0.0,
) -> tuple[float, float]:
    """
    Return the (lower, upper) locations of the `category` annotations that
    straddle `pivot`.

    lower is the greatest location strictly below the pivot, upper the least
    location strictly above it. An annotation sitting exactly on the pivot
    never bounds. Missing sides fall back to the given defaults.
    """
    lower: float | None = None
    upper: float | None = None

    for anno in annotations:
        if anno.category != category:
            continue
        loc = anno.location
        if loc < pivot and (lower is None or loc > lower):
            lower = loc
        elif loc > pivot and (upper is None or loc < upper):
            upper = loc

    return (
        default_lower if lower is None else lower,
        default_upper if upper is None else upper,
    )


def insertion_index(times: np.ndarray, target: float) -> int:
    """
    Index of the sample whose time equals `target`, or the insertion point
    that keeps `times` sorted when there is no exact match.

    With repeated times the first matching index is returned. The result is
    always within [0, len(times)]; this is an approximation policy, not an
    error path.
    """
    idx = int(np.searchsorted(times, target, side="left"))
    return min(max(idx, 0), int(times.size))


def half_open_mask(times: np.ndarray, start: float, end: float) -> np.ndarray:
    """Boolean mask selecting start <= t < end."""
    return (times >= start) & (times < end)
