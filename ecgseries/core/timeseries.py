# ecgseries/core/timeseries.py
from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

import numpy as np

from .annotation import Annotation
from .exceptions import (
    DimensionMismatch,
    EmptySeries,
    IndexOutOfRange,
    InvalidAnnotation,
    InvalidTimeSeries,
)
from .sample import Sample
from .windowing import annotation_bounds, half_open_mask, insertion_index


logger = logging.getLogger(__name__)

# A filter receives the (2, n) buffer and returns either a value row, a
# (2, n) buffer, or None after mutating the buffer it was handed.
FilterFunc = Callable[[np.ndarray], Any]


def _as_1d(name: str, arr: Any) -> np.ndarray:
    a = np.asarray(arr, dtype=float)
    if a.ndim != 1:
        raise InvalidTimeSeries(f"`{name}` must be 1D, got shape {a.shape}")
    return a


def _filtered_values(result: np.ndarray, buffer: np.ndarray, times: np.ndarray) -> np.ndarray:
    n = int(times.size)

    # the handed-in buffer may have been mutated whatever the filter returns
    if not np.array_equal(buffer[0], times):
        raise DimensionMismatch("filter changed or reordered the time row of its buffer")

    if result.ndim == 1:
        if result.size != n:
            raise DimensionMismatch(
                f"filter returned {result.size} values for {n} samples"
            )
        return result

    if result.ndim == 2:
        if result.shape != (2, n):
            raise DimensionMismatch(
                f"filter returned a buffer of shape {result.shape}, expected {(2, n)}"
            )
        if not np.array_equal(result[0], times):
            raise DimensionMismatch("filter changed or reordered the time row")
        return result[1]

    raise DimensionMismatch(f"filter returned a {result.ndim}D buffer, expected 1D or 2D")


@dataclass(slots=True, eq=False)
class TimeSeries:
    """
    Mutable samples + annotations of a single recording channel.

    Samples are kept in insertion order, which callers must make equal to
    time order: nothing here sorts or checks monotonicity, and `trim` relies
    on it for its binary search.

    - bad_lead: the whole channel is flagged unreliable
    - sample_frequency: acquisition rate in Hz, metadata only
    """

    bad_lead: bool = False
    sample_frequency: float = 0.0

    _times: list[float] = field(default_factory=list, init=False, repr=False)
    _values: list[float] = field(default_factory=list, init=False, repr=False)
    _annotations: set[Annotation] = field(default_factory=set, init=False, repr=False)

    @classmethod
    def from_arrays(
        cls,
        time: Any,
        values: Any,
        *,
        bad_lead: bool = False,
        sample_frequency: float = 0.0,
    ) -> "TimeSeries":
        series = cls(bad_lead=bad_lead, sample_frequency=sample_frequency)
        series.extend(time, values)
        return series

    # ---- samples ----
    def append(self, time: float, value: float) -> None:
        t = float(time)
        if not math.isfinite(t):
            raise InvalidTimeSeries("`time` must be finite (no NaN/Inf).")
        self._times.append(t)
        self._values.append(float(value))

    def extend(self, times: Any, values: Any) -> None:
        t = _as_1d("time", times)
        v = _as_1d("values", values)
        if t.size != v.size:
            raise InvalidTimeSeries(
                f"`time` and `values` must have same length, got {t.size} vs {v.size}"
            )
        if t.size > 0 and not np.isfinite(t).all():
            raise InvalidTimeSeries("`time` contains non-finite values (NaN/Inf).")

        self._times.extend(t.tolist())
        self._values.extend(v.tolist())

    def sample_at(self, index: int) -> Sample:
        i = operator.index(index)
        if not 0 <= i < len(self._times):
            raise IndexOutOfRange(
                f"sample index {i} out of range for a series of {len(self._times)} samples"
            )
        return Sample(self._times[i], self._values[i])

    def __len__(self) -> int:
        return len(self._times)

    def __iter__(self) -> Iterator[Sample]:
        for t, v in zip(self._times, self._values):
            yield Sample(t, v)

    @property
    def n(self) -> int:
        return len(self._times)

    @property
    def t_start(self) -> float | None:
        return self._times[0] if self._times else None

    @property
    def t_end(self) -> float | None:
        return self._times[-1] if self._times else None

    @property
    def time(self) -> np.ndarray:
        return np.array(self._times, dtype=float)

    @property
    def values(self) -> np.ndarray:
        return np.array(self._values, dtype=float)

    # ---- annotations ----
    @property
    def annotations(self) -> list[Annotation]:
        """Snapshot of the annotation set, in no particular order."""
        return list(self._annotations)

    def add_annotation(self, category: int, location: float) -> Annotation:
        anno = Annotation(category, location)
        self._annotations.add(anno)
        return anno

    def replace_annotations(self, annotations: Iterable[Annotation]) -> None:
        new: set[Annotation] = set()
        for anno in annotations:
            if not isinstance(anno, Annotation):
                raise InvalidAnnotation(
                    f"replace_annotations() expects Annotation instances, got {type(anno).__name__}."
                )
            new.add(anno)
        self._annotations = new

    def clear_annotations(self) -> None:
        self._annotations.clear()

    def annotations_of(self, category: int) -> list[Annotation]:
        return sorted(
            (a for a in self._annotations if a.category == category),
            key=lambda a: a.location,
        )

    def has_annotation_at(self, location: float, category: int | None = None) -> bool:
        """
        True if an annotation sits exactly at `location`.

        Without `category` any category matches; with it, the exact
        (category, location) pair must be present.
        """
        loc = float(location)
        if category is None:
            return any(a.location == loc for a in self._annotations)
        return any(a.location == loc and a.category == category for a in self._annotations)

    # ---- copies ----
    def clone(self) -> "TimeSeries":
        out = TimeSeries(bad_lead=self.bad_lead, sample_frequency=self.sample_frequency)
        out._times = list(self._times)
        out._values = list(self._values)
        out._annotations = set(self._annotations)
        return out

    def copy_from(self, source: "TimeSeries") -> None:
        """Overwrite this series in place with a copy of `source`."""
        if not isinstance(source, TimeSeries):
            raise TypeError("copy_from() expects a TimeSeries instance.")
        if source is self:
            return

        self._times = list(source._times)
        self._values = list(source._values)
        self._annotations = set(source._annotations)
        self.bad_lead = source.bad_lead
        self.sample_frequency = source.sample_frequency

    # ---- export ----
    def to_matrix(self) -> np.ndarray:
        """(2, n) float array: row 0 times, row 1 values, in stored order."""
        return np.array([self._times, self._values], dtype=float).reshape(2, len(self._times))

    # ---- windows ----
    def subset(self, start: float, end: float) -> "TimeSeries":
        """
        New series with the samples in [start, end).

        Samples are copied, so later trimming or filtering of this series does
        not reach the subset. Annotations, bad_lead and sample_frequency are
        not carried over.
        """
        t = self.time
        mask = half_open_mask(t, start, end)
        out = TimeSeries()
        out._times = t[mask].tolist()
        out._values = self.values[mask].tolist()
        return out

    def trim(self, pivot: float, category: int) -> tuple[float, float]:
        """
        Crop the series in place to the window between the two `category`
        annotations that straddle `pivot`.

        Without a lower annotation the window starts at time 0; without an
        upper one it ends at the last sample time (exclusive). Bound times
        that match no sample resolve to their insertion point.

        Returns the (lower, upper) bound times used.
        """
        if not self._times:
            raise EmptySeries("cannot trim an empty series: there is no last sample to bound it.")

        lower, upper = annotation_bounds(
            self._annotations, float(pivot), category, default_upper=self._times[-1]
        )

        times = self.time
        lo = insertion_index(times, lower)
        hi = insertion_index(times, upper)

        self._times = self._times[lo:hi]
        self._values = self._values[lo:hi]

        logger.debug(
            "trim pivot=%s category=%s -> times [%s, %s), indices [%d, %d), %d samples kept",
            pivot, category, lower, upper, lo, hi, len(self._times),
        )
        return lower, upper

    # ---- filters ----
    def apply_filter(self, func: FilterFunc) -> None:
        """
        Hand a fresh (2, n) buffer to `func` and install the filtered values.

        Times are never overwritten. Raises DimensionMismatch when the
        returned buffer does not line up with the samples.
        """
        buffer = self.to_matrix()
        times = buffer[0].copy()

        result = func(buffer)
        result = buffer if result is None else np.asarray(result, dtype=float)

        try:
            values = _filtered_values(result, buffer, times)
        except DimensionMismatch:
            logger.warning("rejected filter output for a series of %d samples", len(times))
            raise

        self._values = values.tolist()
