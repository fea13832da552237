# ecgseries/core/__init__.py
"""
Core domain objects for ecgseries.

This module defines the single-channel recording model:
- Sample: one (time, value) observation
- Annotation: event marker tagged by an integer category
- TimeSeries: ordered samples + annotation set, subset / trim windows
- FilterAdapter: hands a series' buffer to a SignalFilter backend
- FilterSettings: configuration of the filter chain

The core layer is independent from I/O, rendering and filter maths.
"""

from .sample import Sample
from .annotation import Annotation
from .timeseries import TimeSeries, FilterFunc
from .windowing import annotation_bounds, insertion_index
from .filter_adapter import FilterAdapter, SignalFilter
from .settings import FilterSettings
from .exceptions import (
    CoreError,
    InvalidTimeSeries,
    InvalidAnnotation,
    InvalidSettings,
    IndexOutOfRange,
    EmptySeries,
    DimensionMismatch,
)


__all__ = [
    # values
    "Sample",
    "Annotation",

    # time series
    "TimeSeries",
    "FilterFunc",
    "annotation_bounds",
    "insertion_index",

    # filters
    "FilterAdapter",
    "SignalFilter",
    "FilterSettings",

    # exceptions
    "CoreError",
    "InvalidTimeSeries",
    "InvalidAnnotation",
    "InvalidSettings",
    "IndexOutOfRange",
    "EmptySeries",
    "DimensionMismatch",
]
