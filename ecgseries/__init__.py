# ecgseries/__init__.py
import logging

from .core import Annotation, FilterAdapter, FilterSettings, Sample, SignalFilter, TimeSeries


__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Annotation",
    "FilterAdapter",
    "FilterSettings",
    "Sample",
    "SignalFilter",
    "TimeSeries",
]
