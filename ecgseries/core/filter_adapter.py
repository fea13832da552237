# ecgseries/core/filter_adapter.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np

from .settings import FilterSettings
from .timeseries import TimeSeries


logger = logging.getLogger(__name__)


@runtime_checkable
class SignalFilter(Protocol):
    """
    Numeric filter collaborator.

    Every method receives the (2, n) buffer of a series (row 0 times, row 1
    values) and returns the filtered value row, or a (2, n) buffer with the
    time row unchanged. Sample count and order must be preserved.
    """

    def detrend(self, buffer: np.ndarray, degree: int) -> Any: ...

    def smooth(self, buffer: np.ndarray, left: int, right: int, degree: int) -> Any: ...

    def low_pass(self, buffer: np.ndarray, cutoff: float) -> Any: ...

    def high_pass(self, buffer: np.ndarray, cutoff: float) -> Any: ...

    def band_filter(self, buffer: np.ndarray, low_cutoff: float, high_cutoff: float) -> Any: ...


@dataclass(slots=True)
class FilterAdapter:
    """Routes filter calls from a TimeSeries to a SignalFilter backend."""

    backend: SignalFilter

    def __post_init__(self) -> None:
        if not isinstance(self.backend, SignalFilter):
            raise TypeError("FilterAdapter.backend must implement the SignalFilter protocol.")

    def detrend(self, series: TimeSeries, degree: int) -> None:
        logger.debug("detrend degree=%d on %d samples", degree, series.n)
        series.apply_filter(lambda buf: self.backend.detrend(buf, degree))

    def smooth(self, series: TimeSeries, left: int, right: int, degree: int) -> None:
        logger.debug(
            "smooth left=%d right=%d degree=%d on %d samples", left, right, degree, series.n
        )
        series.apply_filter(lambda buf: self.backend.smooth(buf, left, right, degree))

    def low_pass(self, series: TimeSeries, cutoff: float) -> None:
        logger.debug("low_pass cutoff=%s on %d samples", cutoff, series.n)
        series.apply_filter(lambda buf: self.backend.low_pass(buf, cutoff))

    def high_pass(self, series: TimeSeries, cutoff: float) -> None:
        logger.debug("high_pass cutoff=%s on %d samples", cutoff, series.n)
        series.apply_filter(lambda buf: self.backend.high_pass(buf, cutoff))

    def band_filter(self, series: TimeSeries, low_cutoff: float, high_cutoff: float) -> None:
        logger.debug(
            "band_filter [%s, %s] on %d samples", low_cutoff, high_cutoff, series.n
        )
        series.apply_filter(lambda buf: self.backend.band_filter(buf, low_cutoff, high_cutoff))

    def run(self, series: TimeSeries, settings: FilterSettings) -> list[str]:
        """
        Apply the chain configured in `settings`: detrend, smooth, high-pass,
        low-pass, band filter. Disabled steps are skipped.

        Returns the names of the steps that ran.
        """
        if not isinstance(settings, FilterSettings):
            raise TypeError("run() expects a FilterSettings instance.")

        applied: list[str] = []
        if settings.detrend_degree is not None:
            self.detrend(series, settings.detrend_degree)
            applied.append("detrend")
        if settings.smoothing:
            self.smooth(
                series, settings.smooth_left, settings.smooth_right, settings.smooth_degree
            )
            applied.append("smooth")
        if settings.high_pass_hz is not None:
            self.high_pass(series, settings.high_pass_hz)
            applied.append("high_pass")
        if settings.low_pass_hz is not None:
            self.low_pass(series, settings.low_pass_hz)
            applied.append("low_pass")
        if settings.band_hz is not None:
            self.band_filter(series, *settings.band_hz)
            applied.append("band_filter")
        return applied
