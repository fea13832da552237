# ecgseries/filters/scipy_filter.py
"""
Reference SignalFilter backend built on NumPy / SciPy.

Each method takes the (2, n) buffer produced by TimeSeries.to_matrix() and
returns the filtered value row; the time row is only read, to fit the
baseline and to estimate the sampling frequency when none is configured.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.polynomial import Polynomial
from scipy.signal import butter, savgol_coeffs, sosfiltfilt


logger = logging.getLogger(__name__)


def _split(buffer: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    buf = np.asarray(buffer, dtype=float)
    if buf.ndim != 2 or buf.shape[0] != 2:
        raise ValueError(f"Expected a (2, n) buffer, got shape {buf.shape}.")
    return buf[0], buf[1]


@dataclass(slots=True)
class ScipySignalFilter:
    """
    Filters for a single ECG lead.

    :param sample_frequency: Sampling rate, in Hz. When None or 0.0 (the
        TimeSeries default), it is estimated from the median spacing of
        the time row.
    :param order: Order of the Butterworth low/high pass filters.
    """

    sample_frequency: float | None = None
    order: int = 4

    def __post_init__(self) -> None:
        if self.sample_frequency is not None and self.sample_frequency < 0:
            raise ValueError("sample_frequency must be >= 0 when given.")
        if not self.sample_frequency:
            self.sample_frequency = None
        if self.order < 1:
            raise ValueError("order must be >= 1.")

    def _fs(self, times: np.ndarray) -> float:
        if self.sample_frequency is not None:
            return float(self.sample_frequency)
        if times.size < 2:
            raise ValueError("Cannot estimate the sampling frequency from fewer than 2 samples.")
        dt = float(np.median(np.diff(times)))
        if dt <= 0:
            raise ValueError("Cannot estimate the sampling frequency: time row is not increasing.")
        return 1.0 / dt

    def detrend(self, buffer: np.ndarray, degree: int) -> np.ndarray:
        """
        Subtract the least-squares polynomial baseline of the given degree.

        The degree is capped at n - 1 so short buffers still fit.
        """
        if degree < 0:
            raise ValueError(f"Detrend degree must be >= 0, got {degree}.")
        times, values = _split(buffer)
        if values.size == 0:
            return values.copy()

        deg = min(degree, values.size - 1)
        baseline = Polynomial.fit(times, values, deg)
        return values - baseline(times)

    def smooth(self, buffer: np.ndarray, left: int, right: int, degree: int) -> np.ndarray:
        """
        Savitzky-Golay smoothing over a window of `left` samples before and
        `right` samples after each point. Edges repeat the end samples.
        """
        if left < 0 or right < 0:
            raise ValueError(f"Window half-widths must be >= 0, got ({left}, {right}).")
        window = left + right + 1
        if not 0 <= degree < window:
            raise ValueError(
                f"Polynomial degree {degree} must be in [0, {window}) for a window of {window}."
            )
        _, values = _split(buffer)
        if values.size == 0 or window == 1:
            return values.copy()

        coeffs = savgol_coeffs(window, degree, pos=left, use="dot")
        padded = np.pad(values, (left, right), mode="edge")
        windows = np.lib.stride_tricks.sliding_window_view(padded, window)
        return windows @ coeffs

    def low_pass(self, buffer: np.ndarray, cutoff: float) -> np.ndarray:
        return self._butterworth(buffer, cutoff, "lowpass")

    def high_pass(self, buffer: np.ndarray, cutoff: float) -> np.ndarray:
        return self._butterworth(buffer, cutoff, "highpass")

    def band_filter(self, buffer: np.ndarray, low_cutoff: float, high_cutoff: float) -> np.ndarray:
        """Keep only the FFT bins within [low_cutoff, high_cutoff] Hz."""
        if not 0 <= low_cutoff < high_cutoff:
            raise ValueError(
                f"Band cutoffs must satisfy 0 <= low < high, got ({low_cutoff}, {high_cutoff})."
            )
        times, values = _split(buffer)
        if values.size == 0:
            return values.copy()

        fs = self._fs(times)
        spectrum = np.fft.rfft(values)
        freqs = np.fft.rfftfreq(values.size, d=1.0 / fs)
        spectrum[(freqs < low_cutoff) | (freqs > high_cutoff)] = 0
        return np.fft.irfft(spectrum, n=values.size)

    def _butterworth(self, buffer: np.ndarray, cutoff: float, btype: str) -> np.ndarray:
        times, values = _split(buffer)
        if values.size == 0:
            return values.copy()

        fs = self._fs(times)
        if not 0 < cutoff < fs / 2:
            raise ValueError(
                f"Cutoff {cutoff} Hz must lie strictly between 0 and the Nyquist frequency {fs / 2} Hz."
            )
        logger.debug("%s order=%d cutoff=%s Hz fs=%s Hz", btype, self.order, cutoff, fs)
        sos = butter(self.order, cutoff, btype=btype, output="sos", fs=fs)
        # default padding is 3 * (2 * sections + 1) samples; shorter inputs pad less
        padlen = min(3 * (2 * len(sos) + 1), values.size - 1)
        return sosfiltfilt(sos, values, padlen=padlen)
