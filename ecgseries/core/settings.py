# ecgseries/core/settings.py
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping

from .exceptions import InvalidSettings


@dataclass(frozen=True, slots=True)
class FilterSettings:
    """
    Filter chain configuration for one channel.

    Every step is optional; `None` disables it:
    - detrend_degree: degree of the baseline polynomial
    - smooth_left / smooth_right / smooth_degree: Savitzky-Golay window
      half-widths (in samples) and polynomial degree
    - high_pass_hz / low_pass_hz: single cutoffs, in Hz
    - band_hz: (low, high) cutoffs of the band filter, in Hz; low may be 0
    - attrs: arbitrary additional fields
    """
    detrend_degree: int | None = None
    smooth_left: int | None = None
    smooth_right: int | None = None
    smooth_degree: int | None = None
    high_pass_hz: float | None = None
    low_pass_hz: float | None = None
    band_hz: tuple[float, float] | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.detrend_degree is not None and self.detrend_degree < 0:
            raise InvalidSettings("FilterSettings.detrend_degree must be >= 0.")

        smooth = (self.smooth_left, self.smooth_right, self.smooth_degree)
        if any(v is not None for v in smooth):
            if any(v is None for v in smooth):
                raise InvalidSettings(
                    "FilterSettings.smooth_left, smooth_right and smooth_degree must be set together."
                )
            if self.smooth_left < 0 or self.smooth_right < 0 or self.smooth_degree < 0:
                raise InvalidSettings("FilterSettings smoothing widths and degree must be >= 0.")

        for name in ("high_pass_hz", "low_pass_hz"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise InvalidSettings(f"FilterSettings.{name} must be > 0.")

        if self.band_hz is not None:
            try:
                low, high = (float(x) for x in self.band_hz)
            except (TypeError, ValueError) as e:
                raise InvalidSettings("FilterSettings.band_hz must be a (low, high) pair.") from e
            if low < 0 or high <= low:
                raise InvalidSettings(
                    f"FilterSettings.band_hz must satisfy 0 <= low < high, got {self.band_hz}."
                )
            object.__setattr__(self, "band_hz", (low, high))

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidSettings("FilterSettings.attrs must be a dict.")

    @property
    def smoothing(self) -> bool:
        return self.smooth_degree is not None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FilterSettings":
        """Build settings from a plain dict (e.g. a parsed config file section)."""
        if not isinstance(mapping, Mapping):
            raise InvalidSettings("FilterSettings.from_mapping() expects a mapping.")

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InvalidSettings(f"Unknown filter settings: {', '.join(unknown)}.")

        kwargs = dict(mapping)
        if kwargs.get("band_hz") is not None:
            kwargs["band_hz"] = tuple(kwargs["band_hz"])
        if kwargs.get("attrs") is not None:
            kwargs["attrs"] = dict(kwargs["attrs"])
        return cls(**kwargs)

    def with_overrides(self, **changes: Any) -> "FilterSettings":
        if "attrs" not in changes:
            changes["attrs"] = self.attrs.copy()
        return dataclasses.replace(self, **changes)
