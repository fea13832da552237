# ecgseries/core/sample.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Sample:
    """One (time, value) observation of a channel."""

    time: float
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", float(self.time))
        object.__setattr__(self, "value", float(self.value))

    def as_tuple(self) -> tuple[float, float]:
        return self.time, self.value
