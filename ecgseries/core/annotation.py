# ecgseries/core/annotation.py
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .exceptions import InvalidAnnotation


@dataclass(frozen=True, slots=True, eq=False)
class Annotation:
    """
    A point event marker on a channel.

    - category: integer code of the event kind (R peak, P wave onset, ...)
    - location: time of the event, in the same unit as the sample times

    Two annotations are equal iff both fields match, and the hash is taken
    over the same pair, so a set of annotations is unique by
    (category, location).
    """
    category: int
    location: float

    def __post_init__(self) -> None:
        if isinstance(self.category, bool) or not isinstance(self.category, numbers.Integral):
            raise InvalidAnnotation(
                f"Annotation.category must be an integer, got {self.category!r}."
            )
        try:
            location = float(self.location)
        except (TypeError, ValueError) as e:
            raise InvalidAnnotation(
                f"Annotation.location must be a number, got {self.location!r}."
            ) from e
        if not math.isfinite(location):
            raise InvalidAnnotation("Annotation.location must be finite (no NaN/Inf).")

        object.__setattr__(self, "category", int(self.category))
        object.__setattr__(self, "location", location)

    @property
    def key(self) -> tuple[int, float]:
        return self.category, self.location

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
