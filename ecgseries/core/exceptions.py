# ecgseries/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidTimeSeries(CoreError, ValueError):
    """Raised when a TimeSeries is built or extended with invalid inputs."""


class InvalidAnnotation(CoreError, ValueError):
    """Raised when an Annotation is constructed with invalid inputs."""


class InvalidSettings(CoreError, ValueError):
    """Raised when FilterSettings are constructed with invalid inputs."""


# ---- Access errors (also behave like the matching builtin) ----
class IndexOutOfRange(CoreError, IndexError):
    """Raised when a sample index falls outside [0, n)."""


class EmptySeries(CoreError):
    """Raised when an operation needs at least one sample and the series has none."""


# ---- Filter collaborator errors ----
class DimensionMismatch(CoreError, ValueError):
    """Raised when a filter returns a buffer that does not match the one it was given."""
