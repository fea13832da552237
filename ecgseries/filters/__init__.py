# ecgseries/filters/__init__.py
"""
Concrete SignalFilter backends.

The core layer only knows the SignalFilter protocol; backends here are
optional and pull in SciPy.
"""

from .scipy_filter import ScipySignalFilter


__all__ = ["ScipySignalFilter"]
