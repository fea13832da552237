# test/test_exceptions.py
import pytest

from ecgseries.core import (
    CoreError,
    InvalidTimeSeries,
    InvalidAnnotation,
    InvalidSettings,
    IndexOutOfRange,
    EmptySeries,
    DimensionMismatch,
)


def test_exception_inheritance_validation():
    assert issubclass(InvalidTimeSeries, CoreError)
    assert issubclass(InvalidAnnotation, CoreError)
    assert issubclass(InvalidSettings, CoreError)
    assert issubclass(InvalidTimeSeries, ValueError)
    assert issubclass(InvalidAnnotation, ValueError)
    assert issubclass(InvalidSettings, ValueError)


def test_exception_inheritance_access_and_filters():
    assert issubclass(IndexOutOfRange, CoreError)
    assert issubclass(IndexOutOfRange, IndexError)
    assert issubclass(EmptySeries, CoreError)
    assert issubclass(DimensionMismatch, CoreError)
    assert issubclass(DimensionMismatch, ValueError)


def test_index_error_can_be_caught_as_builtin():
    with pytest.raises(IndexError):
        raise IndexOutOfRange("sample index 5 out of range")
