# test/test_windowing.py
import numpy as np

from ecgseries.core import Annotation, annotation_bounds, insertion_index
from ecgseries.core.windowing import half_open_mask


def _annos(*pairs):
    return [Annotation(c, loc) for c, loc in pairs]


def test_annotation_bounds_nearest_strict():
    annos = _annos((1, 1.0), (1, 3.0), (1, 5.0), (1, 7.0), (1, 9.0))
    assert annotation_bounds(annos, 5.0, 1, default_upper=10.0) == (3.0, 7.0)
    assert annotation_bounds(annos, 5.5, 1, default_upper=10.0) == (5.0, 7.0)


def test_annotation_bounds_defaults():
    annos = _annos((2, 3.0), (2, 7.0))
    assert annotation_bounds(annos, 5.0, 1, default_upper=10.0) == (0.0, 10.0)
    assert annotation_bounds(annos, 8.0, 2, default_upper=10.0) == (7.0, 10.0)
    assert annotation_bounds(annos, 1.0, 2, default_upper=10.0) == (0.0, 3.0)
    assert annotation_bounds([], 1.0, 2, default_upper=4.0, default_lower=-1.0) == (-1.0, 4.0)


def test_insertion_index_exact_and_between():
    times = np.array([0.0, 1.0, 2.0, 3.0])
    assert insertion_index(times, 2.0) == 2
    assert insertion_index(times, 1.5) == 2
    assert insertion_index(times, -5.0) == 0
    assert insertion_index(times, 99.0) == 4
    assert insertion_index(np.array([]), 1.0) == 0


def test_insertion_index_first_of_repeated_times():
    times = np.array([0.0, 1.0, 1.0, 1.0, 2.0])
    assert insertion_index(times, 1.0) == 1


def test_half_open_mask():
    times = np.array([0.0, 1.0, 2.0, 3.0])
    assert list(half_open_mask(times, 1.0, 3.0)) == [False, True, True, False]
