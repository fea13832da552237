# test/test_settings.py
import pytest

from ecgseries.core import FilterSettings, InvalidSettings


def test_defaults_disable_every_step():
    s = FilterSettings()
    assert s.detrend_degree is None
    assert not s.smoothing
    assert s.high_pass_hz is None and s.low_pass_hz is None and s.band_hz is None
    assert s.attrs == {}


def test_attrs_normalizes_none_and_rejects_non_dict():
    assert FilterSettings(attrs=None).attrs == {}  # type: ignore[arg-type]
    with pytest.raises(InvalidSettings):
        FilterSettings(attrs=["not", "a", "dict"])  # type: ignore[arg-type]


def test_smoothing_fields_must_be_set_together():
    assert FilterSettings(smooth_left=2, smooth_right=2, smooth_degree=3).smoothing
    with pytest.raises(InvalidSettings):
        FilterSettings(smooth_left=2, smooth_degree=3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"detrend_degree": -1},
        {"smooth_left": -1, "smooth_right": 2, "smooth_degree": 1},
        {"high_pass_hz": 0.0},
        {"low_pass_hz": -40.0},
        {"band_hz": (40.0, 0.5)},
        {"band_hz": (-1.0, 40.0)},
        {"band_hz": (0.5,)},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(InvalidSettings):
        FilterSettings(**kwargs)


def test_band_is_normalized_to_float_tuple():
    s = FilterSettings(band_hz=[1, 40])  # type: ignore[arg-type]
    assert s.band_hz == (1.0, 40.0)


def test_from_mapping():
    s = FilterSettings.from_mapping(
        {"detrend_degree": 3, "band_hz": [0.5, 40.0], "attrs": {"lead": "II"}}
    )
    assert s.detrend_degree == 3
    assert s.band_hz == (0.5, 40.0)
    assert s.attrs == {"lead": "II"}

    with pytest.raises(InvalidSettings):
        FilterSettings.from_mapping({"detrend_degree": 3, "notch_hz": 50.0})
    with pytest.raises(InvalidSettings):
        FilterSettings.from_mapping([("detrend_degree", 3)])  # type: ignore[arg-type]


def test_with_overrides_copies_attrs():
    s = FilterSettings(low_pass_hz=40.0, attrs={"k": 1})
    s2 = s.with_overrides(low_pass_hz=30.0)

    assert s2.low_pass_hz == 30.0
    assert s.low_pass_hz == 40.0
    assert s2.attrs == {"k": 1}
    assert s2.attrs is not s.attrs

    with pytest.raises(InvalidSettings):
        s.with_overrides(high_pass_hz=-1.0)


def test_band_may_start_at_zero_like_the_band_filter():
    s = FilterSettings(band_hz=(0.0, 40.0))
    assert s.band_hz == (0.0, 40.0)
