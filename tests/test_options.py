# tests/test_options.py
import logging

import pytest

from subadjust_core.errors import ConfigError
from subadjust_core.models import TimeRange, TimeValue
from subadjust_core.options import (
    SUBS_ARE_FAST_SCALE, SUBS_ARE_SLOW_SCALE, AdjustRequest, resolve_transform_options,
)


@pytest.mark.parametrize("request_", [
    AdjustRequest(from_time=TimeValue(1000)),
    AdjustRequest(to_time=TimeValue(1000)),
    AdjustRequest(from_time=TimeValue(1), to_time=TimeValue(2), offset=TimeValue(3)),
    AdjustRequest(scale=1.1, subs_are_fast=True),
    AdjustRequest(subs_are_fast=True, subs_are_slow=True),
    AdjustRequest(scale=0.0),
    AdjustRequest(scale=-1.0),
    AdjustRequest(scale=float("inf")),
    AdjustRequest(scale=float("nan")),
    AdjustRequest(scale_pivot=TimeValue(1000)),
    AdjustRequest(scale_pivot=TimeValue(1000), offset=TimeValue(1000)),
    AdjustRequest(),
    AdjustRequest(offset_start=TimeValue(1000)),
])
def test_rejected_combinations(request_):
    with pytest.raises(ConfigError):
        resolve_transform_options(request_)


def test_config_error_names_options():
    with pytest.raises(ConfigError) as exc:
        resolve_transform_options(AdjustRequest(scale=2.0, subs_are_slow=True))
    assert exc.value.options == ('--scale', '--subs-are-slow')


def test_frame_rate_guesses_are_reciprocal():
    fast = resolve_transform_options(AdjustRequest(subs_are_fast=True)).scale_factor
    slow = resolve_transform_options(AdjustRequest(subs_are_slow=True)).scale_factor
    assert fast == pytest.approx(23.976 / 25)
    assert fast == SUBS_ARE_FAST_SCALE
    assert slow == SUBS_ARE_SLOW_SCALE
    assert fast * slow == pytest.approx(1.0)


def test_pivot_with_frame_rate_guess():
    options = resolve_transform_options(AdjustRequest(subs_are_slow=True, scale_pivot=TimeValue(60000)))
    assert options.scale_pivot == TimeValue(60000)


def test_defaults():
    options = resolve_transform_options(AdjustRequest(offset=TimeValue(-2500)))
    assert options.offset_ms == -2500
    assert options.scale_factor == 1.0
    assert options.scale_pivot == TimeValue(0)
    assert options.offset_start is None
    assert not options.renumber


def test_offset_and_scale_together():
    options = resolve_transform_options(AdjustRequest(offset=TimeValue(1000), scale=1.5))
    assert (options.offset_ms, options.scale_factor) == (1000, 1.5)


def test_extract_only_is_a_noop_transform():
    assert resolve_transform_options(AdjustRequest(extract=True)).is_noop
    assert not resolve_transform_options(AdjustRequest(renumber=True)).is_noop


def test_overlapping_position_ranges_warn(caplog):
    request = AdjustRequest(to_top=[TimeRange.parse("10-20")], to_bottom=[TimeRange.parse("15-")])
    with caplog.at_level(logging.WARNING):
        options = resolve_transform_options(request)
    assert "overlaps" in caplog.text
    assert options.to_top == (TimeRange.parse("10-20"),)
