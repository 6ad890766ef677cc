"""
Unit tests for radius / flow scales.
"""

import math

import pytest

from bikeflow.traffic.scales import (
    QuantizeScale,
    SqrtScale,
    flow_scale,
    radius_scale_for,
)
from bikeflow.traffic.types import NO_FILTER, Station, StationTraffic


def _summary(arrivals, departures):
    return StationTraffic(
        station=Station(short_name=f"S{arrivals}-{departures}", lon=0.0, lat=0.0),
        arrivals=arrivals,
        departures=departures,
        total_traffic=arrivals + departures,
    )


def test_sqrt_scale_endpoints_and_area():
    s = SqrtScale(domain=(0.0, 100.0), range=(0.0, 25.0))

    assert s(0) == 0.0
    assert s(100) == 25.0
    assert math.isclose(s(25), 12.5)


def test_sqrt_scale_clamps():
    s = SqrtScale(domain=(0.0, 100.0), range=(3.0, 50.0))

    assert s(400) == 50.0
    assert s(-5) == 3.0


def test_sqrt_scale_zero_width_domain():
    s = SqrtScale(domain=(0.0, 0.0), range=(3.0, 50.0))

    assert s(0) == 3.0
    assert s(10) == 3.0


@pytest.mark.parametrize(
    "ratio,bucket",
    [(0.0, 0.0), (0.2, 0.0), (0.34, 0.5), (0.5, 0.5), (0.66, 0.5), (0.7, 1.0), (1.0, 1.0)],
)
def test_flow_buckets(ratio, bucket):
    assert flow_scale()(ratio) == bucket


def test_quantize_clamps_and_handles_nan():
    q = QuantizeScale()

    assert q(-1) == 0.0
    assert q(2) == 1.0
    assert q(float("nan")) == 0.0


def test_radius_scale_ranges_depend_on_filter():
    summaries = [_summary(2, 3), _summary(10, 10)]

    unfiltered = radius_scale_for(summaries, NO_FILTER)
    filtered = radius_scale_for(summaries, 600)

    assert unfiltered.domain == (0.0, 20.0)
    assert unfiltered.range == (0.0, 25.0)
    assert filtered.range == (3.0, 50.0)


def test_radius_scale_all_zero_traffic():
    scale = radius_scale_for([_summary(0, 0), _summary(0, 0)], 600)

    assert scale.domain == (0.0, 0.0)
    assert scale(0) == 3.0


def test_zero_traffic_ratio_is_zero_not_nan():
    s = _summary(0, 0)

    assert s.departure_ratio == 0.0
    assert flow_scale()(s.departure_ratio) == 0.0
