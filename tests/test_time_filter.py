"""
Unit tests for the time-of-day filter.
"""

from datetime import datetime

import pandas as pd
import pytest

from bikeflow.traffic.time_filter import (
    check_time_filter,
    filter_trips_by_time,
    format_time,
    minutes_of_day,
    minutes_since_midnight,
)
from bikeflow.traffic.trip_log import as_trip_frame
from bikeflow.traffic.types import NO_FILTER, Trip

from builders import at, trip


# ---------------------------------------------------------------------------
# minutes_since_midnight
# ---------------------------------------------------------------------------

def test_minutes_since_midnight_ignores_date_and_seconds():
    assert minutes_since_midnight(datetime(2024, 3, 1, 10, 5, 59)) == 605
    assert minutes_since_midnight(datetime(2023, 12, 31, 10, 5)) == 605
    assert minutes_since_midnight(datetime(2024, 3, 1, 0, 0)) == 0
    assert minutes_since_midnight(datetime(2024, 3, 1, 23, 59)) == 1439


def test_minutes_of_day_vectorized():
    s = pd.Series(pd.to_datetime(["2024-03-01 00:00:00", "2024-03-02 13:37:12"]))
    assert minutes_of_day(s).tolist() == [0, 817]


# ---------------------------------------------------------------------------
# check_time_filter
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value", [NO_FILTER, 0, 600, 1439, "600"])
def test_check_time_filter_accepts(value):
    assert check_time_filter(value) == int(value)


@pytest.mark.parametrize("value", [-2, 1440, 600.5, None, "noon", True, False])
def test_check_time_filter_rejects(value):
    with pytest.raises(ValueError):
        check_time_filter(value)


# ---------------------------------------------------------------------------
# filter_trips_by_time
# ---------------------------------------------------------------------------

def test_no_filter_returns_same_object(trips):
    assert filter_trips_by_time(trips, NO_FILTER) is trips

    df = as_trip_frame(trips)
    assert filter_trips_by_time(df, NO_FILTER) is df


def test_window_scenario():
    outside = trip("A", "B", 500, 700)
    inside = trip("A", "B", 550, 560)

    assert filter_trips_by_time([outside, inside], 600) == [inside]


def test_window_is_inclusive_at_sixty_minutes():
    edge_start = trip("A", "B", 540, 545)
    edge_end = trip("A", "B", 400, 660)
    just_out = trip("A", "B", 539, 539)

    kept = filter_trips_by_time([edge_start, edge_end, just_out], 600)

    assert kept == [edge_start, edge_end]


def test_window_does_not_wrap_midnight():
    late = trip("A", "B", 1430, 1435)

    assert filter_trips_by_time([late], 10) == []


def test_window_matches_definition(trips):
    m = 600
    kept = filter_trips_by_time(trips, m)

    def near(t):
        return (
            abs(minutes_since_midnight(t.started_at) - m) <= 60
            or abs(minutes_since_midnight(t.ended_at) - m) <= 60
        )

    assert kept == [t for t in trips if near(t)]
    assert all(not near(t) for t in trips if t not in kept)


def test_dataframe_filter_preserves_order_and_input(trips):
    df = as_trip_frame(trips)
    snapshot = df.copy()

    out = filter_trips_by_time(df, 600)

    assert out.index.tolist() == [1, 4]
    pd.testing.assert_frame_equal(df, snapshot)


def test_dataframe_filter_uses_precomputed_minutes(trips):
    df = as_trip_frame(trips)
    df["start_min"] = 0
    df["end_min"] = 0

    # every trip claims midnight, so a midnight filter keeps them all
    assert len(filter_trips_by_time(df, 0)) == len(trips)


def test_empty_trip_log():
    assert filter_trips_by_time([], 600) == []
    assert len(filter_trips_by_time(as_trip_frame([]), 600)) == 0


def test_cross_day_trip_uses_time_of_day_only():
    t = Trip("A", "B", started_at=at(1430, day=1), ended_at=at(20, day=2))

    assert filter_trips_by_time([t], 60) == [t]


# ---------------------------------------------------------------------------
# format_time
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "minutes,label",
    [(0, "12:00 AM"), (600, "10:00 AM"), (720, "12:00 PM"), (1439, "11:59 PM"), (65, "1:05 AM")],
)
def test_format_time(minutes, label):
    assert format_time(minutes) == label


# ---------------------------------------------------------------------------
# record kinds
# ---------------------------------------------------------------------------

def test_filter_accepts_dict_records():
    near = {
        "start_station_id": "A",
        "end_station_id": "B",
        "started_at": at(600),
        "ended_at": at(615),
    }
    far = dict(near, started_at=at(100), ended_at=at(110))

    assert filter_trips_by_time([near, far], 600) == [near]


def test_filter_rejects_unknown_records():
    with pytest.raises(ValueError):
        filter_trips_by_time([("A", "B", at(600), at(615))], 600)
