# bikeflow/traffic/time_filter.py
from __future__ import annotations

import numpy as np
import pandas as pd

from bikeflow.traffic.trip_log import as_trip_frame, trip_field
from bikeflow.traffic.types import MINUTES_PER_DAY, NO_FILTER

TIME_WINDOW_MINUTES = 60


def check_time_filter(value) -> int:
    """
    Validate a slider value: NO_FILTER (-1) or minutes since midnight (0..1439).
    """
    if isinstance(value, bool):
        raise ValueError(f"time filter must be an integer, got {value!r}")
    try:
        t = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"time filter must be an integer, got {value!r}") from None

    if t != value and not isinstance(value, str):
        raise ValueError(f"time filter must be an integer, got {value!r}")
    if t != NO_FILTER and not (0 <= t < MINUTES_PER_DAY):
        raise ValueError(
            f"time filter must be {NO_FILTER} or within 0..{MINUTES_PER_DAY - 1}, got {t}"
        )
    return t


def minutes_since_midnight(ts) -> int:
    """Wall-clock hour/minute of a timestamp as minutes since midnight."""
    return int(ts.hour) * 60 + int(ts.minute)


def minutes_of_day(ts: pd.Series) -> pd.Series:
    """Vectorized minutes_since_midnight over a datetime Series."""
    ts = pd.to_datetime(ts)
    return (ts.dt.hour * 60 + ts.dt.minute).astype(int)


def trip_window_mask(start_min, end_min, time_filter: int) -> np.ndarray:
    """
    True where a trip started or ended within TIME_WINDOW_MINUTES of time_filter.

    The distance does not wrap around midnight: 23:50 vs 00:10 is 1420 minutes.
    """
    start_min = np.asarray(start_min, dtype=int)
    end_min = np.asarray(end_min, dtype=int)
    return (np.abs(start_min - time_filter) <= TIME_WINDOW_MINUTES) | (
        np.abs(end_min - time_filter) <= TIME_WINDOW_MINUTES
    )


def filter_trips_by_time(trips, time_filter: int):
    """
    Trips that started or ended within an hour of time_filter.

    NO_FILTER returns `trips` itself. Otherwise a new DataFrame (or list, if a
    list of records was given) in the original order; the input is untouched.
    If the frame carries precomputed start_min / end_min columns they are used
    instead of re-deriving minutes from the timestamps.
    """
    time_filter = check_time_filter(time_filter)
    if time_filter == NO_FILTER:
        return trips

    if isinstance(trips, pd.DataFrame):
        df = as_trip_frame(trips)
        if "start_min" in df.columns and "end_min" in df.columns:
            start_min, end_min = df["start_min"], df["end_min"]
        else:
            start_min = minutes_of_day(df["started_at"])
            end_min = minutes_of_day(df["ended_at"])
        return df[trip_window_mask(start_min, end_min, time_filter)]

    records = list(trips)
    mask = trip_window_mask(
        [minutes_since_midnight(trip_field(t, "started_at")) for t in records],
        [minutes_since_midnight(trip_field(t, "ended_at")) for t in records],
        time_filter,
    )
    return [t for t, keep in zip(records, mask) if keep]


def format_time(minutes: int) -> str:
    """
    Slider label, e.g. 600 -> "10:00 AM", 0 -> "12:00 AM".
    """
    minutes = int(minutes) % MINUTES_PER_DAY
    hour, minute = divmod(minutes, 60)
    suffix = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {suffix}"
