# bikeflow/traffic/trip_log.py
from __future__ import annotations

import pandas as pd

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]
STATION_ID_COLUMNS = ("start_station_id", "end_station_id")


def trip_field(t, key, default=None):
    """Support Trip dataclass OR dict."""
    if isinstance(t, dict):
        return t.get(key, default)
    if not hasattr(t, key):
        raise ValueError(f"unsupported trip record: {t!r}")
    return getattr(t, key)


def station_key(value) -> str | None:
    """
    Canonical string id for a trip endpoint; None when missing.

    Integral floats (3.0, from a numeric column that also holds nulls) become "3".
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_trip_frame(trips) -> pd.DataFrame:
    """
    Normalize a trip log into a DataFrame with TRIP_COLUMNS.

    Accepts a DataFrame (returned as-is) or an iterable of Trip records / dicts.
    Station ids are stringified per record, before pandas infers a dtype.
    Timestamps are always datetime64 so the .dt accessor works, even when empty.
    """
    if isinstance(trips, pd.DataFrame):
        missing = [c for c in TRIP_COLUMNS if c not in trips.columns]
        if missing:
            raise ValueError(f"trip log missing columns: {missing}")
        return trips

    rows = [_trip_row(t) for t in trips]
    df = pd.DataFrame(rows, columns=TRIP_COLUMNS, dtype=object)
    df["started_at"] = pd.to_datetime(df["started_at"])
    df["ended_at"] = pd.to_datetime(df["ended_at"])
    return df


def _trip_row(t) -> dict:
    row = {c: trip_field(t, c) for c in TRIP_COLUMNS}
    for c in STATION_ID_COLUMNS:
        row[c] = station_key(row[c])
    return row
