# bikeflow/util/trips.py
from __future__ import annotations

import io
import urllib.request
from pathlib import Path

import pandas as pd

from bikeflow.traffic.trip_log import TRIP_COLUMNS
from bikeflow.util.stations import USER_AGENT, is_url


def _station_ids(col: pd.Series) -> list:
    return [None if pd.isna(v) else str(v) for v in col]


def load_trip_csv(source: str | Path, timeout: int = 30) -> pd.DataFrame:
    """
    Loads a Bluebikes trip log (path or URL) with at least:

      start_station_id, end_station_id, started_at, ended_at

    Returns a DataFrame with exactly those columns:
      - station ids as strings (missing ids stay null)
      - timestamps as datetime
    Rows whose timestamps do not parse are dropped.
    """
    if is_url(source):
        req = urllib.request.Request(str(source), headers={"User-Agent": USER_AGENT})
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            source = io.BytesIO(resp.read())

    df = pd.read_csv(
        source,
        dtype={"start_station_id": "string", "end_station_id": "string"},
    )

    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips CSV missing columns: {missing}")

    out = pd.DataFrame()
    out["start_station_id"] = _station_ids(df["start_station_id"])
    out["end_station_id"] = _station_ids(df["end_station_id"])
    out["started_at"] = pd.to_datetime(df["started_at"], errors="coerce", format="ISO8601")
    out["ended_at"] = pd.to_datetime(df["ended_at"], errors="coerce", format="ISO8601")

    # Drop malformed rows
    out = out.dropna(subset=["started_at", "ended_at"]).reset_index(drop=True)

    return out
