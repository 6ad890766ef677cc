# bikeflow/traffic/aggregate.py
from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

from bikeflow.traffic.trip_log import as_trip_frame, station_key
from bikeflow.traffic.types import Station, StationTraffic


def _count_by_station(ids: pd.Series) -> Dict[str, int]:
    """
    Group trip endpoints by station id and count each group.
    Null ids belong to no group.
    """
    ids = ids.dropna().map(station_key).dropna()
    return {sid: int(n) for sid, n in ids.value_counts(sort=False).items()}


def compute_station_traffic(
    stations: Iterable[Station],
    trips,
) -> List[StationTraffic]:
    """
    Attach arrival / departure / total counts to each station.

    trips: DataFrame with start_station_id / end_station_id columns, or a
    list of Trip records.

    Returns one StationTraffic per station, same order as `stations`.
    Stations nobody rode to or from get zeros; trips pointing at unknown
    stations are simply never looked up.
    """
    df = as_trip_frame(trips)

    # groupby + count, rebuilt on every call
    departures = _count_by_station(df["start_station_id"])
    arrivals = _count_by_station(df["end_station_id"])

    out: List[StationTraffic] = []
    for s in stations:
        sid = str(s.short_name)
        a = arrivals.get(sid, 0)
        d = departures.get(sid, 0)
        out.append(
            StationTraffic(
                station=s,
                arrivals=a,
                departures=d,
                total_traffic=a + d,
            )
        )
    return out


def traffic_by_station(summaries: Iterable[StationTraffic]) -> Dict[str, StationTraffic]:
    return {t.short_name: t for t in summaries}
