# bikeflow/traffic/controller.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

import pandas as pd

from bikeflow.traffic.aggregate import compute_station_traffic, traffic_by_station
from bikeflow.traffic.scales import QuantizeScale, SqrtScale, flow_scale, radius_scale_for
from bikeflow.traffic.time_filter import (
    check_time_filter,
    filter_trips_by_time,
    format_time,
    minutes_of_day,
)
from bikeflow.traffic.trip_log import as_trip_frame
from bikeflow.traffic.types import NO_FILTER, Station, StationTraffic


class FilterState(Enum):
    UNFILTERED = "unfiltered"
    FILTERED = "filtered"


@dataclass(frozen=True)
class TrafficView:
    """
    Everything the map needs for one filter value:
      - stations: per-station summaries (same order as the station list)
      - radius_scale: total_traffic -> marker radius
      - flow_scale: departure ratio -> 0 / 0.5 / 1
    """
    time_filter: int
    stations: List[StationTraffic]
    radius_scale: SqrtScale
    flow_scale: QuantizeScale
    trip_count: int

    @property
    def is_filtered(self) -> bool:
        return self.time_filter != NO_FILTER

    @property
    def label(self) -> str:
        return format_time(self.time_filter) if self.is_filtered else "(any time)"

    @property
    def by_station(self) -> Dict[str, StationTraffic]:
        return traffic_by_station(self.stations)

    def radius(self, summary: StationTraffic) -> float:
        return self.radius_scale(summary.total_traffic)

    def flow(self, summary: StationTraffic) -> float:
        return self.flow_scale(summary.departure_ratio)


class TrafficController:
    """
    Owns the station list and the full trip log; recomputes station traffic
    for a time-of-day filter.

    Every recompute starts from the full trip log and the original stations,
    so nothing carries over between filter changes.
    """

    def __init__(self, stations: Sequence[Station], trips):
        ids = [s.short_name for s in stations]
        if len(set(ids)) != len(ids):
            raise ValueError("station short_name values must be unique")

        self._stations: Tuple[Station, ...] = tuple(stations)

        df = as_trip_frame(trips).copy()
        df["start_min"] = minutes_of_day(df["started_at"])
        df["end_min"] = minutes_of_day(df["ended_at"])
        self._trips: pd.DataFrame = df

        self._lock = threading.Lock()
        self._view = self._recompute(NO_FILTER)

    @property
    def stations(self) -> Tuple[Station, ...]:
        return self._stations

    @property
    def view(self) -> TrafficView:
        return self._view

    @property
    def time_filter(self) -> int:
        return self._view.time_filter

    @property
    def state(self) -> FilterState:
        if self._view.time_filter == NO_FILTER:
            return FilterState.UNFILTERED
        return FilterState.FILTERED

    def set_time_filter(self, value) -> TrafficView:
        t = check_time_filter(value)
        with self._lock:
            self._view = self._recompute(t)
            return self._view

    def reset(self) -> TrafficView:
        return self.set_time_filter(NO_FILTER)

    def _recompute(self, time_filter: int) -> TrafficView:
        filtered = filter_trips_by_time(self._trips, time_filter)
        summaries = compute_station_traffic(self._stations, filtered)
        return TrafficView(
            time_filter=time_filter,
            stations=summaries,
            radius_scale=radius_scale_for(summaries, time_filter),
            flow_scale=flow_scale(),
            trip_count=len(filtered),
        )

    def station_positions(
        self,
        project: Callable[[float, float], Tuple[float, float]],
    ) -> Dict[str, Tuple[float, float]]:
        """
        Screen position per station via the map's projection(lon, lat) -> (x, y).
        Traffic is not recomputed.
        """
        return {s.short_name: tuple(project(s.lon, s.lat)) for s in self._stations}
