# bikeflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NO_FILTER = -1
MINUTES_PER_DAY = 1440


@dataclass(frozen=True)
class Station:
    short_name: str
    lon: float
    lat: float
    name: str | None = None


@dataclass(frozen=True)
class Trip:
    start_station_id: str | None
    end_station_id: str | None
    started_at: datetime
    ended_at: datetime


@dataclass(frozen=True)
class StationTraffic:
    """
    Traffic counts for one station under one time filter.

    Rebuilt on every aggregation pass; the Station itself is never touched.
    """
    station: Station
    arrivals: int = 0
    departures: int = 0
    total_traffic: int = 0

    @property
    def short_name(self) -> str:
        return self.station.short_name

    @property
    def departure_ratio(self) -> float:
        if self.total_traffic == 0:
            return 0.0
        return self.departures / self.total_traffic
