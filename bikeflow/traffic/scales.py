# bikeflow/traffic/scales.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from bikeflow.traffic.types import NO_FILTER, StationTraffic

RADIUS_RANGE_UNFILTERED = (0.0, 25.0)
RADIUS_RANGE_FILTERED = (3.0, 50.0)

FLOW_DOMAIN = (0.0, 1.0)
FLOW_BUCKETS = (0.0, 0.5, 1.0)


@dataclass(frozen=True)
class SqrtScale:
    """
    Square-root scale: marker area (not radius) grows with traffic.

    Inputs are clamped to the domain. A zero-width domain, e.g. [0, 0] when a
    time window matched no trips, maps everything to the start of the range.
    """
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = (math.sqrt(max(0.0, float(x))) for x in self.domain)
        r0, r1 = self.range
        if d1 == d0:
            return float(r0)

        v = math.sqrt(max(0.0, float(value)))
        t = (v - d0) / (d1 - d0)
        t = max(0.0, min(1.0, t))
        return float(r0 + t * (r1 - r0))


@dataclass(frozen=True)
class QuantizeScale:
    """
    Split the domain into len(range) equal-width buckets; clamp outside values.
    """
    domain: Tuple[float, float] = FLOW_DOMAIN
    range: Sequence[float] = FLOW_BUCKETS

    def __call__(self, value: float) -> float:
        lo, hi = self.domain
        n = len(self.range)
        x = float(value)
        if math.isnan(x):
            x = lo
        if hi == lo:
            return self.range[0]

        i = int(math.floor((x - lo) / (hi - lo) * n))
        i = max(0, min(n - 1, i))
        return self.range[i]


def max_traffic(summaries: Iterable[StationTraffic]) -> int:
    return max((s.total_traffic for s in summaries), default=0)


def radius_scale_for(summaries: Iterable[StationTraffic], time_filter: int) -> SqrtScale:
    """
    Domain [0, busiest station]; filtered views get a larger range so the
    (smaller) windowed counts stay readable.
    """
    rng = RADIUS_RANGE_UNFILTERED if time_filter == NO_FILTER else RADIUS_RANGE_FILTERED
    return SqrtScale(domain=(0.0, float(max_traffic(summaries))), range=rng)


def flow_scale() -> QuantizeScale:
    return QuantizeScale(domain=FLOW_DOMAIN, range=FLOW_BUCKETS)
