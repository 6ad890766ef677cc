# bikeflow/util/stations.py
import json
import urllib.request
from pathlib import Path

from bikeflow.traffic.types import Station

USER_AGENT = "bikeflow/1.0"


def is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


def _read_json(source, timeout: int = 30):
    if is_url(source):
        req = urllib.request.Request(
            str(source),
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return json.loads(resp.read().decode("utf-8", errors="replace"))

    with open(Path(source)) as f:
        return json.load(f)


def load_stations(source, timeout: int = 30):
    """
    Load Bluebikes stations from a station_information-style JSON document
    (file path or URL). Stations live under data.stations and are keyed by
    short_name, the id the trip log uses.
    """
    raw = _read_json(source, timeout=timeout)
    try:
        entries = raw["data"]["stations"]
    except (KeyError, TypeError):
        raise ValueError("station JSON has no data.stations list")

    stations = []
    seen = set()
    for s in entries:
        sid = str(s["short_name"])
        if sid in seen:
            raise ValueError(f"duplicate station short_name {sid!r}")
        seen.add(sid)

        stations.append(
            Station(
                short_name=sid,
                lon=float(s["lon"]),
                lat=float(s["lat"]),
                name=s.get("name"),
            )
        )

    return stations
