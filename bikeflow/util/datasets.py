# bikeflow/util/datasets.py
from __future__ import annotations

from colorama import Fore, Style

from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trip_csv

DEFAULT_STATIONS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"


class DatasetLoadError(RuntimeError):
    """Station list or trip log could not be fetched or parsed."""


def load_datasets(
    stations_source=DEFAULT_STATIONS_URL,
    trips_source=DEFAULT_TRIPS_URL,
    *,
    timeout: int = 30,
):
    """
    Load both datasets. Either failing is fatal: nothing partial is returned.

    Returns (stations, trips_df).
    """
    print(f"{Fore.CYAN}Loading stations from {stations_source}…{Style.RESET_ALL}")
    try:
        stations = load_stations(stations_source, timeout=timeout)
    except Exception as e:
        raise DatasetLoadError(f"failed to load stations from {stations_source}: {e}") from e

    print(f"{Fore.CYAN}Loading trips from {trips_source}…{Style.RESET_ALL}")
    try:
        trips = load_trip_csv(trips_source, timeout=timeout)
    except Exception as e:
        raise DatasetLoadError(f"failed to load trips from {trips_source}: {e}") from e

    print(
        f"{Fore.GREEN}Loaded {len(stations)} stations, {len(trips)} trips.{Style.RESET_ALL}"
    )
    return stations, trips
