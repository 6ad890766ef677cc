# main.py
import os
import sys

from colorama import Fore, Style

from bikeflow.traffic.controller import TrafficController
from bikeflow.util.datasets import (
    DEFAULT_STATIONS_URL,
    DEFAULT_TRIPS_URL,
    DatasetLoadError,
    load_datasets,
)
from bikeflow.viz.app.single import serve_traffic_map
from bikeflow.viz.maps.render import BOSTON_BIKE_LANES_URL

STATIONS = os.environ.get("STATIONS_URL", DEFAULT_STATIONS_URL)
TRIPS = os.environ.get("TRIPS_CSV", DEFAULT_TRIPS_URL)
BIKE_LANES = os.environ.get("BIKE_LANES_URL", BOSTON_BIKE_LANES_URL)


def main():
    try:
        stations, trips = load_datasets(STATIONS, TRIPS)
    except DatasetLoadError as e:
        print(f"{Fore.RED}Error loading data: {e}{Style.RESET_ALL}")
        sys.exit(1)

    controller = TrafficController(stations, trips)

    busiest = max(controller.view.stations, key=lambda s: s.total_traffic, default=None)
    if busiest is not None:
        print(
            f"{Fore.MAGENTA}Busiest station: {busiest.short_name} "
            f"({busiest.total_traffic} trips){Style.RESET_ALL}"
        )

    port = int(os.environ.get("PORT", "8080"))

    serve_traffic_map(
        controller,
        host=os.environ.get("HOST", "127.0.0.1"),
        port=port,
        title="Bluebikes Station Traffic",
        bike_lanes_url=BIKE_LANES or None,
    )


if __name__ == "__main__":
    main()
