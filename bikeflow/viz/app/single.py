# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bikeflow.traffic.time_filter import check_time_filter
from bikeflow.traffic.types import NO_FILTER
from bikeflow.viz.maps.render import render_map_document


def _resolve_time_filter() -> int:
    """?t= as a time filter; anything missing or invalid means "any time"."""
    t_raw = request.args.get("t", None)
    if t_raw is None:
        return NO_FILTER
    try:
        return check_time_filter(int(float(t_raw)))
    except (ValueError, OverflowError):
        return NO_FILTER


def _view_payload(view) -> dict:
    return {
        "time_filter": view.time_filter,
        "label": view.label,
        "trip_count": view.trip_count,
        "radius_domain": list(view.radius_scale.domain),
        "radius_range": list(view.radius_scale.range),
        "stations": [
            {
                "short_name": s.short_name,
                "name": s.station.name,
                "lon": s.station.lon,
                "lat": s.station.lat,
                "arrivals": s.arrivals,
                "departures": s.departures,
                "total_traffic": s.total_traffic,
                "departure_ratio": s.departure_ratio,
                "flow": view.flow(s),
                "radius": view.radius(s),
            }
            for s in view.stations
        ],
    }


def create_app(controller, *, title: str | None = None, bike_lanes_url: str | None = None):
    """
    Routes:
      /         map page for ?t=<minutes since midnight | -1>
      /traffic  the same view as JSON
    """
    app = Flask(__name__)

    @app.route("/")
    def _index():
        view = controller.set_time_filter(_resolve_time_filter())
        return render_map_document(view, title=title, bike_lanes_url=bike_lanes_url)

    @app.route("/traffic")
    def _traffic():
        view = controller.set_time_filter(_resolve_time_filter())
        return jsonify(_view_payload(view))

    return app


def serve_traffic_map(
    controller,
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bluebikes Station Traffic",
    bike_lanes_url: str | None = None,
):
    if controller is None:
        raise ValueError("serve_traffic_map requires a TrafficController")

    app = create_app(controller, title=title, bike_lanes_url=bike_lanes_url)
    app.run(host=host, port=int(port), debug=bool(debug))
