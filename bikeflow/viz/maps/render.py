# bikeflow/viz/maps/render.py
import json

import folium

from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.map_wrap import MAP_WRAP_CSS, on_map_ready
from bikeflow.viz.widgets.time_slider import build_time_slider

CENTER_LAT = 42.36027
CENTER_LON = -71.09415

BOSTON_BIKE_LANES_URL = (
    "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
    "boston::existing-bike-network-2022.geojson"
)

TITLE_CSS = """
#map-title {
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}
"""


def add_bike_lanes(m, url: str):
    folium.GeoJson(
        url,
        name="bike-lanes",
        embed=False,
        style_function=lambda _f: {
            "color": "green",
            "weight": 3,
            "opacity": 0.4,
        },
    ).add_to(m)


def render_map_document(view, *, title: str | None = None, bike_lanes_url: str | None = None):
    """
    Single place that assembles the full Folium map HTML document for a TrafficView.
    """
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    if bike_lanes_url:
        add_bike_lanes(m, bike_lanes_url)

    # stations
    add_station_markers(m, view)

    # widgets
    m.get_root().html.add_child(build_legend_widget())
    m.get_root().html.add_child(
        build_time_slider(view.time_filter, trip_count=view.trip_count)
    )

    # title + wrap so widgets sit on-map
    title_js = 'document.getElementById("map-title")?.remove();'
    if title:
        title_js += f"""
  const t = document.createElement("div");
  t.id = "map-title";
  t.textContent = {json.dumps(title)};
  wrap.appendChild(t);"""

    m.get_root().html.add_child(
        folium.Element(
            f"<style>{MAP_WRAP_CSS}{TITLE_CSS}</style>\n" + on_map_ready(title_js)
        )
    )

    return m.get_root().render()
