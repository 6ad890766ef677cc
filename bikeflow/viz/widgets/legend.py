# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.viz.overlays.stations import (
    COLOR_ARRIVALS,
    COLOR_BALANCED,
    COLOR_DEPARTURES,
)
from bikeflow.viz.widgets.map_wrap import on_map_ready


def build_legend_widget():
    """
    Returns a Folium Element that injects a floating traffic-flow legend.
    """
    script = on_map_ready(
        f"""
  document.getElementById("map-legend")?.remove();

  const legend = document.createElement("div");
  legend.id = "map-legend";
  legend.innerHTML = `
    <div><strong>Traffic flow</strong></div>
    <div><span style="color:{COLOR_DEPARTURES}">●</span> more departures</div>
    <div><span style="color:{COLOR_BALANCED}">●</span> balanced</div>
    <div><span style="color:{COLOR_ARRIVALS}">●</span> more arrivals</div>
  `;
  wrap.appendChild(legend);
"""
    )

    return folium.Element(
        """
<style>
#map-legend {
  position: absolute;
  bottom: 24px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}
</style>
"""
        + script
    )
