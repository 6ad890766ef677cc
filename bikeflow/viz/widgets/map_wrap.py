# bikeflow/viz/widgets/map_wrap.py

# Widgets are positioned inside #map-wrap, a relative box around the leaflet
# container. Every widget script runs this first; the first one creates it.
ENSURE_MAP_WRAP_JS = """
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }
"""

MAP_WRAP_CSS = """
#map-wrap {
  position: relative;
  width: 100%;
}
#map-wrap .leaflet-container {
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}
"""


def on_map_ready(body: str) -> str:
    """<script> that runs `body` once the map is wrapped (`wrap` is in scope)."""
    return (
        "<script>\n"
        'document.addEventListener("DOMContentLoaded", () => {'
        f"{ENSURE_MAP_WRAP_JS}\n{body}\n"
        "});\n"
        "</script>\n"
    )
