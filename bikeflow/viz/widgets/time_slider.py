# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.time_filter import format_time
from bikeflow.traffic.types import MINUTES_PER_DAY, NO_FILTER
from bikeflow.viz.widgets.map_wrap import on_map_ready


def build_time_slider(t_current: int, *, trip_count: int | None = None):
    """
    Time-of-day filter:
      - range input from -1 ("any time") to 1439 (11:59 PM)
      - dragging updates the label; releasing reloads the page with ?t=
    """
    label = format_time(t_current) if t_current != NO_FILTER else ""
    any_display = "block" if t_current == NO_FILTER else "none"
    count_html = (
        f'<div id="trip-count">{trip_count} trips</div>' if trip_count is not None else ""
    )

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 14px;
  border-radius: 10px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter input {{
  width: 260px;
}}
#selected-time {{
  font-weight: 600;
}}
#any-time {{
  color: #666;
  font-style: italic;
}}
#trip-count {{
  color: #666;
  font-size: 11px;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{NO_FILTER}" max="{MINUTES_PER_DAY - 1}"
           value="{t_current}">
  </label>
  <div>
    <time id="selected-time">{label}</time>
    <em id="any-time" style="display:{any_display}">(any time)</em>
  </div>
  {count_html}
</div>

<script>
function formatTime(minutes) {{
  const h = Math.floor(minutes / 60);
  const m = minutes % 60;
  const suffix = h < 12 ? "AM" : "PM";
  const h12 = (h % 12) || 12;
  return h12 + ":" + String(m).padStart(2, "0") + " " + suffix;
}}

function updateTimeDisplay() {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  const t = Number(slider.value);

  if (t === {NO_FILTER}) {{
    selected.textContent = "";
    anyTime.style.display = "block";
  }} else {{
    selected.textContent = formatTime(t);
    anyTime.style.display = "none";
  }}
}}

function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("t", String(t));
  window.location.href = url.toString();
}}
</script>
"""
        + on_map_ready(
            """
  const slider = document.getElementById("time-slider");
  if (!slider) return;
  slider.addEventListener("input", updateTimeDisplay);
  slider.addEventListener("change", () => setTime(Number(slider.value)));

  const panel = document.getElementById("time-filter");
  if (panel) wrap.appendChild(panel);
"""
        )
    )
