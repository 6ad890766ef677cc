# bikeflow/viz/overlays/stations.py
import folium

COLOR_DEPARTURES = "#4682b4"  # steelblue
COLOR_ARRIVALS = "#ff8c00"  # darkorange
COLOR_BALANCED = "#a2875a"

FLOW_COLORS = {
    0.0: COLOR_ARRIVALS,
    0.5: COLOR_BALANCED,
    1.0: COLOR_DEPARTURES,
}


def flow_color(bucket: float) -> str:
    return FLOW_COLORS.get(float(bucket), COLOR_BALANCED)


def traffic_tooltip(summary) -> str:
    return (
        f"{summary.total_traffic} trips "
        f"({summary.departures} departures, {summary.arrivals} arrivals)"
    )


def add_station_markers(m, view):
    """
    One circle per station:
      radius = view.radius_scale(total_traffic)
      color  = departure ratio bucket (orange = arrivals, blue = departures)
    """
    for s in view.stations:
        st = s.station
        popup = [
            f"<b>{st.name or st.short_name}</b>",
            f"Station: {st.short_name}",
            f"Time: {view.label}",
            traffic_tooltip(s),
        ]

        folium.CircleMarker(
            location=[st.lat, st.lon],
            radius=view.radius(s),
            fill=True,
            fill_color=flow_color(view.flow(s)),
            fill_opacity=0.6,
            color="white",
            weight=1,
            tooltip=traffic_tooltip(s),
            popup="<br>".join(popup),
        ).add_to(m)
