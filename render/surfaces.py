"""Rendering targets for the map and the dashboard charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

import folium
import plotly.graph_objects as go

MAP_CONTAINER = "map"
REGION_CHART_CONTAINER = "regionChart"
SENSOR_CHART_CONTAINER = "sensorChart"

_BAR_FILL = "rgba(54, 162, 235, 0.6)"
_BAR_BORDER = "rgba(54, 162, 235, 1)"


class RenderSetupError(LookupError):
    """A rendering container the pipeline expects was not provided."""


@dataclass(frozen=True)
class ChartSpec:
    """Backend-neutral description of a single chart."""

    chart_type: str
    labels: Tuple[str, ...]
    values: Tuple[int, ...]
    dataset_label: str
    title: Optional[str] = None
    horizontal: bool = False
    begin_at_zero: bool = False
    legend_position: Optional[str] = None


class MapSurface(Protocol):
    def initialize(self, center: Tuple[float, float], zoom: int) -> None: ...

    def add_tile_layer(self, url: str, attribution: str) -> None: ...

    def add_marker(self, latitude: float, longitude: float, popup_html: str) -> None: ...


class ChartSurface(Protocol):
    def draw(self, spec: ChartSpec) -> None: ...


def require_surface(surfaces: Mapping[str, Any], container_id: str) -> Any:
    try:
        return surfaces[container_id]
    except KeyError as exc:
        raise RenderSetupError(f"Rendering container {container_id!r} is not available.") from exc


class FoliumMapSurface:
    """Leaflet map built with folium."""

    def __init__(self) -> None:
        self.map: Optional[folium.Map] = None
        self.marker_count = 0

    def initialize(self, center: Tuple[float, float], zoom: int) -> None:
        self.map = folium.Map(location=list(center), zoom_start=zoom, tiles=None)
        self.marker_count = 0

    def add_tile_layer(self, url: str, attribution: str) -> None:
        folium.TileLayer(tiles=url, attr=attribution, name="OpenStreetMap").add_to(self._require_map())

    def add_marker(self, latitude: float, longitude: float, popup_html: str) -> None:
        folium.Marker(
            location=[latitude, longitude],
            popup=folium.Popup(popup_html, max_width=300),
        ).add_to(self._require_map())
        self.marker_count += 1

    def to_html(self) -> str:
        return self._require_map()._repr_html_()

    def _require_map(self) -> folium.Map:
        if self.map is None:
            raise RenderSetupError("Map surface used before initialize().")
        return self.map


class PlotlyChartSurface:
    """Chart rendered into a plotly figure bound to one container id."""

    def __init__(self, container_id: str) -> None:
        self.container_id = container_id
        self.figure: Optional[go.Figure] = None

    def draw(self, spec: ChartSpec) -> None:
        if spec.chart_type == "bar":
            self.figure = self._bar(spec)
        elif spec.chart_type == "pie":
            self.figure = self._pie(spec)
        else:
            raise ValueError(f"Unsupported chart type {spec.chart_type!r}.")

    def to_html(self) -> str:
        if self.figure is None:
            raise RenderSetupError(f"Chart {self.container_id!r} has not been drawn.")
        return self.figure.to_html(
            full_html=False,
            include_plotlyjs="cdn",
            div_id=self.container_id,
        )

    @staticmethod
    def _bar(spec: ChartSpec) -> go.Figure:
        labels, values = list(spec.labels), list(spec.values)
        bar = go.Bar(
            x=values if spec.horizontal else labels,
            y=labels if spec.horizontal else values,
            orientation="h" if spec.horizontal else "v",
            name=spec.dataset_label,
            marker={"color": _BAR_FILL, "line": {"color": _BAR_BORDER, "width": 1}},
        )
        figure = go.Figure(data=[bar])
        figure.update_layout(title_text=spec.title or spec.dataset_label, showlegend=True)
        if spec.begin_at_zero:
            value_axis = figure.update_xaxes if spec.horizontal else figure.update_yaxes
            value_axis(rangemode="tozero")
        return figure

    @staticmethod
    def _pie(spec: ChartSpec) -> go.Figure:
        figure = go.Figure(
            data=[go.Pie(labels=list(spec.labels), values=list(spec.values), name=spec.dataset_label)]
        )
        figure.update_layout(title_text=spec.title, showlegend=True)
        if spec.legend_position == "top":
            figure.update_layout(legend={"orientation": "h", "yanchor": "bottom", "y": 1.02})
        return figure


def build_default_surfaces() -> Dict[str, Any]:
    return {
        MAP_CONTAINER: FoliumMapSurface(),
        REGION_CHART_CONTAINER: PlotlyChartSurface(REGION_CHART_CONTAINER),
        SENSOR_CHART_CONTAINER: PlotlyChartSurface(SENSOR_CHART_CONTAINER),
    }
