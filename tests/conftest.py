from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from render.surfaces import (
    MAP_CONTAINER,
    REGION_CHART_CONTAINER,
    SENSOR_CHART_CONTAINER,
    ChartSpec,
)
from settings import get_settings

SCENARIO_PAYLOAD: List[Dict[str, Any]] = [
    {"stationId": "S1", "region": "A", "sensorDescription": "rain", "latitude": "4.1", "longitude": "-74.0"},
    {"stationId": "S1", "region": "A", "sensorDescription": "rain", "latitude": "4.1", "longitude": "-74.0"},
    {"stationId": "S2", "region": "B", "sensorDescription": "", "latitude": "bad", "longitude": "-75.0"},
]


class RecordingMapSurface:
    def __init__(self) -> None:
        self.center: Tuple[float, float] | None = None
        self.zoom: int | None = None
        self.tile_layers: List[Tuple[str, str]] = []
        self.markers: List[Tuple[float, float, str]] = []

    def initialize(self, center: Tuple[float, float], zoom: int) -> None:
        self.center = center
        self.zoom = zoom

    def add_tile_layer(self, url: str, attribution: str) -> None:
        self.tile_layers.append((url, attribution))

    def add_marker(self, latitude: float, longitude: float, popup_html: str) -> None:
        self.markers.append((latitude, longitude, popup_html))

    def to_html(self) -> str:
        return f"<div id='map'>{len(self.markers)} markers</div>"


class RecordingChartSurface:
    def __init__(self, container_id: str) -> None:
        self.container_id = container_id
        self.specs: List[ChartSpec] = []

    def draw(self, spec: ChartSpec) -> None:
        self.specs.append(spec)

    def to_html(self) -> str:
        return f"<div id='{self.container_id}'></div>"


def build_recording_surfaces() -> Dict[str, Any]:
    return {
        MAP_CONTAINER: RecordingMapSurface(),
        REGION_CHART_CONTAINER: RecordingChartSurface(REGION_CHART_CONTAINER),
        SENSOR_CHART_CONTAINER: RecordingChartSurface(SENSOR_CHART_CONTAINER),
    }


@pytest.fixture()
def scenario_payload() -> List[Dict[str, Any]]:
    return copy.deepcopy(SCENARIO_PAYLOAD)


@pytest.fixture()
def surfaces() -> Dict[str, Any]:
    return build_recording_surfaces()


@pytest.fixture()
def json_transport() -> Callable[..., httpx.MockTransport]:
    def factory(payload: Any = None, status_code: int = 200, text: str | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def recording_surface_factory() -> Callable[[], Dict[str, Any]]:
    return build_recording_surfaces
