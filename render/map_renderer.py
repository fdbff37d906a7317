"""Station markers on a Leaflet map."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from models.records import StationRecord, parse_coordinates
from render.surfaces import MAP_CONTAINER, MapSurface, require_surface

# Centre of Colombia.
MAP_CENTER = (4.7110, -74.0721)
MAP_ZOOM = 6
TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

logger = logging.getLogger(__name__)


def _text(value: str | None) -> str:
    return "" if value is None else value


def build_popup(record: StationRecord) -> str:
    # Values are inserted verbatim; the source is trusted open data.
    return (
        f"<b>{_text(record.station_name)}</b><br>"
        f"{_text(record.municipality)}, {_text(record.region)}<br>"
        "<hr>"
        f"<b>Sensor:</b> {_text(record.sensor_description)}<br>"
        f"<b>Value:</b> {_text(record.observed_value)} {_text(record.unit)}"
    )


class MapRenderer:
    def __init__(self, surfaces: Mapping[str, Any]) -> None:
        self.surfaces = surfaces

    def render(self, records: Sequence[StationRecord]) -> int:
        """Plot every record with valid coordinates; returns the marker count."""
        surface: MapSurface = require_surface(self.surfaces, MAP_CONTAINER)
        surface.initialize(MAP_CENTER, MAP_ZOOM)
        surface.add_tile_layer(TILE_URL, TILE_ATTRIBUTION)

        plotted = 0
        for record in records:
            coordinates = parse_coordinates(record)
            if coordinates is None:
                continue
            latitude, longitude = coordinates
            surface.add_marker(latitude, longitude, build_popup(record))
            plotted += 1

        skipped = len(records) - plotted
        if skipped:
            logger.debug("Skipped records without usable coordinates", extra={"skipped_count": skipped})
        logger.info("Rendered station map", extra={"marker_count": plotted, "container": MAP_CONTAINER})
        return plotted
