"""Summary charts for the station dataset."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from models.records import StationRecord
from render.surfaces import (
    REGION_CHART_CONTAINER,
    SENSOR_CHART_CONTAINER,
    ChartSpec,
    ChartSurface,
    require_surface,
)
from services.aggregator import sensor_type_distribution, stations_per_region

REGION_CHART_LABEL = "Stations per region"
SENSOR_CHART_TITLE = "Sensor type distribution"

logger = logging.getLogger(__name__)


def build_region_chart(records: Sequence[StationRecord]) -> ChartSpec:
    counts = stations_per_region(records)
    return ChartSpec(
        chart_type="bar",
        labels=tuple(counts),
        values=tuple(counts.values()),
        dataset_label=REGION_CHART_LABEL,
        title=REGION_CHART_LABEL,
        horizontal=True,
        begin_at_zero=True,
    )


def build_sensor_chart(records: Sequence[StationRecord]) -> ChartSpec:
    counts = sensor_type_distribution(records)
    return ChartSpec(
        chart_type="pie",
        labels=tuple(counts),
        values=tuple(counts.values()),
        dataset_label=SENSOR_CHART_TITLE,
        title=SENSOR_CHART_TITLE,
        legend_position="top",
    )


class DashboardRenderer:
    def __init__(self, surfaces: Mapping[str, Any]) -> None:
        self.surfaces = surfaces

    def render(self, records: Sequence[StationRecord]) -> None:
        for container_id, build in (
            (REGION_CHART_CONTAINER, build_region_chart),
            (SENSOR_CHART_CONTAINER, build_sensor_chart),
        ):
            surface: ChartSurface = require_surface(self.surfaces, container_id)
            surface.draw(build(records))
            logger.info("Rendered chart", extra={"container": container_id})
