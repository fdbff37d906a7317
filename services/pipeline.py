"""Fetch-then-render orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Tuple

from models.records import StationRecord, parse_records
from render.dashboard import DashboardRenderer
from render.map_renderer import MapRenderer
from render.surfaces import (
    MAP_CONTAINER,
    REGION_CHART_CONTAINER,
    SENSOR_CHART_CONTAINER,
    build_default_surfaces,
)
from services.aggregator import DashboardSummary, summarize
from services.fetcher import FetchError, StationFetcher

logger = logging.getLogger(__name__)

SurfaceFactory = Callable[[], Dict[str, Any]]


@dataclass(frozen=True)
class RenderedPage:
    """HTML fragments for the three page containers.

    All fragments are ``None`` when the fetch produced no data.
    """

    record_count: int = 0
    plotted_count: int = 0
    map_html: Optional[str] = None
    region_chart_html: Optional[str] = None
    sensor_chart_html: Optional[str] = None
    summary: Optional[DashboardSummary] = None

    @property
    def has_data(self) -> bool:
        return self.summary is not None


class StationPipeline:
    def __init__(
        self,
        fetcher: StationFetcher,
        surface_factory: SurfaceFactory = build_default_surfaces,
    ) -> None:
        self.fetcher = fetcher
        self.surface_factory = surface_factory

    async def load_records(self) -> Optional[Tuple[StationRecord, ...]]:
        """Fetch and normalize records; ``None`` means no data is available."""
        try:
            payload = await self.fetcher.fetch_records()
        except FetchError as exc:
            logger.warning(
                "No station data available, skipping rendering",
                extra={"reason": type(exc).__name__},
            )
            return None
        return parse_records(payload)

    def render(self, records: Tuple[StationRecord, ...], surfaces: Dict[str, Any]) -> int:
        plotted = MapRenderer(surfaces).render(records)
        DashboardRenderer(surfaces).render(records)
        return plotted

    async def run(self) -> RenderedPage:
        records = await self.load_records()
        if records is None:
            return RenderedPage()

        surfaces = self.surface_factory()
        plotted = self.render(records, surfaces)
        return RenderedPage(
            record_count=len(records),
            plotted_count=plotted,
            map_html=surfaces[MAP_CONTAINER].to_html(),
            region_chart_html=surfaces[REGION_CHART_CONTAINER].to_html(),
            sensor_chart_html=surfaces[SENSOR_CHART_CONTAINER].to_html(),
            summary=summarize(records),
        )


@lru_cache
def build_default_pipeline() -> StationPipeline:
    """Factory that wires the pipeline to the live endpoint and default surfaces."""
    return StationPipeline(fetcher=StationFetcher())
