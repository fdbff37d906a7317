"""JSON route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from app.schemas import SummaryResponse
from services.pipeline import RenderedPage

router = APIRouter()


def get_page(request: Request) -> RenderedPage:
    return request.app.state.page


@router.get(
    "/summary",
    response_model=SummaryResponse,
    summary="Stations per region and sensor-type distribution.",
)
async def get_summary(page: RenderedPage = Depends(get_page)) -> SummaryResponse:
    summary = page.summary
    if summary is None:
        return SummaryResponse(data_available=False)
    return SummaryResponse(
        data_available=True,
        record_count=summary.record_count,
        plotted_count=summary.plotted_count,
        stations_per_region=dict(summary.stations_per_region),
        sensor_type_distribution=dict(summary.sensor_type_distribution),
    )


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
