"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class SummaryResponse(BaseModel):
    """Dashboard aggregations computed at startup."""

    data_available: bool = Field(..., description="False when the startup fetch failed.")
    record_count: int = Field(0, ge=0)
    plotted_count: int = Field(0, ge=0, description="Records with usable coordinates.")
    stations_per_region: Dict[str, int] = Field(
        default_factory=dict, description="Distinct station ids per region."
    )
    sensor_type_distribution: Dict[str, int] = Field(
        default_factory=dict, description="Record count per sensor description."
    )
