"""Aggregations behind the dashboard charts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from models.records import StationRecord, is_plottable, normalize_category

MISSING_REGION_LABEL = "(no region)"


def stations_per_region(records: Iterable[StationRecord]) -> Dict[str, int]:
    """Count distinct station ids per region, in first-seen region order.

    Region values are compared as raw strings; no casing or whitespace
    canonicalization. Records without a region share one group.
    """
    stations: Dict[str, Set[Optional[str]]] = {}
    for record in records:
        key = MISSING_REGION_LABEL if record.region is None else record.region
        stations.setdefault(key, set()).add(record.station_id)
    return {region: len(ids) for region, ids in stations.items()}


def sensor_type_distribution(records: Iterable[StationRecord]) -> Dict[str, int]:
    """Count every record per normalized sensor description."""
    counts: Dict[str, int] = {}
    for record in records:
        category = normalize_category(record.sensor_description)
        counts[category] = counts.get(category, 0) + 1
    return counts


@dataclass
class DashboardSummary:
    """Both dashboard aggregations plus record totals."""

    record_count: int = 0
    plotted_count: int = 0
    stations_per_region: Dict[str, int] = field(default_factory=dict)
    sensor_type_distribution: Dict[str, int] = field(default_factory=dict)


def summarize(records: Iterable[StationRecord]) -> DashboardSummary:
    snapshot = tuple(records)
    return DashboardSummary(
        record_count=len(snapshot),
        plotted_count=sum(1 for record in snapshot if is_plottable(record)),
        stations_per_region=stations_per_region(snapshot),
        sensor_type_distribution=sensor_type_distribution(snapshot),
    )
