"""Station records as published by the open-data endpoint."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

SENSOR_FALLBACK_LABEL = "not specified"


def _field(*aliases: str) -> Any:
    return Field(default=None, validation_alias=AliasChoices(*aliases))


class StationRecord(BaseModel):
    """One sensor observation row.

    Every field is optional: the endpoint publishes loosely typed JSON and a
    record is never rejected for a missing or oddly typed value. Numbers and
    booleans are kept in their string form, nothing is interpreted here.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    station_id: Optional[str] = _field("codigoestacion", "stationId", "station_id")
    station_name: Optional[str] = _field("nombreestacion", "stationName", "station_name")
    municipality: Optional[str] = _field("municipio", "municipality")
    region: Optional[str] = _field("departamento", "region")
    latitude: Optional[str] = _field("latitud", "latitude")
    longitude: Optional[str] = _field("longitud", "longitude")
    sensor_description: Optional[str] = _field(
        "descripcionsensor", "sensorDescription", "sensor_description"
    )
    observed_value: Optional[str] = _field("valorobservado", "observedValue", "observed_value")
    unit: Optional[str] = _field("unidadmedida", "unit")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


def parse_records(payload: Iterable[Mapping[str, Any]]) -> Tuple[StationRecord, ...]:
    """Normalize decoded JSON objects into an immutable record tuple."""
    return tuple(StationRecord.model_validate(item) for item in payload)


def _parse_float(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def parse_coordinates(record: StationRecord) -> Optional[Tuple[float, float]]:
    latitude = _parse_float(record.latitude)
    longitude = _parse_float(record.longitude)
    if latitude is None or longitude is None:
        return None
    return latitude, longitude


def is_plottable(record: StationRecord) -> bool:
    return parse_coordinates(record) is not None


def normalize_category(label: Optional[str]) -> str:
    """Substitute the fallback label for a missing or empty sensor description."""
    return label or SENSOR_FALLBACK_LABEL
