from __future__ import annotations

from typing import Any, Iterable, Mapping

import typer

from services.aggregator import DashboardSummary


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def echo_counts(counts: Mapping[str, int]) -> None:
    if not counts:
        typer.echo("  (none)")
        return
    for label, count in counts.items():
        typer.echo(f"  - {label}: {count}")


def render_summary(summary: DashboardSummary) -> None:
    echo_heading("Station Dataset")
    echo_key_values(
        [
            ("record_count", summary.record_count),
            ("plotted_count", summary.plotted_count),
        ]
    )

    typer.echo()
    echo_heading("Stations per region")
    echo_counts(summary.stations_per_region)

    typer.echo()
    echo_heading("Sensor type distribution")
    echo_counts(summary.sensor_type_distribution)
