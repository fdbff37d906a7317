from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.render import render_summary
from logging_config import configure_logging
from render.page import render_page
from services.aggregator import summarize
from services.pipeline import StationPipeline, build_default_pipeline
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class CLIState:
    settings: Settings
    pipeline: StationPipeline


app = typer.Typer(
    help="Map and chart the public hydrometeorological station dataset.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(ctx: typer.Context) -> None:
    """Entry point for the CLI."""
    configure_logging()
    ctx.obj = CLIState(settings=get_settings(), pipeline=build_default_pipeline())


@app.command("render")
def render_command(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Where to write the HTML page (defaults to STATION_MAP_OUTPUT_PATH or ./tmp/stations.html).",
    ),
) -> None:
    """Fetch the dataset once and write the map and charts page."""
    state = _get_state(ctx)
    target = output if output is not None else state.settings.output_path
    page = asyncio.run(state.pipeline.run())

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_page(page), encoding="utf-8")
    logger.info("Wrote station page", extra={"output_path": target, "record_count": page.record_count})

    if page.has_data:
        typer.secho(
            f"Wrote {target} ({page.plotted_count} of {page.record_count} records plotted).",
            fg=typer.colors.GREEN,
        )
    else:
        typer.secho(f"No station data available; wrote empty page to {target}.", fg=typer.colors.YELLOW)


@app.command("summary")
def summary_command(ctx: typer.Context) -> None:
    """Fetch the dataset once and print both dashboard aggregations."""
    state = _get_state(ctx)
    records = asyncio.run(state.pipeline.load_records())
    if records is None:
        typer.secho("No station data available.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    render_summary(summarize(records))
