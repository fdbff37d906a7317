from __future__ import annotations

import pytest

from models.records import parse_records
from render.dashboard import (
    REGION_CHART_LABEL,
    SENSOR_CHART_TITLE,
    DashboardRenderer,
    build_region_chart,
    build_sensor_chart,
)
from render.surfaces import (
    REGION_CHART_CONTAINER,
    SENSOR_CHART_CONTAINER,
    ChartSpec,
    PlotlyChartSurface,
    RenderSetupError,
)


def test_scenario_charts(surfaces, scenario_payload) -> None:
    DashboardRenderer(surfaces).render(parse_records(scenario_payload))

    (region_spec,) = surfaces[REGION_CHART_CONTAINER].specs
    (sensor_spec,) = surfaces[SENSOR_CHART_CONTAINER].specs

    assert region_spec.chart_type == "bar"
    assert region_spec.horizontal is True
    assert region_spec.begin_at_zero is True
    assert region_spec.dataset_label == REGION_CHART_LABEL
    assert dict(zip(region_spec.labels, region_spec.values)) == {"A": 1, "B": 1}

    assert sensor_spec.chart_type == "pie"
    assert sensor_spec.title == SENSOR_CHART_TITLE
    assert sensor_spec.legend_position == "top"
    assert dict(zip(sensor_spec.labels, sensor_spec.values)) == {"rain": 2, "not specified": 1}


def test_rendering_twice_is_idempotent(surfaces, scenario_payload) -> None:
    records = parse_records(scenario_payload)
    renderer = DashboardRenderer(surfaces)

    renderer.render(records)
    renderer.render(records)

    first_region, second_region = surfaces[REGION_CHART_CONTAINER].specs
    first_sensor, second_sensor = surfaces[SENSOR_CHART_CONTAINER].specs
    assert first_region == second_region
    assert first_sensor == second_sensor


def test_rendering_leaves_records_untouched(surfaces, scenario_payload) -> None:
    records = parse_records(scenario_payload)
    snapshot = [record.model_dump() for record in records]

    DashboardRenderer(surfaces).render(records)

    assert [record.model_dump() for record in records] == snapshot


@pytest.mark.parametrize("missing", [REGION_CHART_CONTAINER, SENSOR_CHART_CONTAINER])
def test_missing_chart_container_fails_fast(surfaces, scenario_payload, missing) -> None:
    del surfaces[missing]

    with pytest.raises(RenderSetupError):
        DashboardRenderer(surfaces).render(parse_records(scenario_payload))


def test_plotly_bar_is_horizontal_from_zero(scenario_payload) -> None:
    surface = PlotlyChartSurface(REGION_CHART_CONTAINER)

    surface.draw(build_region_chart(parse_records(scenario_payload)))

    (trace,) = surface.figure.data
    assert trace.type == "bar"
    assert trace.orientation == "h"
    assert list(trace.y) == ["A", "B"]
    assert list(trace.x) == [1, 1]
    assert surface.figure.layout.xaxis.rangemode == "tozero"
    assert f'id="{REGION_CHART_CONTAINER}"' in surface.to_html()


def test_plotly_pie_has_legend_and_title(scenario_payload) -> None:
    surface = PlotlyChartSurface(SENSOR_CHART_CONTAINER)

    surface.draw(build_sensor_chart(parse_records(scenario_payload)))

    (trace,) = surface.figure.data
    assert trace.type == "pie"
    assert list(trace.labels) == ["rain", "not specified"]
    assert list(trace.values) == [2, 1]
    assert surface.figure.layout.showlegend is True
    assert surface.figure.layout.title.text == SENSOR_CHART_TITLE


def test_plotly_surface_rejects_unknown_chart_type() -> None:
    surface = PlotlyChartSurface("other")

    with pytest.raises(ValueError):
        surface.draw(ChartSpec(chart_type="radar", labels=(), values=(), dataset_label="x"))


def test_plotly_surface_requires_draw_before_export() -> None:
    with pytest.raises(RenderSetupError):
        PlotlyChartSurface(SENSOR_CHART_CONTAINER).to_html()
