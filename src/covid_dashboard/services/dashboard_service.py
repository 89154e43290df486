"""Dashboard service.

Runs the aggregate -> smooth -> forecast chain for one selection and packs
the result into a `DashboardView`. The caller owns the selection state and
calls again whenever it changes; nothing is cached between calls.
"""
from __future__ import annotations

from typing import List
import logging

from covid_dashboard.data_models.dashboard_view import CaseDataset, DashboardView
from covid_dashboard.data_models.metric import (
    Metric,
    MOVING_AVERAGE_COLOR,
    MOVING_AVERAGE_LABEL,
    get_metric_display,
)
from covid_dashboard.data_models.series_point import SeriesPoint
from covid_dashboard.services.aggregation_service import (
    GLOBAL_REGION,
    aggregate_series,
    list_regions,
)
from covid_dashboard.services.forecast_service import (
    DEFAULT_FORECAST_PERIODS,
    generate_linear_forecast,
)
from covid_dashboard.services.smoothing_service import (
    DEFAULT_MOVING_AVERAGE_WINDOW,
    compute_moving_average,
)

logger = logging.getLogger(__name__)


REAL_DATA_NOTE = (
    "Using real COVID-19 data from the Kaggle dataset. Data shows actual reported "
    "cases, deaths, and recoveries from official sources."
)
SYNTHETIC_DATA_NOTE = (
    "Currently using simulated data. Place covid_19_clean_complete.csv in the "
    "data/ folder to use real data."
)


def available_regions(dataset: CaseDataset) -> List[str]:
    if dataset.is_synthetic:
        return [GLOBAL_REGION]
    return list_regions(dataset.records)


def base_series(dataset: CaseDataset, region: str = GLOBAL_REGION) -> List[SeriesPoint]:
    """Observed series for `region` before smoothing.

    The synthetic series has no regional breakdown, so it is returned as-is
    for every region.
    """
    if dataset.is_synthetic:
        return list(dataset.fallback_series or [])
    return aggregate_series(dataset.records, region)


def build_chart_title(metric_label: str, region: str, show_forecast: bool) -> str:
    title = f"{metric_label} Over Time - {region}"
    if show_forecast:
        title += " (with Forecast)"
    return title


def build_dashboard_view(
    dataset: CaseDataset,
    metric: Metric = Metric.CONFIRMED,
    region: str = GLOBAL_REGION,
    show_forecast: bool = False,
    window: int = DEFAULT_MOVING_AVERAGE_WINDOW,
    periods: int = DEFAULT_FORECAST_PERIODS,
) -> DashboardView:
    """Compute the chart data for one metric/region selection.

    The returned series is the smoothed observed series followed, when
    `show_forecast` is set, by the forecast points for the same metric.
    """
    metric = Metric(metric)
    display = get_metric_display(metric)

    observed = base_series(dataset, region)
    series = compute_moving_average(observed, metric, window=window)
    if show_forecast:
        series = series + generate_linear_forecast(observed, metric, periods=periods)

    logger.info(
        "Built %s view for %s: %d points (%d forecast)",
        metric.value,
        region,
        len(series),
        sum(1 for p in series if p.is_forecast),
    )

    return DashboardView(
        region=region,
        metric=metric,
        metric_label=display.label,
        metric_color=display.color,
        moving_average_label=MOVING_AVERAGE_LABEL,
        moving_average_color=MOVING_AVERAGE_COLOR,
        show_forecast=show_forecast,
        title=build_chart_title(display.label, region, show_forecast),
        regions=available_regions(dataset),
        series=series,
        record_count=len(dataset.records),
        is_synthetic=dataset.is_synthetic,
        data_source_note=SYNTHETIC_DATA_NOTE if dataset.is_synthetic else REAL_DATA_NOTE,
    )
