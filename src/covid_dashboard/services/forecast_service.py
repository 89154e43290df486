"""Straight-line forecast of a case series.

The trend is the two-endpoint slope over the trailing observations, not a
least-squares fit. Projections are clamped at zero and stepped weekly.
"""
from __future__ import annotations

from datetime import timedelta
from typing import List
import logging
import math

from covid_dashboard.data_models.metric import Metric, metric_value
from covid_dashboard.data_models.series_point import SeriesPoint

logger = logging.getLogger(__name__)


DEFAULT_FORECAST_PERIODS = 10
FORECAST_HISTORY_POINTS = 10
FORECAST_STEP_DAYS = 7


def compute_trend(series: List[SeriesPoint], metric: Metric) -> float:
    """Per-period rate of change across the trailing history window."""
    history = series[-FORECAST_HISTORY_POINTS:]
    first = metric_value(history[0], metric)
    last = metric_value(history[-1], metric)
    return (last - first) / (FORECAST_HISTORY_POINTS - 1)


def generate_linear_forecast(
    series: List[SeriesPoint],
    metric: Metric,
    periods: int = DEFAULT_FORECAST_PERIODS,
) -> List[SeriesPoint]:
    """Extrapolate `metric` for `periods` weekly steps past the end of `series`.

    Returns an empty list when fewer than FORECAST_HISTORY_POINTS observations
    exist. Forecast points only carry the selected metric.
    """
    if periods < 0:
        raise ValueError(f"Forecast periods must be >= 0, got {periods}")

    if len(series) < FORECAST_HISTORY_POINTS:
        logger.debug(
            "Not enough history to forecast (%d < %d points)", len(series), FORECAST_HISTORY_POINTS
        )
        return []

    metric = Metric(metric)
    trend = compute_trend(series, metric)
    last_point = series[-1]
    last_value = metric_value(last_point, metric)

    forecast: List[SeriesPoint] = []
    for k in range(1, periods + 1):
        predicted = max(0, math.floor(last_value + trend * k))
        forecast.append(
            SeriesPoint(
                date=last_point.date + timedelta(days=FORECAST_STEP_DAYS * k),
                period_label=f"Forecast {k}",
                is_forecast=True,
                **{metric.value: predicted},
            )
        )

    return forecast
