from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel

from covid_dashboard.data_models.series_point import SeriesPoint


class Metric(str, Enum):
    """Case count selectable for aggregation, smoothing and forecasting.

    Values match the field names on `SeriesPoint`.
    """

    CONFIRMED = "confirmed"
    DEATHS = "deaths"
    RECOVERED = "recovered"
    ACTIVE = "active"


class MetricDisplay(BaseModel):
    key: Metric
    label: str
    color: str


METRIC_DISPLAYS: Dict[Metric, MetricDisplay] = {
    Metric.CONFIRMED: MetricDisplay(key=Metric.CONFIRMED, label="Confirmed Cases", color="#ff7300"),
    Metric.DEATHS: MetricDisplay(key=Metric.DEATHS, label="Deaths", color="#ff4d4f"),
    Metric.RECOVERED: MetricDisplay(key=Metric.RECOVERED, label="Recovered", color="#52c41a"),
    Metric.ACTIVE: MetricDisplay(key=Metric.ACTIVE, label="Active Cases", color="#1890ff"),
}

MOVING_AVERAGE_LABEL = "Moving Average"
MOVING_AVERAGE_COLOR = "#666"


def get_metric_display(metric: Metric) -> MetricDisplay:
    """Return the label/color row for `metric`."""
    return METRIC_DISPLAYS[Metric(metric)]


def metric_value(point: SeriesPoint, metric: Metric) -> int:
    """Read the selected case count from a point, treating a missing value as 0."""
    value = getattr(point, Metric(metric).value)
    return int(value) if value is not None else 0
