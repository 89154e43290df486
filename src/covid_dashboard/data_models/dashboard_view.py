"""Dataset and view models handed between the loader, the services and
whatever renders the chart.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from covid_dashboard.data_models.case_record import CaseRecord
from covid_dashboard.data_models.metric import Metric
from covid_dashboard.data_models.series_point import SeriesPoint


SYNTHETIC_SOURCE = "synthetic"


class CaseDataset(BaseModel):
    """Raw material for one dashboard session.

    Either `records` parsed from a CSV, or a ready-made `fallback_series`
    when the CSV could not be read.
    """

    records: List[CaseRecord] = Field(default_factory=list)
    fallback_series: Optional[List[SeriesPoint]] = None
    source: str = SYNTHETIC_SOURCE

    @property
    def is_synthetic(self) -> bool:
        return self.fallback_series is not None


class DashboardView(BaseModel):
    """Everything the presentation layer needs to draw one chart."""

    region: str
    metric: Metric
    metric_label: str
    metric_color: str
    moving_average_label: str
    moving_average_color: str

    show_forecast: bool
    title: str

    regions: List[str]
    series: List[SeriesPoint]

    record_count: int
    is_synthetic: bool
    data_source_note: str
