from datetime import date

from covid_dashboard.data_models.metric import (
    METRIC_DISPLAYS,
    Metric,
    get_metric_display,
    metric_value,
)
from covid_dashboard.data_models.series_point import SeriesPoint


def test_metric_table_covers_every_metric():
    assert set(METRIC_DISPLAYS) == set(Metric)
    assert get_metric_display(Metric.CONFIRMED).label == "Confirmed Cases"
    assert get_metric_display(Metric.CONFIRMED).color == "#ff7300"
    assert get_metric_display(Metric.DEATHS).color == "#ff4d4f"
    assert get_metric_display(Metric.RECOVERED).color == "#52c41a"
    assert get_metric_display(Metric.ACTIVE).label == "Active Cases"


def test_metric_accepts_plain_string():
    assert get_metric_display("deaths").label == "Deaths"


def test_metric_value_reads_field_and_defaults_missing_to_zero():
    p = SeriesPoint(date=date(2020, 1, 1), confirmed=5, period_label="Forecast 1", is_forecast=True)

    assert metric_value(p, Metric.CONFIRMED) == 5
    assert metric_value(p, Metric.ACTIVE) == 0
