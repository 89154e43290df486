from datetime import date, timedelta
from typing import List

import pytest

from covid_dashboard.data_models.metric import Metric
from covid_dashboard.data_models.series_point import SeriesPoint
from covid_dashboard.services.smoothing_service import compute_moving_average


def _build_series(values: List[int], start: date = date(2020, 1, 22)) -> List[SeriesPoint]:
    return [
        SeriesPoint(
            date=start + timedelta(days=7 * i),
            confirmed=v,
            deaths=v // 10,
            recovered=0,
            active=v,
            period_label=f"Week {i + 1}",
        )
        for i, v in enumerate(values)
    ]


def test_first_points_carry_raw_value():
    series = _build_series([10, 20, 30, 40, 50, 60])
    smoothed = compute_moving_average(series, Metric.CONFIRMED)

    assert [p.moving_average for p in smoothed[:4]] == [10, 20, 30, 40]
    assert smoothed[0].moving_average == series[0].confirmed


def test_full_window_is_floored_mean():
    series = _build_series([1, 2, 3, 4, 6, 9])
    smoothed = compute_moving_average(series, Metric.CONFIRMED, window=5)

    # (1+2+3+4+6)/5 = 3.2 -> 3, (2+3+4+6+9)/5 = 4.8 -> 4
    assert smoothed[4].moving_average == 3
    assert smoothed[5].moving_average == 4


def test_selected_metric_is_used():
    series = _build_series([100, 200, 300])
    smoothed = compute_moving_average(series, Metric.DEATHS, window=2)

    assert [p.moving_average for p in smoothed] == [10, 15, 25]


def test_input_is_not_mutated():
    series = _build_series([5, 6, 7, 8, 9])
    smoothed = compute_moving_average(series, Metric.CONFIRMED)

    assert all(p.moving_average is None for p in series)
    assert [p.date for p in smoothed] == [p.date for p in series]
    assert len(smoothed) == len(series)


def test_window_of_one_is_identity():
    series = _build_series([3, 1, 4, 1, 5])
    smoothed = compute_moving_average(series, Metric.CONFIRMED, window=1)

    assert [p.moving_average for p in smoothed] == [3, 1, 4, 1, 5]


def test_empty_series():
    assert compute_moving_average([], Metric.ACTIVE) == []


def test_invalid_window():
    with pytest.raises(ValueError):
        compute_moving_average(_build_series([1, 2]), Metric.CONFIRMED, window=0)
