from __future__ import annotations

from typing import List
import math

from covid_dashboard.data_models.metric import Metric, metric_value
from covid_dashboard.data_models.series_point import SeriesPoint


DEFAULT_MOVING_AVERAGE_WINDOW = 5


def compute_moving_average(
    series: List[SeriesPoint],
    metric: Metric,
    window: int = DEFAULT_MOVING_AVERAGE_WINDOW,
) -> List[SeriesPoint]:
    """Attach a trailing moving average of `metric` to every point.

    The first `window - 1` points have no full window yet and carry their own
    raw value. From there on the value is the truncated (floored) mean of the
    last `window` points. Returns new points; `series` is left untouched.
    """
    if window < 1:
        raise ValueError(f"Moving average window must be >= 1, got {window}")

    values = [metric_value(p, metric) for p in series]
    smoothed: List[SeriesPoint] = []

    for i, point in enumerate(series):
        if i < window - 1:
            ma = values[i]
        else:
            ma = math.floor(sum(values[i - window + 1:i + 1]) / window)
        smoothed.append(point.model_copy(update={"moving_average": ma}))

    return smoothed
