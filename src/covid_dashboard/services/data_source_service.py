"""Data source service.

Loads the cases CSV for a dashboard session. When the file cannot be read
the session runs on a simulated weekly series instead, so the dashboard
always has something to show.
"""
from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional
import logging
import math

import numpy as np

from covid_dashboard.data_models.dashboard_view import CaseDataset, SYNTHETIC_SOURCE
from covid_dashboard.data_models.series_point import SeriesPoint
from covid_dashboard.services.csv_ingestion_service import load_case_records_from_csv

logger = logging.getLogger(__name__)


DEFAULT_CSV_PATH = Path("data/covid_19_clean_complete.csv")

SYNTHETIC_POINTS = 100
SYNTHETIC_START_DATE = date(2020, 1, 22)
SYNTHETIC_STEP_DAYS = 7


def generate_synthetic_series(
    points: int = SYNTHETIC_POINTS,
    start_date: date = SYNTHETIC_START_DATE,
    seed: Optional[int] = None,
) -> List[SeriesPoint]:
    """Build a simulated weekly series with a rising linear trend plus noise.

    The shape is fixed (confirmed grows by ~150 per week, deaths ~2% and
    recovered ~85% of confirmed); the noise comes from a numpy Generator,
    so passing `seed` makes the output reproducible.
    """
    rng = np.random.default_rng(seed)
    series: List[SeriesPoint] = []

    for i in range(points):
        confirmed = math.floor(1000 + i * 150 + rng.random() * 500)
        deaths = math.floor(confirmed * 0.02 + rng.random() * 10)
        recovered = math.floor(confirmed * 0.85 + rng.random() * 100)

        series.append(
            SeriesPoint(
                date=start_date + timedelta(days=i * SYNTHETIC_STEP_DAYS),
                confirmed=confirmed,
                deaths=deaths,
                recovered=recovered,
                active=confirmed - deaths - recovered,
                period_label=f"Week {i + 1}",
            )
        )

    return series


def load_case_dataset(
    csv_path: Path | str = DEFAULT_CSV_PATH,
    seed: Optional[int] = None,
) -> CaseDataset:
    """Load the cases CSV, or fall back to a synthetic series if it can't be read.

    A file that reads fine but holds no usable rows is still returned as a
    real (empty) dataset; only an unreadable source triggers the fallback.
    """
    path = Path(csv_path)
    try:
        records = load_case_records_from_csv(path)
    except OSError as exc:
        logger.warning("Real data not available (%s); using simulated data", exc)
        return CaseDataset(
            fallback_series=generate_synthetic_series(seed=seed),
            source=SYNTHETIC_SOURCE,
        )

    return CaseDataset(records=records, source=str(path))
