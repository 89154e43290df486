"""Aggregation of case records into a single chart-ready series."""
from __future__ import annotations

from typing import List
import logging

import pandas as pd

from covid_dashboard.data_models.case_record import CaseRecord
from covid_dashboard.data_models.metric import Metric
from covid_dashboard.data_models.series_point import SeriesPoint

logger = logging.getLogger(__name__)


GLOBAL_REGION = "Global"
WEEK_BUCKET_SIZE = 7

METRIC_COLUMNS = [m.value for m in Metric]


def _records_to_dataframe(records: List[CaseRecord]) -> pd.DataFrame:
    df = pd.DataFrame.from_records(
        [r.model_dump() for r in records],
        columns=["date", "region", "subregion"] + METRIC_COLUMNS,
    )
    # Compare dates as datetimes, never as strings
    df["date"] = pd.to_datetime(df["date"])
    return df


def _sum_by_date(df: pd.DataFrame) -> List[SeriesPoint]:
    """Sum the case counts per date, sort chronologically and label by position."""
    if df.empty:
        return []

    daily = (
        df.groupby("date", sort=True)[METRIC_COLUMNS]
        .sum()
        .reset_index()
        .sort_values("date")
        .reset_index(drop=True)
    )

    points: List[SeriesPoint] = []
    for i, row in enumerate(daily.itertuples(index=False)):
        points.append(
            SeriesPoint(
                date=row.date.date(),
                confirmed=int(row.confirmed),
                deaths=int(row.deaths),
                recovered=int(row.recovered),
                active=int(row.active),
                period_label=f"Week {i // WEEK_BUCKET_SIZE + 1}",
            )
        )
    return points


def aggregate_global(records: List[CaseRecord]) -> List[SeriesPoint]:
    """Collapse every region into one worldwide total per date."""
    return _sum_by_date(_records_to_dataframe(records))


def aggregate_region(records: List[CaseRecord], region: str) -> List[SeriesPoint]:
    """Series for one country, matched exactly on `region`.

    Province-level rows reported for the same country and date are summed
    into one point. A region that does not occur yields an empty series.
    """
    df = _records_to_dataframe(records)
    df = df[df["region"] == region]
    if df.empty:
        logger.debug("No case records for region %r", region)
    return _sum_by_date(df)


def aggregate_series(records: List[CaseRecord], region: str = GLOBAL_REGION) -> List[SeriesPoint]:
    if region == GLOBAL_REGION:
        return aggregate_global(records)
    return aggregate_region(records, region)


def list_regions(records: List[CaseRecord]) -> List[str]:
    """Selectable regions: "Global" followed by every distinct region, sorted."""
    return [GLOBAL_REGION] + sorted({r.region for r in records})
