"""Command-line look at the dashboard data without a chart front end.

Commands:
  run-dashboard  - load the cases CSV (or simulated data), build the view
                   for one metric/region and print the tail of the series

Everything printed here comes from the `covid_dashboard` services; the
JSON export lives in `covid_dashboard/cli/export_dashboard_data.py`.
"""
from __future__ import annotations

import logging
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), "src"))
from typing import Optional

import typer

from covid_dashboard.data_models.metric import Metric
from covid_dashboard.services.data_source_service import DEFAULT_CSV_PATH, load_case_dataset
from covid_dashboard.services.dashboard_service import build_dashboard_view


def run_dashboard(
    csv_file: str = str(DEFAULT_CSV_PATH),
    metric: Metric = Metric.CONFIRMED,
    region: str = "Global",
    forecast: bool = False,
    tail: int = 15,
    seed: Optional[int] = None,
):
    print("Processing: loading case data...")
    dataset = load_case_dataset(csv_file, seed=seed)
    if dataset.is_synthetic:
        print("Real data not found, using simulated data")
    else:
        print(f"Using real dataset with {len(dataset.records)} records")

    view = build_dashboard_view(dataset, metric=metric, region=region, show_forecast=forecast)

    print(view.title)
    print(view.data_source_note)
    print(f"{len(view.regions)} selectable regions")

    if not view.series:
        print(f"No data for region {region!r}.")
        return

    print(f"{'period':<12} {'date':<10} {view.metric_label:>16} {view.moving_average_label:>16}")
    for p in view.series[-tail:]:
        value = getattr(p, view.metric.value)
        ma = "" if p.moving_average is None else f"{p.moving_average:,}"
        print(f"{p.period_label:<12} {p.date.isoformat():<10} {value:>16,} {ma:>16}")

    print("Done.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    typer.run(run_dashboard)
