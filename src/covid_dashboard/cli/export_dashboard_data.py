"""Export the dashboard view for one metric/region selection as JSON.

The JSON is what a charting front end needs to draw the line chart: the
smoothed series (plus forecast points), the region list and the metric's
label and color.
"""
# Example:
#
# python src/covid_dashboard/cli/export_dashboard_data.py \
#   --csv-file data/covid_19_clean_complete.csv --metric deaths --region Italy \
#   --forecast --output out/italy_deaths.json
from __future__ import annotations

from pathlib import Path
import argparse
import logging
import sys

from covid_dashboard.data_models.metric import Metric
from covid_dashboard.services.aggregation_service import GLOBAL_REGION
from covid_dashboard.services.dashboard_service import available_regions, build_dashboard_view
from covid_dashboard.services.data_source_service import DEFAULT_CSV_PATH, load_case_dataset
from covid_dashboard.services.forecast_service import DEFAULT_FORECAST_PERIODS
from covid_dashboard.services.smoothing_service import DEFAULT_MOVING_AVERAGE_WINDOW

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export COVID-19 dashboard chart data as JSON.")
    parser.add_argument("--csv-file", dest="csv_file", type=str, default=str(DEFAULT_CSV_PATH),
                        help="Path to the cases CSV. Falls back to simulated data if it cannot be read.")
    parser.add_argument("--metric", dest="metric", choices=[m.value for m in Metric],
                        default=Metric.CONFIRMED.value, help="Case count to chart (default confirmed).")
    parser.add_argument("--region", dest="region", type=str, default=GLOBAL_REGION,
                        help="Country to chart, or 'Global' for the worldwide total.")
    parser.add_argument("--forecast", dest="forecast", action="store_true",
                        help="Append a linear forecast to the series.")
    parser.add_argument("--window", dest="window", type=int, default=DEFAULT_MOVING_AVERAGE_WINDOW,
                        help=f"Moving average window (default {DEFAULT_MOVING_AVERAGE_WINDOW}).")
    parser.add_argument("--periods", dest="periods", type=int, default=DEFAULT_FORECAST_PERIODS,
                        help=f"Number of forecast periods (default {DEFAULT_FORECAST_PERIODS}).")
    parser.add_argument("--seed", dest="seed", type=int, default=None,
                        help="Random seed for the simulated fallback series.")
    parser.add_argument("--output", dest="output", type=str, default=None,
                        help="If provided, write the JSON to this path instead of stdout.")
    parser.add_argument("--list-regions", dest="list_regions", action="store_true",
                        help="Print the selectable regions and exit.")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    dataset = load_case_dataset(args.csv_file, seed=args.seed)

    if args.list_regions:
        for region in available_regions(dataset):
            print(region)
        return 0

    try:
        view = build_dashboard_view(
            dataset,
            metric=Metric(args.metric),
            region=args.region,
            show_forecast=args.forecast,
            window=args.window,
            periods=args.periods,
        )
    except ValueError as exc:
        logger.error("Could not build dashboard view: %s", exc)
        return 2

    if not view.series:
        logger.warning("No data for region %r; the chart will be empty", args.region)

    view_json = view.model_dump_json(indent=2, by_alias=True)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(view_json, encoding="utf-8")
        logger.info("Wrote dashboard data to %s", out_path)
    else:
        print(view_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
