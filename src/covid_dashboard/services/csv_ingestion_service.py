"""CSV ingestion service.

Turns the raw text of a COVID-19 cases CSV (Kaggle
`covid_19_clean_complete.csv` layout, or the lower-case variant) into typed
`CaseRecord` objects.

The split is a plain comma split: values that contain a comma inside
double quotes will misalign the columns of that row.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence
import logging
import re

import pandas as pd

from covid_dashboard.data_models.case_record import CaseRecord, UNKNOWN_REGION


logger = logging.getLogger(__name__)


# Accepted header spellings per field, first non-empty match wins
DATE_COLUMNS = ("Date", "date")
REGION_COLUMNS = ("Country/Region", "country")
SUBREGION_COLUMNS = ("Province/State", "province")
CONFIRMED_COLUMNS = ("Confirmed", "confirmed")
DEATHS_COLUMNS = ("Deaths", "deaths")
RECOVERED_COLUMNS = ("Recovered", "recovered")
ACTIVE_COLUMNS = ("Active", "active")

_LEADING_INT = re.compile(r"^[+-]?\d+")
_HAS_DIGIT = re.compile(r"\d")


def _clean_token(token: str) -> str:
    return token.replace('"', "").strip()


def _first_value(row: Dict[str, str], candidates: Sequence[str]) -> Optional[str]:
    for cand in candidates:
        value = row.get(cand)
        if value:
            return value
    return None


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of `value`.

    Missing or empty values count as 0. Returns None when the text does not
    start with an integer ("n/a", "abc").
    """
    if value is None or value == "":
        return 0
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(0))


def _parse_date(value: Optional[str]) -> Optional[date]:
    # Keywords like "now"/"today" would resolve against the wall clock
    if not value or not _HAS_DIGIT.search(value):
        return None
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


def parse_case_records_from_text(csv_text: str) -> List[CaseRecord]:
    """Parse CSV text into a list of `CaseRecord`.

    Rows whose `Confirmed` value (or date) cannot be parsed are skipped
    rather than failing the whole parse. Other numeric fields fall back to 0.
    An empty body yields an empty list.
    """
    lines = (csv_text or "").strip().split("\n")
    if not lines or not lines[0].strip():
        return []

    headers = [_clean_token(h) for h in lines[0].split(",")]
    records: List[CaseRecord] = []
    dropped = 0

    for line in lines[1:]:
        if not line.strip():
            continue

        values = [_clean_token(v) for v in line.split(",")]
        row = dict(zip(headers, values))

        confirmed = _parse_int(_first_value(row, CONFIRMED_COLUMNS))
        day = _parse_date(_first_value(row, DATE_COLUMNS))
        if confirmed is None or confirmed < 0 or day is None:
            dropped += 1
            continue

        deaths = _parse_int(_first_value(row, DEATHS_COLUMNS))
        recovered = _parse_int(_first_value(row, RECOVERED_COLUMNS))
        active = _parse_int(_first_value(row, ACTIVE_COLUMNS))

        records.append(
            CaseRecord(
                date=day,
                region=_first_value(row, REGION_COLUMNS) or UNKNOWN_REGION,
                subregion=_first_value(row, SUBREGION_COLUMNS) or "",
                confirmed=confirmed,
                deaths=deaths if deaths is not None else 0,
                recovered=recovered if recovered is not None else 0,
                active=active if active is not None else 0,
            )
        )

    if dropped:
        logger.debug("Dropped %d malformed case rows", dropped)

    return records


def load_case_records_from_csv(csv_path: Path | str) -> List[CaseRecord]:
    """Load a cases CSV file into a list of `CaseRecord`.

    Parameters
    ----------
    csv_path : Path | str
        Path to `covid_19_clean_complete.csv` or any CSV using the same
        (or the lower-case) column names.

    Returns
    -------
    List[CaseRecord]
        One record per well-formed row.
    """

    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"Cases CSV file not found: {path}")

    # Undecodable bytes become U+FFFD instead of failing the whole load
    records = parse_case_records_from_text(path.read_text(encoding="utf-8", errors="replace"))

    logger.info("Loaded %d case records from %s", len(records), path)
    return records
