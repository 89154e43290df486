"""Case record model.

One raw observation from the COVID-19 time-series CSV: a single
country/province row for a single day.
"""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


UNKNOWN_REGION = "Unknown"


class CaseRecord(BaseModel):
    """One parsed row of the cases CSV.

    Only `confirmed` is validated; the loader drops rows where it cannot be
    parsed, so every record that exists carries a usable count.
    """

    date: date
    region: str = UNKNOWN_REGION
    subregion: str = ""

    confirmed: int = Field(ge=0)
    deaths: int = 0
    recovered: int = 0
    active: int = 0
