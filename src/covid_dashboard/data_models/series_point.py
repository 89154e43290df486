"""Series point model.

One row of a processed, chart-ready series. Observed points carry all four
case counts; forecast points only carry the metric that was extrapolated.

Dumped with `by_alias=True` the bookkeeping fields use the camelCase names
the chart front end reads (`periodLabel`, `movingAverage`, `isForecast`).
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class SeriesPoint(BaseModel):
    date: date

    confirmed: Optional[int] = None
    deaths: Optional[int] = None
    recovered: Optional[int] = None
    active: Optional[int] = None

    # Positional bucket ("Week 3") or forecast step ("Forecast 2")
    period_label: str = Field(serialization_alias="periodLabel")

    moving_average: Optional[int] = Field(default=None, serialization_alias="movingAverage")
    is_forecast: bool = Field(default=False, serialization_alias="isForecast")
