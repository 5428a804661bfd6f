"""
Single-period trend analysis over a canonical series.

Only the last two points matter:

    change = latest - previous
    growth = change / previous * 100     (0 when previous == 0)
    trend  = up | down | neutral         (sign of growth, no tolerance)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from transformations import SeriesPoint


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class TrendSummary:
    latest: Optional[SeriesPoint]
    growth_rate_percent: float
    trend: Trend
    change_absolute: float


@dataclass(frozen=True)
class PeriodSummary:
    first_year: Optional[int]
    last_year: Optional[int]
    point_count: int
    label: str


def classify_trend(growth_rate_percent: float) -> Trend:
    if growth_rate_percent > 0:
        return Trend.UP
    if growth_rate_percent < 0:
        return Trend.DOWN
    return Trend.NEUTRAL


def growth_rate(previous: float, current: float) -> float:
    """Percentage change; a zero base yields 0 instead of inf/NaN."""
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def analyze(series: Sequence[SeriesPoint]) -> TrendSummary:
    if not series:
        return TrendSummary(
            latest=None,
            growth_rate_percent=0.0,
            trend=Trend.NEUTRAL,
            change_absolute=0.0,
        )

    latest = series[-1]
    if len(series) == 1:
        return TrendSummary(
            latest=latest,
            growth_rate_percent=0.0,
            trend=Trend.NEUTRAL,
            change_absolute=0.0,
        )

    previous = series[-2]
    change = latest.value - previous.value
    rate = growth_rate(previous.value, latest.value)
    return TrendSummary(
        latest=latest,
        growth_rate_percent=rate,
        trend=classify_trend(rate),
        change_absolute=change,
    )


def summarize_period(series: Sequence[SeriesPoint]) -> PeriodSummary:
    if not series:
        return PeriodSummary(first_year=None, last_year=None, point_count=0, label="")

    first_year = series[0].date
    last_year = series[-1].date
    return PeriodSummary(
        first_year=first_year,
        last_year=last_year,
        point_count=len(series),
        label=f"{first_year} - {last_year}",
    )


__all__ = [
    "PeriodSummary",
    "Trend",
    "TrendSummary",
    "analyze",
    "classify_trend",
    "growth_rate",
    "summarize_period",
]
