from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Protocol

import pandas as pd

from analysis import PeriodSummary, TrendSummary, analyze, build_history_table, summarize_period
from catalog import CountryDescriptor, MetricDescriptor, get_country, get_metric
from formatting import format_growth_rate, format_value
from ingestion_api import RawPoint
from transformations import CanonicalSeries, normalize


class SeriesProvider(Protocol):
    def fetch(self, country_code: str, indicator_code: str, period_count: int) -> List[RawPoint]: ...


@dataclass(frozen=True)
class Selection:
    country_code: str
    metric_id: str
    period_count: int


@dataclass(frozen=True)
class AnalysisResult:
    selection: Selection
    country: CountryDescriptor
    metric: MetricDescriptor
    series: CanonicalSeries
    summary: TrendSummary
    latest_display: str
    growth_display: str
    period: PeriodSummary
    history: pd.DataFrame
    fetched_at: datetime


def _resolve_country(country_code: str) -> CountryDescriptor:
    # Codes outside the fixed list are still fetched, just shown by code.
    try:
        return get_country(country_code)
    except KeyError:
        return CountryDescriptor(code=country_code, name=country_code)


def run_analysis_cycle(
    client: SeriesProvider,
    selection: Selection,
    *,
    now: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Fetch, normalize and derive everything the dashboard displays.

    All-or-nothing: any SeriesPipelineError propagates and no partial
    result is produced.
    """
    metric = get_metric(selection.metric_id)
    country = _resolve_country(selection.country_code)

    raw_points = client.fetch(
        selection.country_code,
        metric.provider_indicator_code,
        selection.period_count,
    )
    series = normalize(raw_points)

    summary = analyze(series)
    latest_value = summary.latest.value if summary.latest is not None else None
    return AnalysisResult(
        selection=selection,
        country=country,
        metric=metric,
        series=series,
        summary=summary,
        latest_display=format_value(latest_value, metric.id),
        growth_display=format_growth_rate(summary.growth_rate_percent),
        period=summarize_period(series),
        history=build_history_table(series, metric.id),
        fetched_at=now or datetime.now(timezone.utc),
    )


__all__ = ["AnalysisResult", "Selection", "SeriesProvider", "run_analysis_cycle"]
