"""
Normalization of raw World Bank records into a canonical series.

- Drops records whose value is null (or not numeric).
- Converts ``date`` -> integer year.
- Sorts ascending by year with a stable sort. Duplicate years are kept
  in their original relative order; no deduplication happens here.

The resulting list is never mutated by downstream components.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import pandas as pd

from common.errors import NoValidDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesPoint:
    date: int
    value: float


CanonicalSeries = List[SeriesPoint]

SERIES_COLUMNS = ["year", "value"]


def _coerce_year(date: Any) -> Optional[int]:
    if isinstance(date, bool):
        return None
    if isinstance(date, int):
        return date
    try:
        return int(str(date).strip())
    except (TypeError, ValueError):
        return None


def _coerce_value(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def normalize(raw_points: Iterable[Any]) -> CanonicalSeries:
    """
    Build the canonical series from ``RawPoint``-like objects (anything with
    ``date`` and ``value`` attributes, or mappings with those keys).

    Raises NoValidDataError when nothing survives the filtering.
    """
    kept: CanonicalSeries = []
    dropped = 0

    for raw in raw_points:
        if isinstance(raw, dict):
            date, value = raw.get("date"), raw.get("value")
        else:
            date, value = getattr(raw, "date", None), getattr(raw, "value", None)

        number = _coerce_value(value)
        year = _coerce_year(date)
        if number is None or year is None:
            dropped += 1
            continue
        kept.append(SeriesPoint(date=year, value=number))

    if not kept:
        raise NoValidDataError("No valid data points found")

    logger.debug("Normalized %d points (%d dropped)", len(kept), dropped)
    return sorted(kept, key=lambda point: point.date)


def series_to_dataframe(series: Iterable[SeriesPoint]) -> pd.DataFrame:
    """Tabular view of a canonical series (columns: year, value)."""
    rows = [{"year": point.date, "value": point.value} for point in series]
    if not rows:
        return pd.DataFrame(columns=SERIES_COLUMNS)

    df = pd.DataFrame(rows, columns=SERIES_COLUMNS)
    df["year"] = df["year"].astype("int64")
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    return df


__all__ = [
    "CanonicalSeries",
    "SERIES_COLUMNS",
    "SeriesPoint",
    "normalize",
    "series_to_dataframe",
]
