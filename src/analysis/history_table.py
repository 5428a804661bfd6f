from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from formatting import format_growth_rate, format_value, round_half_up
from transformations import SeriesPoint

from .sparkline import project

HISTORY_COLUMNS = [
    "year",
    "value",
    "display_value",
    "change_percent",
    "change_label",
    "tone",
    "sparkline",
]

ROW_SPARKLINE_HEIGHT = 40


def _row_change(previous: Optional[SeriesPoint], current: SeriesPoint) -> Optional[float]:
    # No change for the first row or after a zero-valued year.
    if previous is None or not previous.value:
        return None
    return (current.value - previous.value) / previous.value * 100


def _row_tone(change: Optional[float]) -> str:
    # Judged on the displayed two-decimal change, so "-0.00%" is positive.
    if change is not None and round_half_up(change, 2) >= 0:
        return "positive"
    return "negative"


def build_history_table(
    series: Sequence[SeriesPoint],
    metric_id: str,
    *,
    sparkline_height: int = ROW_SPARKLINE_HEIGHT,
) -> pd.DataFrame:
    """
    One row per point, in series order, with the year-over-year change and
    a sparkline projected over every point up to and including the row.
    """
    rows: List[Dict[str, Any]] = []
    for index, point in enumerate(series):
        previous = series[index - 1] if index > 0 else None
        change = _row_change(previous, point)
        rows.append(
            {
                "year": point.date,
                "value": point.value,
                "display_value": format_value(point.value, metric_id),
                "change_percent": change,
                "change_label": format_growth_rate(change) if change is not None else "-",
                "tone": _row_tone(change),
                "sparkline": project(series[: index + 1], sparkline_height),
            }
        )

    if not rows:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    df = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    df["year"] = df["year"].astype("int64")
    return df


__all__ = ["HISTORY_COLUMNS", "ROW_SPARKLINE_HEIGHT", "build_history_table"]
