"""
CSV export of a canonical series.

Output layout (no trailing newline):

    Year,<metric label>,Country
    2020,10,India
    2021,20,India

Fields are joined with "," and never quoted or escaped. Years and numbers
never need it; labels containing commas would break the column layout.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Iterable, Optional

from adapters import StorageAdapter
from formatting import MISSING_DISPLAY, format_number_plain

CSV_MIME_TYPE = "text/csv"
CSV_EXTENSION = "csv"
EXPORTS_BASE_PREFIX = "exports"


def _value_text(value: Optional[float]) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return MISSING_DISPLAY
    return format_number_plain(value)


def to_csv(series: Iterable[Any], series_label: str, metric_label: str) -> str:
    lines = [",".join(["Year", metric_label, "Country"])]
    for point in series:
        lines.append(",".join([str(point.date), _value_text(point.value), series_label]))
    return "\n".join(lines)


def export_filename(
    country_name: str,
    metric_name: str,
    *,
    today: Optional[date] = None,
    extension: str = CSV_EXTENSION,
) -> str:
    year = (today or date.today()).year
    return f"{country_name}-{metric_name}-{year}.{extension}"


def save_csv_export(
    storage: StorageAdapter,
    series: Iterable[Any],
    country_name: str,
    metric_name: str,
    *,
    today: Optional[date] = None,
    prefix: str = EXPORTS_BASE_PREFIX,
) -> str:
    """Write the CSV artefact through the storage adapter; returns its location."""
    content = to_csv(series, country_name, metric_name)
    key = f"{prefix.rstrip('/')}/{export_filename(country_name, metric_name, today=today)}"
    return storage.write_raw(key, content.encode("utf-8"), content_type=CSV_MIME_TYPE)


__all__ = [
    "CSV_EXTENSION",
    "CSV_MIME_TYPE",
    "EXPORTS_BASE_PREFIX",
    "export_filename",
    "save_csv_export",
    "to_csv",
]
