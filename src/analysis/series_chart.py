"""
PNG line chart of one indicator series for one country.

Written either to a local directory or, when a ``StorageAdapter`` is
given, under ``charts/<YYYYMMDD>/`` through the adapter (local FS or S3).
"""

from __future__ import annotations

import io
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, MaxNLocator

from adapters import StorageAdapter
from catalog import MetricDescriptor
from formatting import format_value
from transformations import SeriesPoint, series_to_dataframe

CHART_OUTPUT_DIR = Path("charts")
CHARTS_BASE_PREFIX = "charts"


def chart_filename(country_name: str, metric_name: str) -> str:
    return f"{country_name}-{metric_name}.png"


def build_series_chart(
    series: Sequence[SeriesPoint],
    *,
    country_name: str,
    metric: MetricDescriptor,
    output_dir: Path | str = CHART_OUTPUT_DIR,
    storage: StorageAdapter | None = None,
    color: str = "#3b82f6",
) -> Path | str:
    df = series_to_dataframe(series)
    if df.empty:
        raise ValueError(f"No data points to chart for {country_name} / {metric.id}")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(df["year"], df["value"], color=color, linewidth=2, marker="o", markersize=4)
    ax.fill_between(df["year"], df["value"], df["value"].min(), color=color, alpha=0.1)

    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_value(v, metric.id)))
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))

    latest = df.iloc[-1]
    ax.annotate(
        format_value(float(latest["value"]), metric.id),
        (latest["year"], latest["value"]),
        textcoords="offset points",
        xytext=(5, 5),
        fontsize=8,
    )

    ax.set_title(f"{country_name} - {metric.display_name}")
    ax.set_xlabel("Year")
    ax.set_ylabel(metric.display_name)
    ax.grid(True, linestyle="--", alpha=0.3)
    fig.tight_layout()

    filename = chart_filename(country_name, metric.display_name)

    if storage is None:
        output_root = Path(output_dir)
        output_root.mkdir(parents=True, exist_ok=True)
        output_path = output_root / filename
        fig.savefig(output_path, dpi=150)
        plt.close(fig)
        return output_path

    snapshot_date = datetime.now(timezone.utc).strftime("%Y%m%d")
    key = f"{CHARTS_BASE_PREFIX}/{snapshot_date}/{filename}"
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=150)
    plt.close(fig)
    buf.seek(0)
    return storage.write_raw(key, buf.getvalue(), content_type="image/png")


__all__ = ["CHART_OUTPUT_DIR", "CHARTS_BASE_PREFIX", "build_series_chart", "chart_filename"]
