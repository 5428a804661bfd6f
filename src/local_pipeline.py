"""
Local entrypoint for the economic indicator dashboard.

Runs one analysis cycle for a (country, metric, period) selection and
prints what the dashboard would show:

1. World Bank fetch
2. Normalization + trend analysis
3. Summary cards and per-year history table
4. Optional artefacts: CSV export and PNG chart

Intended usage (local):

    PYTHONPATH=src python -m local_pipeline --country BR --metric POP --years 20

Add ``--export`` and/or ``--chart`` to write artefacts under the export
directory (default: ``exports``, see settings.DASHBOARD_EXPORT_DIR).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from adapters import LocalStorageAdapter
from analysis import build_series_chart
from common.errors import SeriesPipelineError
from dashboard import AnalysisResult, Selection, run_analysis_cycle
from export import save_csv_export
from ingestion_api import WorldBankClient
from settings import Settings

HISTORY_PRINT_COLUMNS = ["year", "display_value", "change_label"]


def format_summary_lines(result: AnalysisResult) -> List[str]:
    summary = result.summary
    latest_year = summary.latest.date if summary.latest is not None else "-"
    return [
        f"Country:       {result.country.name}",
        f"Latest {result.metric.id}:".ljust(15) + f"{result.latest_display} ({latest_year})",
        f"Growth Rate:   {result.growth_display} [{summary.trend.value}] year-over-year",
        f"Data Period:   {result.period.label} ({result.period.point_count} data points)",
    ]


def run_local_pipeline(
    selection: Selection,
    *,
    settings: Optional[Settings] = None,
    client: Optional[WorldBankClient] = None,
    export_csv: bool = False,
    export_chart: bool = False,
    output_dir: Path | str | None = None,
) -> Dict[str, object]:
    """
    Run one analysis cycle end-to-end.

    Returns
    -------
    artefacts:
        Dictionary with the "result" plus the locations of any written
        "csv" / "chart" artefacts.
    """
    settings = settings or Settings.from_env()
    client = client or WorldBankClient(
        settings.world_bank_base_url,
        timeout=settings.timeout_seconds,
    )
    artefacts: Dict[str, object] = {}

    print(
        f"[1/3] Fetching {selection.metric_id} for {selection.country_code} "
        f"(last {selection.period_count} years) from World Bank..."
    )
    result = run_analysis_cycle(client, selection)
    artefacts["result"] = result

    print("[2/3] Summary")
    for line in format_summary_lines(result):
        print(f"      {line}")
    print()
    print(f"Historical Data - {result.metric.display_name}")
    print(result.history[HISTORY_PRINT_COLUMNS].to_string(index=False))
    print()

    if export_csv or export_chart:
        print("[3/3] Writing artefacts...")
        storage = LocalStorageAdapter(output_dir or settings.export_dir)
        if export_csv:
            csv_location = save_csv_export(
                storage,
                result.series,
                result.country.name,
                result.metric.display_name,
            )
            artefacts["csv"] = csv_location
            print(f"      CSV: {csv_location}")
        if export_chart:
            chart_location = build_series_chart(
                result.series,
                country_name=result.country.name,
                metric=result.metric,
                storage=storage,
            )
            artefacts["chart"] = chart_location
            print(f"      Chart: {chart_location}")
    else:
        print("[3/3] No artefacts requested.")

    return artefacts


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="Show GDP / GDP per capita / population trends for one country.",
    )
    parser.add_argument("--country", default=settings.default_country, help="Two-letter country code.")
    parser.add_argument(
        "--metric",
        default=settings.default_metric,
        help="Metric id: GDP, GDPPC or POP.",
    )
    parser.add_argument(
        "--years",
        type=int,
        default=settings.default_period,
        help="Number of most recent years to request (5, 10, 20).",
    )
    parser.add_argument("--export", action="store_true", help="Write the CSV export.")
    parser.add_argument("--chart", action="store_true", help="Write a PNG line chart.")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for artefacts (default: DASHBOARD_EXPORT_DIR or 'exports').",
    )

    args = parser.parse_args(argv)
    selection = Selection(
        country_code=args.country.upper(),
        metric_id=args.metric.upper(),
        period_count=args.years,
    )

    try:
        run_local_pipeline(
            selection,
            settings=settings,
            export_csv=args.export,
            export_chart=args.chart,
            output_dir=args.output_dir,
        )
    except (SeriesPipelineError, KeyError, ValueError) as exc:
        print(f"Data Loading Error: {exc}", file=sys.stderr)
        return 1
    return 0


__all__ = ["format_summary_lines", "main", "run_local_pipeline"]


if __name__ == "__main__":
    sys.exit(main())
