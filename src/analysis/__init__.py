"""
Analysis layer
--------------

Pure derivations from a canonical series:

- trend summary (latest value, delta, growth rate, direction)
- sparkline projections
- per-year history table
- PNG line chart artefact
"""

from .history_table import HISTORY_COLUMNS, build_history_table  # noqa: F401
from .series_chart import CHART_OUTPUT_DIR, build_series_chart  # noqa: F401
from .sparkline import (  # noqa: F401
    INSUFFICIENT_DATA,
    NO_VARIATION,
    DegenerateMarker,
    PlotPoint,
    project,
    project_prefixes,
    render_sparkline_svg,
)
from .trend_analysis import (  # noqa: F401
    PeriodSummary,
    Trend,
    TrendSummary,
    analyze,
    summarize_period,
)

__all__ = [
    "CHART_OUTPUT_DIR",
    "HISTORY_COLUMNS",
    "INSUFFICIENT_DATA",
    "NO_VARIATION",
    "DegenerateMarker",
    "PeriodSummary",
    "PlotPoint",
    "Trend",
    "TrendSummary",
    "analyze",
    "build_history_table",
    "build_series_chart",
    "project",
    "project_prefixes",
    "render_sparkline_svg",
    "summarize_period",
]
