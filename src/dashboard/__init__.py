"""
Dashboard package
-----------------

Selection state and the analysis cycle that turns a selection
(country, metric, period) into everything the dashboard shows.
"""

from .controller import DashboardController, DashboardState  # noqa: F401
from .cycle import AnalysisResult, Selection, SeriesProvider, run_analysis_cycle  # noqa: F401

__all__ = [
    "AnalysisResult",
    "DashboardController",
    "DashboardState",
    "Selection",
    "SeriesProvider",
    "run_analysis_cycle",
]
