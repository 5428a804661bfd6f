"""
Transformations layer
----------------------

Converts raw provider records into typed, chronologically ordered
series that the analysis and presentation layers consume.
"""

from .series_normalizer import (  # noqa: F401
    CanonicalSeries,
    SeriesPoint,
    normalize,
    series_to_dataframe,
)

__all__ = [
    "CanonicalSeries",
    "SeriesPoint",
    "normalize",
    "series_to_dataframe",
]
