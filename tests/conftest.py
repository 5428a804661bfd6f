import os

# Headless rendering for chart tests.
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402

from transformations import SeriesPoint  # noqa: E402


def make_series(*pairs):
    return [SeriesPoint(date=year, value=float(value)) for year, value in pairs]


@pytest.fixture
def series_factory():
    return make_series
