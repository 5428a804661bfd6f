"""
Catalog
-------

Fixed selection lists offered by the dashboard shell: countries,
metrics (with their World Bank indicator codes) and time windows.

    from catalog import get_metric

    metric = get_metric("GDP")
    metric.provider_indicator_code   # "NY.GDP.MKTP.CD"
"""

from .definitions import (  # noqa: F401
    COUNTRIES,
    TIME_RANGES,
    CountryDescriptor,
    MetricDescriptor,
    TimeRange,
    get_country,
    get_metric,
    list_countries,
    list_metrics,
    list_time_ranges,
    register_metric,
)

__all__ = [
    "COUNTRIES",
    "TIME_RANGES",
    "CountryDescriptor",
    "MetricDescriptor",
    "TimeRange",
    "get_country",
    "get_metric",
    "list_countries",
    "list_metrics",
    "list_time_ranges",
    "register_metric",
]
