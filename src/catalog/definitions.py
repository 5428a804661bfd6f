from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from formatting import register_metric_format


@dataclass(frozen=True)
class CountryDescriptor:
    code: str
    name: str
    flag: str = ""


@dataclass(frozen=True)
class MetricDescriptor:
    id: str
    display_name: str
    provider_indicator_code: str
    formatting_rule: str
    description: Optional[str] = None
    icon: str = ""


@dataclass(frozen=True)
class TimeRange:
    value: int
    label: str


COUNTRIES: List[CountryDescriptor] = [
    CountryDescriptor("IN", "India", "🇮🇳"),
    CountryDescriptor("US", "United States", "🇺🇸"),
    CountryDescriptor("CN", "China", "🇨🇳"),
    CountryDescriptor("JP", "Japan", "🇯🇵"),
    CountryDescriptor("DE", "Germany", "🇩🇪"),
    CountryDescriptor("GB", "United Kingdom", "🇬🇧"),
    CountryDescriptor("BR", "Brazil", "🇧🇷"),
    CountryDescriptor("NG", "Nigeria", "🇳🇬"),
    CountryDescriptor("FR", "France", "🇫🇷"),
    CountryDescriptor("IT", "Italy", "🇮🇹"),
]

TIME_RANGES: List[TimeRange] = [
    TimeRange(5, "Last 5 Years"),
    TimeRange(10, "Last 10 Years"),
    TimeRange(20, "Last 20 Years"),
]

_METRICS: Dict[str, MetricDescriptor] = {}


def register_metric(metric: MetricDescriptor) -> None:
    """
    Add (or replace) a metric and wire its formatting rule.

    The formatter only knows rule names, so a new metric becomes
    displayable without touching any other component.
    """
    register_metric_format(metric.id, metric.formatting_rule)
    _METRICS[metric.id] = metric


def get_metric(metric_id: str) -> MetricDescriptor:
    metric = _METRICS.get(metric_id)
    if metric is None:
        raise KeyError(f"Metric '{metric_id}' not found in catalog.")
    return metric


def list_metrics() -> List[MetricDescriptor]:
    return list(_METRICS.values())


def get_country(country_code: str) -> CountryDescriptor:
    for country in COUNTRIES:
        if country.code == country_code:
            return country
    raise KeyError(f"Country '{country_code}' not found in catalog.")


def list_countries() -> List[CountryDescriptor]:
    return list(COUNTRIES)


def list_time_ranges() -> List[TimeRange]:
    return list(TIME_RANGES)


for _metric in (
    MetricDescriptor(
        id="GDP",
        display_name="GDP (Current USD)",
        provider_indicator_code="NY.GDP.MKTP.CD",
        formatting_rule="currency_magnitude",
        description="Gross Domestic Product at current market prices",
        icon="💰",
    ),
    MetricDescriptor(
        id="GDPPC",
        display_name="GDP per Capita",
        provider_indicator_code="NY.GDP.PCAP.CD",
        formatting_rule="currency_grouped",
        description="GDP divided by midyear population",
        icon="👤",
    ),
    MetricDescriptor(
        id="POP",
        display_name="Population",
        provider_indicator_code="SP.POP.TOTL",
        formatting_rule="count_magnitude",
        description="Total population count",
        icon="🌍",
    ),
):
    register_metric(_metric)


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
