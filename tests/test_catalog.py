import pytest

from catalog import (
    MetricDescriptor,
    get_country,
    get_metric,
    list_countries,
    list_metrics,
    list_time_ranges,
    register_metric,
)
from catalog import definitions
from formatting import format_value, value_formatter


def test_metrics_map_to_world_bank_indicators():
    assert get_metric("GDP").provider_indicator_code == "NY.GDP.MKTP.CD"
    assert get_metric("GDPPC").provider_indicator_code == "NY.GDP.PCAP.CD"
    assert get_metric("POP").provider_indicator_code == "SP.POP.TOTL"
    assert [m.id for m in list_metrics()] == ["GDP", "GDPPC", "POP"]


def test_unknown_metric_raises_key_error():
    with pytest.raises(KeyError):
        get_metric("CPI")


def test_countries_and_time_ranges():
    assert len(list_countries()) == 10
    assert get_country("GB").name == "United Kingdom"
    assert [r.value for r in list_time_ranges()] == [5, 10, 20]
    with pytest.raises(KeyError):
        get_country("ZZ")


def test_registering_metric_makes_it_formattable(monkeypatch):
    monkeypatch.setattr(definitions, "_METRICS", dict(definitions._METRICS))
    monkeypatch.setattr(value_formatter, "_METRIC_RULES", dict(value_formatter._METRIC_RULES))

    register_metric(
        MetricDescriptor(
            id="GNI",
            display_name="GNI (Current USD)",
            provider_indicator_code="NY.GNP.MKTP.CD",
            formatting_rule="currency_magnitude",
        )
    )

    assert get_metric("GNI").display_name == "GNI (Current USD)"
    assert format_value(4.2e12, "GNI") == "$4.20T"
