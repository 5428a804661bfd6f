"""
Display formatting for indicator values.

Each metric id maps to a named formatting rule (a pure function from a
number to a string). New metrics are added by registration, not by
branching on ids:

    register_metric_format("GNI", "currency_magnitude")
    format_value(2.5e12, "GNI")   # "$2.50T"

Missing values (None, NaN) and an exact zero all render as "N/A".

Rounding breaks ties away from zero. Fixed-point text ("$1.13T") rounds
the exact binary value of the quotient; grouped text rounds the shortest
decimal form of the number, so 1.0005 groups as "1.001".
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, Dict, Optional, Union

MISSING_DISPLAY = "N/A"

FormattingRule = Callable[[float], str]

TRILLION = 1e12
BILLION = 1e9
MILLION = 1e6

_DECIMAL_CONTEXT = Context(prec=64, rounding=ROUND_HALF_UP)


def _is_missing(value: Optional[float]) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    # Zero is rendered like a missing value.
    return value == 0


def round_half_up(value: float, places: int, *, shortest: bool = False) -> Decimal:
    """
    Round ``value`` to ``places`` fraction digits, ties away from zero.

    With ``shortest`` the tie is judged on ``repr(value)`` rather than on
    the exact binary expansion.
    """
    number = Decimal(repr(float(value))) if shortest else Decimal(value)
    return number.quantize(Decimal(1).scaleb(-places), context=_DECIMAL_CONTEXT)


def _fixed(value: float, places: int = 2) -> str:
    return format(round_half_up(value, places), "f")


def group_thousands(value: float) -> str:
    """
    en-US grouping: "," every three digits, at most three fraction
    digits, trailing fractional zeros dropped.
    """
    if float(value).is_integer():
        return f"{int(value):,}"
    text = format(round_half_up(value, 3, shortest=True), ",f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_number_plain(value: float) -> str:
    """Shortest text for a number: 10.0 -> "10", 10.5 -> "10.5"."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def currency_magnitude(value: float) -> str:
    if value >= TRILLION:
        return f"${_fixed(value / TRILLION)}T"
    if value >= BILLION:
        return f"${_fixed(value / BILLION)}B"
    # Everything below a billion is shown in millions, even tiny values.
    return f"${_fixed(value / MILLION)}M"


def currency_grouped(value: float) -> str:
    return f"${group_thousands(value)}"


def count_magnitude(value: float) -> str:
    if value >= BILLION:
        return f"{_fixed(value / BILLION)}B"
    if value >= MILLION:
        return f"{_fixed(value / MILLION)}M"
    return format(round_half_up(value, 0, shortest=True), ",f")


FORMATTING_RULES: Dict[str, FormattingRule] = {
    "currency_magnitude": currency_magnitude,
    "currency_grouped": currency_grouped,
    "count_magnitude": count_magnitude,
    "grouped": group_thousands,
}

_METRIC_RULES: Dict[str, FormattingRule] = {
    "GDP": currency_magnitude,
    "GDPPC": currency_grouped,
    "POP": count_magnitude,
}


def register_formatting_rule(name: str, rule: FormattingRule) -> None:
    FORMATTING_RULES[name] = rule


def register_metric_format(metric_id: str, rule: Union[str, FormattingRule]) -> None:
    """Attach a formatting rule (by name or as a callable) to a metric id."""
    if isinstance(rule, str):
        try:
            rule = FORMATTING_RULES[rule]
        except KeyError:
            raise KeyError(f"Unknown formatting rule '{rule}'.") from None
    _METRIC_RULES[metric_id] = rule


def get_metric_rule(metric_id: str) -> FormattingRule:
    """Rule for the metric, falling back to plain grouping for unknown ids."""
    return _METRIC_RULES.get(metric_id, group_thousands)


def format_value(value: Optional[float], metric_id: str) -> str:
    if _is_missing(value):
        return MISSING_DISPLAY
    return get_metric_rule(metric_id)(value)


def format_growth_rate(rate: float) -> str:
    return f"{_fixed(rate)}%"


__all__ = [
    "MISSING_DISPLAY",
    "FORMATTING_RULES",
    "FormattingRule",
    "count_magnitude",
    "currency_grouped",
    "currency_magnitude",
    "format_growth_rate",
    "format_number_plain",
    "format_value",
    "get_metric_rule",
    "group_thousands",
    "register_formatting_rule",
    "register_metric_format",
    "round_half_up",
]
