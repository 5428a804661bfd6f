"""
Formatting layer
----------------

Metric-aware display strings for indicator values and growth rates.
"""

from .value_formatter import (  # noqa: F401
    FORMATTING_RULES,
    MISSING_DISPLAY,
    format_growth_rate,
    format_number_plain,
    format_value,
    group_thousands,
    register_formatting_rule,
    register_metric_format,
    round_half_up,
)

__all__ = [
    "FORMATTING_RULES",
    "MISSING_DISPLAY",
    "format_value",
    "format_growth_rate",
    "format_number_plain",
    "group_thousands",
    "register_formatting_rule",
    "register_metric_format",
    "round_half_up",
]
