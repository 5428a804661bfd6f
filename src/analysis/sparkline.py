"""
Sparkline projection into a normalized 100x100 viewport.

For ``n`` values with distinct min/max:

    x = i / (n - 1) * 100
    y = (max - value) / (max - min) * 80 + 10

so larger values plot higher and the curve stays inside the [10, 90]
band. Series that are too short or flat produce a ``DegenerateMarker``
instead of points, and the caller shows a placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Union

from formatting import format_number_plain

INSUFFICIENT_DATA = "insufficient-data"
NO_VARIATION = "no-variation"

DEFAULT_VIEWPORT_HEIGHT = 60
DEFAULT_COLOR = "#3b82f6"
POSITIVE_COLOR = "#10b981"
NEGATIVE_COLOR = "#ef4444"

_PLACEHOLDER_TEXT = {
    INSUFFICIENT_DATA: "Insufficient data",
    NO_VARIATION: "No variation",
}


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float


@dataclass(frozen=True)
class DegenerateMarker:
    reason: str
    # Sizing hint for the placeholder only; markers compare by reason.
    viewport_height: int = field(default=DEFAULT_VIEWPORT_HEIGHT, compare=False)


Projection = Union[List[PlotPoint], DegenerateMarker]


def _extract_value(item: Any) -> Optional[float]:
    if isinstance(item, dict):
        return item.get("value")
    if isinstance(item, (int, float)):
        return item
    return getattr(item, "value", None)


def project(
    sub_series: Iterable[Any],
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
) -> Projection:
    """
    Project series points (or bare numbers) to plot coordinates.

    Missing values are skipped before counting. The viewport height only
    sizes the placeholder; coordinates are always in the normalized box.
    """
    values = [v for v in (_extract_value(item) for item in sub_series) if v is not None]
    if len(values) < 2:
        return DegenerateMarker(INSUFFICIENT_DATA, viewport_height)

    low = min(values)
    high = max(values)
    span = high - low
    if span == 0:
        return DegenerateMarker(NO_VARIATION, viewport_height)

    last_index = len(values) - 1
    return [
        PlotPoint(
            x=index / last_index * 100,
            y=(high - value) / span * 80 + 10,
        )
        for index, value in enumerate(values)
    ]


def project_prefixes(
    series: List[Any],
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
) -> List[Projection]:
    """One projection per growing prefix ``series[:i + 1]``, recomputed each time."""
    return [project(series[: index + 1], viewport_height) for index in range(len(series))]


def points_attribute(points: Iterable[PlotPoint]) -> str:
    return " ".join(
        f"{format_number_plain(point.x)},{format_number_plain(point.y)}" for point in points
    )


def render_sparkline_svg(
    projection: Projection,
    *,
    color: str = DEFAULT_COLOR,
    height: Optional[int] = None,
) -> str:
    """Inline SVG (area + line) for a projection, or a placeholder div."""
    if isinstance(projection, DegenerateMarker):
        placeholder_height = height if height is not None else projection.viewport_height
        text = _PLACEHOLDER_TEXT.get(projection.reason, projection.reason)
        return (
            f'<div class="mini-chart-placeholder" style="height: {placeholder_height}px">'
            f'<span class="text-xs text-gray-400">{text}</span>'
            "</div>"
        )

    chart_height = height if height is not None else DEFAULT_VIEWPORT_HEIGHT
    points = points_attribute(projection)
    gradient_id = f"gradient-{color.lstrip('#')}"
    return (
        f'<div class="mini-chart" style="height: {chart_height}px">'
        '<svg width="100%" height="100%" viewBox="0 0 100 100" '
        'preserveAspectRatio="none" xmlns="http://www.w3.org/2000/svg">'
        f'<defs><linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="0%" y2="100%">'
        f'<stop offset="0%" stop-color="{color}" stop-opacity="0.3"/>'
        f'<stop offset="100%" stop-color="{color}" stop-opacity="0.1"/>'
        "</linearGradient></defs>"
        f'<polygon fill="url(#{gradient_id})" points="0,100 {points} 100,100"/>'
        f'<polyline fill="none" stroke="{color}" stroke-width="2" points="{points}" '
        'vector-effect="non-scaling-stroke"/>'
        "</svg></div>"
    )


__all__ = [
    "DEFAULT_VIEWPORT_HEIGHT",
    "DegenerateMarker",
    "INSUFFICIENT_DATA",
    "NEGATIVE_COLOR",
    "NO_VARIATION",
    "POSITIVE_COLOR",
    "PlotPoint",
    "Projection",
    "points_attribute",
    "project",
    "project_prefixes",
    "render_sparkline_svg",
]
