"""
Common helpers
--------------

Shared building blocks used across ingestion, transformation and
presentation layers.
"""

from .errors import (  # noqa: F401
    EmptyResultError,
    NoValidDataError,
    SeriesPipelineError,
    TransportError,
)

__all__ = [
    "SeriesPipelineError",
    "TransportError",
    "EmptyResultError",
    "NoValidDataError",
]
