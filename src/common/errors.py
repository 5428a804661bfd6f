from __future__ import annotations

from typing import Optional


class SeriesPipelineError(Exception):
    """
    Base class for failures that terminate one analysis cycle.

    None of these are retried automatically; the caller may re-run the
    whole cycle (manual refresh).
    """


class TransportError(SeriesPipelineError):
    """Network failure or non-success HTTP status from the data provider."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResultError(SeriesPipelineError):
    """The provider answered successfully but returned zero records."""


class NoValidDataError(SeriesPipelineError):
    """Records were returned but every one of them had a null value."""


__all__ = [
    "SeriesPipelineError",
    "TransportError",
    "EmptyResultError",
    "NoValidDataError",
]
