"""
World Bank API client for single-country indicator time series.

One call issues exactly one GET:

    GET {base_url}/country/{country}/indicator/{indicator}?format=json&per_page={n}

The API answers with a two-element envelope ``[metadata, records]``. The
records are returned untouched (possibly unordered, possibly with null
values) as ``RawPoint`` objects; cleaning is the normalizer's job.

There is no retry and no caching here: a failed request ends the current
analysis cycle and the caller decides whether to refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests

from common.errors import EmptyResultError, TransportError
from settings import DEFAULT_TIMEOUT_SECONDS, DEFAULT_WORLD_BANK_API_BASE_URL

logger = logging.getLogger(__name__)

USER_AGENT = "economic-indicator-dashboard/0.1"


@dataclass(frozen=True)
class RawPoint:
    """One provider record: ``date`` is the year as text, ``value`` may be None."""

    date: str
    value: Optional[float]


class WorldBankClient:
    def __init__(
        self,
        base_url: str = DEFAULT_WORLD_BANK_API_BASE_URL,
        *,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def build_url(self, country_code: str, indicator_code: str) -> str:
        return f"{self.base_url}/country/{country_code}/indicator/{indicator_code}"

    def fetch_envelope(
        self,
        country_code: str,
        indicator_code: str,
        period_count: int,
    ) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """
        Fetch the raw ``(metadata, records)`` pair.

        Raises TransportError on network failures, non-2xx statuses and
        bodies that are not a JSON list; EmptyResultError when the record
        list is absent or empty.
        """
        if period_count <= 0:
            raise ValueError(f"period_count must be a positive integer, got {period_count!r}")

        url = self.build_url(country_code, indicator_code)
        params = {"format": "json", "per_page": period_count}
        logger.debug("GET %s params=%s", url, params)

        try:
            response = self._session.get(
                url,
                params=params,
                headers={"User-Agent": USER_AGENT},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"Request to World Bank API failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError("World Bank API returned a non-JSON body") from exc

        if not isinstance(payload, list):
            raise TransportError(f"Unexpected response from World Bank API: {payload!r}")

        # Invalid parameters come back as a one-element list carrying only
        # an error message, i.e. no record list at all.
        if len(payload) < 2 or not payload[1]:
            raise EmptyResultError("No data available for selected parameters")

        metadata, records = payload[0], payload[1]
        if not isinstance(records, list):
            raise TransportError(f"Unexpected structure from World Bank API: {payload!r}")
        if not isinstance(metadata, dict):
            metadata = {}

        return metadata, records

    def fetch(self, country_code: str, indicator_code: str, period_count: int) -> List[RawPoint]:
        _, records = self.fetch_envelope(country_code, indicator_code, period_count)
        points = [
            RawPoint(date=str(record.get("date")), value=record.get("value"))
            for record in records
            if isinstance(record, dict)
        ]
        logger.debug(
            "Fetched %d records for country=%s indicator=%s",
            len(points),
            country_code,
            indicator_code,
        )
        return points


def fetch_indicator_series(
    country_code: str,
    indicator_code: str,
    period_count: int,
    *,
    client: Optional[WorldBankClient] = None,
) -> List[RawPoint]:
    """Convenience wrapper around ``WorldBankClient.fetch``."""
    client = client or WorldBankClient()
    return client.fetch(country_code, indicator_code, period_count)


__all__ = ["RawPoint", "USER_AGENT", "WorldBankClient", "fetch_indicator_series"]
