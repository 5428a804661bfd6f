"""
Provider ingestion
------------------

HTTP access to the World Bank indicator API.
"""

from .world_bank_client import (  # noqa: F401
    RawPoint,
    WorldBankClient,
    fetch_indicator_series,
)

__all__ = ["RawPoint", "WorldBankClient", "fetch_indicator_series"]
