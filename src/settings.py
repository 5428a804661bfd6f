"""
Runtime settings for the economic indicator dashboard.

Values are resolved from environment variables (optionally seeded from a
local ``.env`` file via ``env_loader``). Every field has a default so the
dashboard runs locally without any configuration.

Environment variables
---------------------

- WORLD_BANK_API_BASE_URL    Base URL of the World Bank v2 API.
- WORLD_BANK_TIMEOUT_SECONDS Request timeout passed to requests.
- DASHBOARD_DEFAULT_COUNTRY  Two-letter country code selected at start.
- DASHBOARD_DEFAULT_METRIC   Metric id selected at start (GDP, GDPPC, POP).
- DASHBOARD_DEFAULT_PERIOD   Number of most recent years requested.
- DASHBOARD_EXPORT_DIR       Local root for CSV/PNG artefacts.
- PIPELINE_S3_BUCKET         Optional bucket used by the cloud entrypoint.
- PIPELINE_S3_BASE_PREFIX    Optional key prefix under the bucket.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from env_loader import load_dotenv_if_present

WORLD_BANK_API_BASE_URL_ENV = "WORLD_BANK_API_BASE_URL"
WORLD_BANK_TIMEOUT_SECONDS_ENV = "WORLD_BANK_TIMEOUT_SECONDS"
DASHBOARD_DEFAULT_COUNTRY_ENV = "DASHBOARD_DEFAULT_COUNTRY"
DASHBOARD_DEFAULT_METRIC_ENV = "DASHBOARD_DEFAULT_METRIC"
DASHBOARD_DEFAULT_PERIOD_ENV = "DASHBOARD_DEFAULT_PERIOD"
DASHBOARD_EXPORT_DIR_ENV = "DASHBOARD_EXPORT_DIR"
PIPELINE_S3_BUCKET_ENV = "PIPELINE_S3_BUCKET"
PIPELINE_S3_BASE_PREFIX_ENV = "PIPELINE_S3_BASE_PREFIX"

DEFAULT_WORLD_BANK_API_BASE_URL = "https://api.worldbank.org/v2"
DEFAULT_TIMEOUT_SECONDS = 30


def _int_or_default(raw: Optional[str], default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    world_bank_base_url: str = DEFAULT_WORLD_BANK_API_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    default_country: str = "IN"
    default_metric: str = "GDP"
    default_period: int = 10
    export_dir: str = "exports"
    s3_bucket: Optional[str] = None
    s3_base_prefix: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        load_dotenv: bool = True,
    ) -> "Settings":
        if environ is None:
            if load_dotenv:
                load_dotenv_if_present()
            environ = os.environ

        return cls(
            world_bank_base_url=(
                environ.get(WORLD_BANK_API_BASE_URL_ENV) or DEFAULT_WORLD_BANK_API_BASE_URL
            ).rstrip("/"),
            timeout_seconds=_int_or_default(
                environ.get(WORLD_BANK_TIMEOUT_SECONDS_ENV), DEFAULT_TIMEOUT_SECONDS
            ),
            default_country=environ.get(DASHBOARD_DEFAULT_COUNTRY_ENV) or "IN",
            default_metric=environ.get(DASHBOARD_DEFAULT_METRIC_ENV) or "GDP",
            default_period=_int_or_default(environ.get(DASHBOARD_DEFAULT_PERIOD_ENV), 10),
            export_dir=environ.get(DASHBOARD_EXPORT_DIR_ENV) or "exports",
            s3_bucket=environ.get(PIPELINE_S3_BUCKET_ENV) or None,
            s3_base_prefix=environ.get(PIPELINE_S3_BASE_PREFIX_ENV) or None,
        )


__all__ = ["Settings"]
