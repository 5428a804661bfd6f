"""
Cloud entrypoint: CSV download endpoint behind API Gateway + Lambda.

Configure your Lambda to use:

    Handler: cloud_pipeline.lambda_handler

The request query string selects the series:

    GET /export?country=IN&metric=GDP&years=10

and the response body is the CSV export with ``Content-Type: text/csv``
and a ``Content-Disposition`` attachment filename of the form
``<Country>-<Metric>-<Year>.csv``.

Environment variables
---------------------

- PIPELINE_S3_BUCKET (optional)
    When set, every generated CSV is also stored in this bucket under
    ``exports/``.

- PIPELINE_S3_BASE_PREFIX (optional)
    Logical base prefix under the bucket.

- WORLD_BANK_API_BASE_URL / WORLD_BANK_TIMEOUT_SECONDS (optional)
    See ``settings``.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Dict, Optional

from adapters import S3StorageAdapter, StorageAdapter
from common.errors import EmptyResultError, NoValidDataError, SeriesPipelineError, TransportError
from dashboard import Selection, SeriesProvider, run_analysis_cycle
from export import CSV_MIME_TYPE, export_filename, save_csv_export, to_csv
from ingestion_api import WorldBankClient
from settings import Settings

logger = logging.getLogger(__name__)


def _json_response(status_code: int, message: str) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"message": message}),
    }


def _status_for_error(exc: SeriesPipelineError) -> int:
    if isinstance(exc, TransportError):
        return 502
    if isinstance(exc, (EmptyResultError, NoValidDataError)):
        return 404
    return 500


def _build_s3_storage(settings: Settings) -> Optional[S3StorageAdapter]:
    if not settings.s3_bucket:
        return None
    return S3StorageAdapter(bucket=settings.s3_bucket, base_prefix=settings.s3_base_prefix)


def parse_selection(event: Optional[Dict[str, Any]], settings: Settings) -> Selection:
    params = (event or {}).get("queryStringParameters") or {}
    years_raw = params.get("years")
    try:
        period_count = int(years_raw) if years_raw else settings.default_period
    except ValueError:
        raise ValueError(f"Invalid 'years' parameter: {years_raw!r}") from None
    if period_count <= 0:
        raise ValueError(f"Invalid 'years' parameter: {years_raw!r}")

    return Selection(
        country_code=str(params.get("country") or settings.default_country).upper(),
        metric_id=str(params.get("metric") or settings.default_metric).upper(),
        period_count=period_count,
    )


def handle_export_request(
    event: Optional[Dict[str, Any]],
    *,
    settings: Optional[Settings] = None,
    client: Optional[SeriesProvider] = None,
    storage: Optional[StorageAdapter] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    settings = settings or Settings.from_env()

    try:
        selection = parse_selection(event, settings)
    except ValueError as exc:
        return _json_response(400, str(exc))

    client = client or WorldBankClient(settings.world_bank_base_url, timeout=settings.timeout_seconds)

    try:
        result = run_analysis_cycle(client, selection)
    except KeyError as exc:
        return _json_response(400, str(exc.args[0]) if exc.args else "Unknown selection")
    except SeriesPipelineError as exc:
        logger.info("Export failed for %s: %s", selection, exc)
        return _json_response(_status_for_error(exc), str(exc))

    country_name = result.country.name
    metric_name = result.metric.display_name
    filename = export_filename(country_name, metric_name, today=today)
    body = to_csv(result.series, country_name, metric_name)

    storage = storage or _build_s3_storage(settings)
    if storage is not None:
        location = save_csv_export(storage, result.series, country_name, metric_name, today=today)
        logger.info("Stored export at %s", location)

    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": f"{CSV_MIME_TYPE};charset=utf-8",
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
        "body": body,
    }


def lambda_handler(event, context):  # pragma: no cover - AWS entrypoint
    """AWS Lambda handler; all configuration comes from environment variables."""
    return handle_export_request(event)


__all__ = ["handle_export_request", "lambda_handler", "parse_selection"]
