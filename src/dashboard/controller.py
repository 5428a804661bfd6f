"""
Dashboard controller: owns the selection and the displayed state.

Every selection change or refresh starts a new analysis cycle on a worker
thread. Cycles are never cancelled; instead each one carries the
generation number and selection it was started with, and its outcome is
applied only if both still match the controller when it finishes. A slow
cycle that finishes after a newer one is therefore discarded (last write
wins).

    controller = DashboardController(WorldBankClient())
    controller.select(country_code="BR").result()
    controller.state.result.latest_display
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from common.errors import SeriesPipelineError
from settings import Settings

from .cycle import AnalysisResult, Selection, SeriesProvider, run_analysis_cycle

logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    selection: Selection
    loading: bool = False
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    last_updated: Optional[datetime] = None


@dataclass(frozen=True)
class _CycleTicket:
    generation: int
    selection: Selection


class DashboardController:
    def __init__(
        self,
        client: SeriesProvider,
        selection: Optional[Selection] = None,
        *,
        executor: Optional[Executor] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        if selection is None:
            settings = settings or Settings()
            selection = Selection(
                country_code=settings.default_country,
                metric_id=settings.default_metric,
                period_count=settings.default_period,
            )

        self._client = client
        self._lock = threading.Lock()
        self._generation = 0
        self._state = DashboardState(selection=selection)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=4,
            thread_name_prefix="dashboard-cycle",
        )

    def __enter__(self) -> "DashboardController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def state(self) -> DashboardState:
        """Snapshot copy of the current state."""
        with self._lock:
            return replace(self._state)

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def select(
        self,
        *,
        country_code: Optional[str] = None,
        metric_id: Optional[str] = None,
        period_count: Optional[int] = None,
    ) -> "Future[bool]":
        """Change any part of the selection and start a new cycle."""
        with self._lock:
            current = self._state.selection
            self._state.selection = Selection(
                country_code=country_code or current.country_code,
                metric_id=metric_id or current.metric_id,
                period_count=period_count or current.period_count,
            )
            ticket = self._begin_cycle_locked()
        return self._executor.submit(self._run_cycle, ticket)

    def refresh(self) -> "Future[bool]":
        """Re-run the pipeline for the current selection."""
        with self._lock:
            ticket = self._begin_cycle_locked()
        return self._executor.submit(self._run_cycle, ticket)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def _begin_cycle_locked(self) -> _CycleTicket:
        self._generation += 1
        self._state.loading = True
        self._state.error = None
        return _CycleTicket(generation=self._generation, selection=self._state.selection)

    def _run_cycle(self, ticket: _CycleTicket) -> bool:
        """Run one cycle; returns True when its outcome reached the state."""
        try:
            result = run_analysis_cycle(self._client, ticket.selection)
        except SeriesPipelineError as exc:
            logger.info("Analysis cycle %d failed: %s", ticket.generation, exc)
            return self._apply(ticket, error=str(exc))
        except Exception as exc:
            logger.exception("Unexpected failure in analysis cycle %d", ticket.generation)
            self._apply(ticket, error=f"Unexpected error: {exc}")
            raise
        return self._apply(ticket, result=result)

    def _apply(
        self,
        ticket: _CycleTicket,
        *,
        result: Optional[AnalysisResult] = None,
        error: Optional[str] = None,
    ) -> bool:
        with self._lock:
            if ticket.generation != self._generation or ticket.selection != self._state.selection:
                logger.warning(
                    "Discarding superseded cycle %d for %s (current cycle %d)",
                    ticket.generation,
                    ticket.selection,
                    self._generation,
                )
                return False

            self._state.loading = False
            if error is not None:
                self._state.error = error
                self._state.result = None
                return True

            self._state.error = None
            self._state.result = result
            self._state.last_updated = result.fetched_at if result is not None else None
            logger.info(
                "Analysis cycle %d completed for %s (%d points)",
                ticket.generation,
                ticket.selection,
                len(result.series) if result is not None else 0,
            )
            return True


__all__ = ["DashboardController", "DashboardState"]
