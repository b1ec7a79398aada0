"""Submission and dashboard flows.

:class:`AssessmentService` turns a completed survey into a persisted
:class:`StressEntry`; :class:`DashboardService` loads the history, merges a
freshly submitted entry and derives insights.  Both take their collaborators
(store, sensor, clock, random source) as constructor arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

import structlog
from pydantic import ValidationError

from stressless.config import Settings, get_settings
from stressless.dashboard import DashboardView, summarize
from stressless.errors import StorageError, SubmissionError
from stressless.insights.engine import InsightEngine, compute_trend
from stressless.models import SensorSnapshot, StressEntry, Submission, SurveyResponses, utc_now
from stressless.scoring.engine import RandomSource, ScoreEngine
from stressless.sensors.base import BaseSensor
from stressless.storage.repository import HistoryRepository

logger = structlog.get_logger(__name__)


class AssessmentService:
    """Score a survey submission and record it."""

    def __init__(
        self,
        repository: HistoryRepository,
        sensor: BaseSensor,
        *,
        engine: ScoreEngine | None = None,
        clock: Callable[[], datetime] = utc_now,
        rng: RandomSource | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._repository = repository
        self._sensor = sensor
        self._clock = clock
        self._engine = engine or ScoreEngine(
            rng=rng,
            noise_amplitude=settings.score_noise_amplitude,
            fallback=settings.score_fallback,
        )

    async def submit(
        self,
        responses: SurveyResponses,
        snapshot: SensorSnapshot | None = None,
    ) -> StressEntry:
        """Score *responses*, persist the new entry and return it.

        Raises :class:`SubmissionError` if the entry cannot be built or the
        stored history cannot be read; nothing is written in that case.  A
        failed write is logged by the repository and does not raise.
        """
        try:
            if snapshot is None:
                snapshot = await self._sensor.read()
            submission = Submission(
                survey_responses=responses,
                sensor_data=snapshot,
                timestamp=self._clock(),
            )
            score = self._engine.score(submission)
            entry = StressEntry.from_submission(submission, score)
        except (ValidationError, ValueError, TypeError) as exc:
            logger.error("assessment.submit_failed", error=str(exc))
            raise SubmissionError() from exc

        try:
            await self._repository.add(entry)
        except StorageError as exc:
            raise SubmissionError() from exc
        logger.info("assessment.submitted", entry_id=entry.id, score=round(entry.stress_score, 2))
        return entry


class DashboardService:
    """Assemble the dashboard view from the stored history."""

    def __init__(
        self,
        repository: HistoryRepository,
        *,
        insight_engine: InsightEngine | None = None,
        clock: Callable[[], datetime] = utc_now,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._repository = repository
        self._clock = clock
        self._window = timedelta(days=settings.insights_trend_window_days)
        self._insights = insight_engine or InsightEngine(
            clock=clock,
            max_insights=settings.insights_max,
            trend_window=self._window,
            emit_stable_trend=settings.insights_emit_stable_trend,
        )

    async def open(self, new_entry: StressEntry | None = None) -> DashboardView:
        if new_entry is None:
            history = await self._repository.load()
        else:
            try:
                history = await self._repository.add(new_entry)
            except StorageError:
                # unreadable store: show the new entry, leave storage untouched
                history = [new_entry]

        insights = self._insights.derive(history)
        trend = compute_trend(history, self._clock(), self._window) if history else None
        return DashboardView(
            entries=history,
            insights=insights,
            summary=summarize(history, insights, trend),
        )
