"""Insight engine — rule-based advisory messages over the stress history.

Rules run in a fixed order and each contributes at most one insight:

1. threshold on the latest score (high / low / moderate, always fires)
2. poor sleep (latest Q3 < 4)
3. focus difficulty (latest Q5 > 7)
4. elevated heart rate (latest > 85 BPM)
5. weekly trend (>= 3 entries in the window, half-vs-half means)
6. comparison to the all-time average (>= 5 entries, +/- 2 points)

The output keeps the first ``max_insights`` in generation order; this is a
priority order, not a severity ranking.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from statistics import fmean

import structlog

from stressless.insights import catalog
from stressless.models import Insight, StressEntry, TrendDirection, utc_now

logger = structlog.get_logger(__name__)

# ── Thresholds ────────────────────────────────────────────────

HIGH_STRESS_SCORE = 7.0
LOW_STRESS_SCORE = 3.0
POOR_SLEEP_RATING = 4
FOCUS_DIFFICULTY_RATING = 7
ELEVATED_HEART_RATE = 85.0

TREND_MIN_ENTRIES = 3
TREND_DELTA = 1.0
AVERAGE_MIN_ENTRIES = 5
AVERAGE_DELTA = 2.0

SLEEP_QUESTION = 3
FOCUS_QUESTION = 5

MAX_INSIGHTS = 3
TREND_WINDOW = timedelta(days=7)


def latest_entry(history: Sequence[StressEntry]) -> StressEntry:
    """Entry with the greatest timestamp; the earliest-listed wins ties."""
    return max(history, key=lambda e: e.timestamp)


def recent_entries(
    history: Sequence[StressEntry],
    now: datetime,
    window: timedelta = TREND_WINDOW,
) -> list[StressEntry]:
    """Entries dated on or after ``now - window`` (future-dated included)."""
    cutoff = now - window
    return [e for e in history if e.timestamp >= cutoff]


def compute_trend(
    history: Sequence[StressEntry],
    now: datetime,
    window: timedelta = TREND_WINDOW,
) -> TrendDirection | None:
    """Compare mean scores of the older and newer half of the recent window.

    Returns ``None`` when fewer than three entries fall in the window.
    With an odd count the extra entry goes to the newer half.
    """
    recent = recent_entries(history, now, window)
    if len(recent) < TREND_MIN_ENTRIES:
        return None

    ordered = sorted(recent, key=lambda e: e.timestamp)
    mid = len(ordered) // 2
    first = fmean(e.stress_score for e in ordered[:mid])
    second = fmean(e.stress_score for e in ordered[mid:])

    if second - first > TREND_DELTA:
        return TrendDirection.INCREASING
    if first - second > TREND_DELTA:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


class InsightEngine:
    """Derive a short list of insights from the full stress history.

    Parameters
    ----------
    clock:
        Returns "now"; used for the trend window.
    max_insights:
        Cap applied after all rules have run.
    trend_window:
        Look-back period for the trend rule.
    emit_stable_trend:
        Whether a stable trend yields its own insight.  Off by default, in
        which case a stable trend is computed but never shown.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        max_insights: int = MAX_INSIGHTS,
        trend_window: timedelta = TREND_WINDOW,
        emit_stable_trend: bool = False,
    ) -> None:
        self._clock = clock
        self._max_insights = max_insights
        self._trend_window = trend_window
        self._emit_stable_trend = emit_stable_trend

    def derive(self, history: Sequence[StressEntry]) -> list[Insight]:
        if not history:
            return []

        latest = latest_entry(history)
        score = latest.stress_score
        insights: list[Insight] = [self._threshold_insight(score)]

        sleep = latest.survey_responses.get(SLEEP_QUESTION)
        if sleep is not None and sleep < POOR_SLEEP_RATING:
            insights.append(catalog.POOR_SLEEP)

        focus = latest.survey_responses.get(FOCUS_QUESTION)
        if focus is not None and focus > FOCUS_DIFFICULTY_RATING:
            insights.append(catalog.FOCUS_ISSUES)

        if latest.sensor_data.heart_rate > ELEVATED_HEART_RATE:
            insights.append(catalog.ELEVATED_HEART_RATE)

        trend = compute_trend(history, self._clock(), self._trend_window)
        if trend is TrendDirection.INCREASING:
            insights.append(catalog.INCREASING_TREND)
        elif trend is TrendDirection.DECREASING:
            insights.append(catalog.DECREASING_TREND)
        elif trend is TrendDirection.STABLE and self._emit_stable_trend:
            insights.append(catalog.STABLE_TREND)

        if len(history) >= AVERAGE_MIN_ENTRIES:
            average = fmean(e.stress_score for e in history)
            if score > average + AVERAGE_DELTA:
                insights.append(catalog.above_average(score, average))
            elif score < average - AVERAGE_DELTA:
                insights.append(catalog.below_average(score, average))

        selected = insights[: self._max_insights]
        logger.info(
            "insights.derived",
            entries=len(history),
            generated=[i.id for i in insights],
            kept=len(selected),
            trend=trend.value if trend else None,
        )
        return selected

    @staticmethod
    def _threshold_insight(score: float) -> Insight:
        if score > HIGH_STRESS_SCORE:
            return catalog.HIGH_STRESS
        if score < LOW_STRESS_SCORE:
            return catalog.LOW_STRESS
        return catalog.MODERATE_STRESS
