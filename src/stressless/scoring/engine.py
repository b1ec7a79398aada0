"""Score engine — fixed linear weighting of survey answers and heart rate.

The score is a static weighted sum, not a trained model:

=================  ===========  ==============================
Input              Weight       Notes
=================  ===========  ==============================
Q1 stress level    0.30
Q2 relax           0.20
Q3 sleep quality   0.15         inverted: ``10 - rating``
Q4 irritability    0.20
Q5 focus           0.15
Heart rate         0.01         per BPM above a 70 BPM resting baseline
=================  ===========  ==============================

The weighted sum is clamped to [0, 10], a small uniform noise term is added,
and the result is clamped again.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any, Protocol

import structlog

from stressless.models import SensorSnapshot, Submission

logger = structlog.get_logger(__name__)

# ── Model constants ───────────────────────────────────────────

WEIGHTS = {
    "stress_level": 0.3,
    "relax_difficulty": 0.2,
    "sleep_quality": 0.15,
    "irritability": 0.2,
    "focus_difficulty": 0.15,
    "heart_rate": 0.01,
}

RESTING_HEART_RATE = 70.0
SCORE_MIN = 0.0
SCORE_MAX = 10.0
NOISE_AMPLITUDE = 0.25
NEUTRAL_SCORE = 5.0

HIGH_ACTIVITY_STEPS = 10_000


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return max(low, min(high, value))


def weighted_sum(responses: Mapping[int, int], heart_rate: float) -> float:
    """Unclamped, noise-free linear score."""
    w = WEIGHTS
    raw = responses[1] * w["stress_level"]
    raw += responses[2] * w["relax_difficulty"]
    raw += (10 - responses[3]) * w["sleep_quality"]
    raw += responses[4] * w["irritability"]
    raw += responses[5] * w["focus_difficulty"]
    raw += (heart_rate - RESTING_HEART_RATE) * w["heart_rate"]
    return raw


def process_sensor_data(snapshot: SensorSnapshot) -> dict[str, Any]:
    """Derive coarse sensor features (not used by the score itself)."""
    return {
        "normalized_heart_rate": snapshot.heart_rate / 100,
        "activity_level": "high" if snapshot.step_count > HIGH_ACTIVITY_STEPS else "moderate",
    }


class ScoreEngine:
    """Convert one submission into a stress score in [0, 10].

    Parameters
    ----------
    rng:
        Source of the noise term; anything with ``uniform(a, b)``.
        Defaults to a fresh :class:`random.Random`.
    noise_amplitude:
        Half-width of the uniform noise added after the first clamp.
    fallback:
        Score returned when the submission cannot be processed.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        noise_amplitude: float = NOISE_AMPLITUDE,
        fallback: float = NEUTRAL_SCORE,
    ) -> None:
        self._rng = rng or random.Random()
        self._noise_amplitude = noise_amplitude
        self._fallback = fallback

    def score(self, submission: Submission | Mapping[str, Any]) -> float:
        """Score *submission*; never raises.

        Raw mappings are validated first, so a payload missing
        ``surveyResponses``/``sensorData`` or any of the five answers
        falls back to the neutral score.
        """
        try:
            if not isinstance(submission, Submission):
                submission = Submission.model_validate(submission)
            raw = clamp(weighted_sum(submission.survey_responses, submission.sensor_data.heart_rate))
            raw += self._rng.uniform(-self._noise_amplitude, self._noise_amplitude)
            result = clamp(raw)
        except Exception as exc:
            logger.error("score_engine.prediction_failed", error=str(exc))
            return self._fallback

        logger.debug("score_engine.scored", score=round(result, 3))
        return result
