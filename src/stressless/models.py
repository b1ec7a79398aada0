"""Shared Pydantic models used across the app.

Field names serialise in camelCase so that stored history stays readable by
the mobile client (``surveyResponses``, ``sensorData``, ``stressScore``).
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

QUESTION_IDS = (1, 2, 3, 4, 5)
RATING_MIN = 0
RATING_MAX = 10

# question id -> slider rating
SurveyResponses = dict[int, int]


def utc_now() -> datetime:
    """Default clock: current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def one_decimal(value: float) -> Decimal:
    """Round to one place, half away from zero on the exact binary value.

    Matches how the mobile client formats scores (``5.25`` -> ``5.3``).
    """
    return Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _check_responses(responses: SurveyResponses) -> SurveyResponses:
    for question_id, rating in responses.items():
        if question_id not in QUESTION_IDS:
            raise ValueError(f"unknown question id {question_id}")
        if not RATING_MIN <= rating <= RATING_MAX:
            raise ValueError(
                f"rating for question {question_id} must be in "
                f"[{RATING_MIN}, {RATING_MAX}], got {rating}"
            )
    return responses


# ── Enums ─────────────────────────────────────────────────────

class TrendDirection(str, Enum):
    """Direction of the recent stress trend."""
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class StressCategory(str, Enum):
    NO_DATA = "No data"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


# ── Data transfer objects ─────────────────────────────────────

class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SensorSnapshot(_Record):
    """Heart rate and step count captured at submission time."""
    heart_rate: float
    step_count: int = 0
    timestamp: datetime = Field(default_factory=utc_now)

    @field_validator("timestamp")
    @classmethod
    def _utc_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)


class Submission(_Record):
    """One completed survey plus the sensor snapshot taken with it."""
    survey_responses: SurveyResponses
    sensor_data: SensorSnapshot
    timestamp: datetime = Field(default_factory=utc_now)

    @field_validator("survey_responses")
    @classmethod
    def _valid_responses(cls, value: SurveyResponses) -> SurveyResponses:
        return _check_responses(value)

    @field_validator("timestamp")
    @classmethod
    def _utc_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)


class StressEntry(_Record):
    """A scored submission as persisted in the history."""
    id: str
    timestamp: datetime
    survey_responses: SurveyResponses
    sensor_data: SensorSnapshot
    stress_score: float = Field(ge=0.0, le=10.0)

    @field_validator("survey_responses")
    @classmethod
    def _valid_responses(cls, value: SurveyResponses) -> SurveyResponses:
        return _check_responses(value)

    @field_validator("timestamp")
    @classmethod
    def _utc_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @classmethod
    def from_submission(cls, submission: Submission, score: float) -> StressEntry:
        """Build an entry whose id is the submission time in epoch milliseconds."""
        return cls(
            id=str(int(submission.timestamp.timestamp() * 1000)),
            timestamp=submission.timestamp,
            survey_responses=submission.survey_responses,
            sensor_data=submission.sensor_data,
            stress_score=score,
        )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Insight(_Record):
    """A short advisory message keyed by a fixed tag."""
    id: str
    title: str
    text: str
