"""Tests for the shared data models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from conftest import make_entry
from stressless.models import SensorSnapshot, StressEntry, Submission


class TestModels:
    def test_naive_timestamps_are_utc(self):
        snapshot = SensorSnapshot(heart_rate=70, timestamp=datetime(2026, 1, 1, 8, 0))
        assert snapshot.timestamp.tzinfo is timezone.utc

    def test_entry_is_immutable(self):
        entry = make_entry(5.0)
        with pytest.raises(ValidationError):
            entry.stress_score = 1.0

    def test_score_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            make_entry(10.5)

    def test_unknown_question_rejected(self):
        with pytest.raises(ValidationError, match="unknown question id"):
            Submission(survey_responses={6: 1}, sensor_data=SensorSnapshot(heart_rate=70))

    def test_id_is_epoch_milliseconds(self):
        when = datetime(2026, 3, 15, 12, 0, 0, 250000, tzinfo=timezone.utc)
        submission = Submission(
            survey_responses={1: 5, 2: 5, 3: 5, 4: 5, 5: 5},
            sensor_data=SensorSnapshot(heart_rate=70, timestamp=when),
            timestamp=when,
        )
        entry = StressEntry.from_submission(submission, 4.0)
        assert entry.id == str(int(when.timestamp() * 1000))
        assert entry.id.endswith("250")

    def test_accepts_snake_and_camel_names(self):
        a = SensorSnapshot(heart_rate=70, step_count=5)
        b = SensorSnapshot.model_validate({"heartRate": 70, "stepCount": 5, "timestamp": a.timestamp})
        assert a == b
