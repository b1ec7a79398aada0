"""Tests for the dashboard summary helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW, make_entry
from stressless.dashboard import (
    ANALYZING_MESSAGE,
    INSIGHTS_INTRO,
    NO_DATA_MESSAGE,
    average_score,
    category_colour,
    chart_series,
    stress_category,
    summarize,
)
from stressless.insights.catalog import HIGH_STRESS, above_average, below_average
from stressless.models import StressCategory


class TestCategory:
    @pytest.mark.parametrize(
        ("score", "category", "colour"),
        [
            (None, StressCategory.NO_DATA, "#888"),
            (2.99, StressCategory.LOW, "#67B26F"),
            (3.0, StressCategory.MODERATE, "#F8D775"),
            (6.99, StressCategory.MODERATE, "#F8D775"),
            (7.0, StressCategory.HIGH, "#E74C3C"),
        ],
    )
    def test_bands(self, score, category, colour):
        assert stress_category(score) is category
        assert category_colour(category) == colour


class TestSummary:
    def test_average(self):
        assert average_score([]) == 0.0
        assert average_score([make_entry(2.0), make_entry(3.25, entry_id="x")]) == 2.7

    def test_average_rounds_half_up(self):
        history = [make_entry(5.0), make_entry(5.5, entry_id="x")]
        assert average_score(history) == 5.3

    def test_average_insight_text_rounds_half_up(self):
        assert "(5.3)" in above_average(5.25, 3.0).text
        assert "(0.3)" in below_average(0.25, 4.0).text

    def test_chart_keeps_last_seven_in_order(self):
        start = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
        history = [make_entry(float(i), when=start + timedelta(days=i)) for i in range(10)]
        points = chart_series(list(reversed(history)))
        assert [p.score for p in points] == [3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]
        assert points[0].label == "3/4"

    def test_empty(self):
        summary = summarize([], [])
        assert summary.latest_score is None
        assert summary.message == NO_DATA_MESSAGE
        assert summary.show_chart is False

    def test_messages(self):
        one = [make_entry(8.0)]
        assert summarize(one, []).message == ANALYZING_MESSAGE
        assert summarize(one, [HIGH_STRESS]).message == INSIGHTS_INTRO

    def test_latest_and_chart_flag(self):
        history = [make_entry(4.0, when=NOW), make_entry(6.0, when=NOW - timedelta(days=1))]
        summary = summarize(history, [HIGH_STRESS])
        assert summary.latest_score == 4.0
        assert summary.show_chart is True
        assert summary.category is StressCategory.MODERATE
