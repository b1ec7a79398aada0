"""Tests for the pandas analysis helpers and history export."""

from __future__ import annotations

import csv
import json
from datetime import timedelta

from conftest import NOW, make_entry
from stressless.research.analysis import compute_summary, daily_means, history_to_dataframe
from stressless.research.export import export_history_csv, export_history_json


def _history():
    return [
        make_entry(6.0, when=NOW),
        make_entry(2.0, when=NOW - timedelta(days=1, hours=2)),
        make_entry(4.0, when=NOW - timedelta(days=1)),
    ]


class TestAnalysis:
    def test_dataframe_sorted_by_time(self):
        df = history_to_dataframe(_history())
        assert list(df["score"]) == [2.0, 4.0, 6.0]
        assert {"heart_rate", "step_count", "q1", "q5"} <= set(df.columns)

    def test_empty_dataframe(self):
        df = history_to_dataframe([])
        assert df.empty
        assert compute_summary(df) == {"count": 0}
        assert daily_means(df).empty

    def test_summary(self):
        summary = compute_summary(history_to_dataframe(_history()))
        assert summary["count"] == 3
        assert summary["mean"] == 4.0
        assert summary["min"] == 2.0
        assert summary["max"] == 6.0
        assert summary["median"] == 4.0

    def test_daily_means(self):
        means = daily_means(history_to_dataframe(_history()))
        assert list(means) == [3.0, 6.0]


class TestExport:
    def test_csv(self, tmp_path):
        path = export_history_csv(_history(), tmp_path / "out" / "history.csv")
        with path.open(encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [float(r["stress_score"]) for r in rows] == [2.0, 4.0, 6.0]
        assert rows[0]["q3"] == "5"

    def test_json_matches_stored_shape(self, tmp_path):
        path = export_history_json(_history(), tmp_path / "history.json")
        records = json.loads(path.read_text(encoding="utf-8"))
        assert len(records) == 3
        assert "stressScore" in records[0]
