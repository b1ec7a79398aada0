"""Analysis helpers — pandas-based views over the stress history."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from stressless.models import QUESTION_IDS, StressEntry

COLUMNS = ["score", "heart_rate", "step_count", *[f"q{q}" for q in QUESTION_IDS]]


def history_to_dataframe(history: Sequence[StressEntry]) -> pd.DataFrame:
    """Load the history into a :class:`pandas.DataFrame`.

    Columns: ``score``, ``heart_rate``, ``step_count``, ``q1`` .. ``q5``.
    The ``timestamp`` column is set as the index and sorted.
    """
    records = [
        {
            "timestamp": e.timestamp,
            "score": e.stress_score,
            "heart_rate": e.sensor_data.heart_rate,
            "step_count": e.sensor_data.step_count,
            **{f"q{q}": e.survey_responses.get(q) for q in QUESTION_IDS},
        }
        for e in history
    ]
    df = pd.DataFrame(records, columns=["timestamp", *COLUMNS])
    if not df.empty:
        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
        df = df.set_index("timestamp").sort_index()
    return df


def compute_summary(df: pd.DataFrame) -> dict[str, Any]:
    """Return summary statistics for the ``score`` column."""
    if df.empty or "score" not in df.columns:
        return {"count": 0}

    scores = df["score"]
    return {
        "count": int(scores.count()),
        "mean": round(float(scores.mean()), 2),
        "std": round(float(scores.std()), 2) if scores.count() > 1 else 0.0,
        "min": float(scores.min()),
        "max": float(scores.max()),
        "median": float(scores.median()),
    }


def daily_means(df: pd.DataFrame) -> pd.Series:
    """Mean score per calendar day (UTC); days without entries are dropped."""
    if df.empty:
        return pd.Series(dtype=float, name="score")
    return df["score"].resample("1D").mean().dropna()
