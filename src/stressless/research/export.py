"""History export for offline analysis."""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from pathlib import Path

import structlog

from stressless.models import QUESTION_IDS, StressEntry

logger = structlog.get_logger(__name__)


def export_history_csv(history: Sequence[StressEntry], output_path: str | Path) -> Path:
    """Write one row per entry, oldest first; returns the resolved output path."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    ordered = sorted(history, key=lambda e: e.timestamp)
    with output.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "timestamp", "stress_score", "heart_rate", "step_count",
                         *[f"q{q}" for q in QUESTION_IDS]])
        for e in ordered:
            writer.writerow([
                e.id, e.timestamp.isoformat(), e.stress_score,
                e.sensor_data.heart_rate, e.sensor_data.step_count,
                *[e.survey_responses.get(q, "") for q in QUESTION_IDS],
            ])

    logger.info("export.csv_written", path=str(output), rows=len(ordered))
    return output


def export_history_json(history: Sequence[StressEntry], output_path: str | Path) -> Path:
    """Write the history in its stored (camelCase) JSON shape."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    records = [e.to_json_dict() for e in history]
    with output.open("w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)

    logger.info("export.json_written", path=str(output), rows=len(records))
    return output
