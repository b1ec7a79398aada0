"""Rule-based insights over the stored stress history."""

from stressless.insights.engine import InsightEngine, compute_trend, latest_entry

__all__ = ["InsightEngine", "compute_trend", "latest_entry"]
