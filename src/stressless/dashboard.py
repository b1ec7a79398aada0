"""Dashboard summary — the numbers and labels shown next to the insights."""

from __future__ import annotations

from collections.abc import Sequence
from statistics import fmean

from pydantic import BaseModel, Field

from stressless.insights.engine import latest_entry
from stressless.models import Insight, StressCategory, StressEntry, TrendDirection, one_decimal

CHART_POINTS = 7

_CATEGORY_COLOURS = {
    StressCategory.NO_DATA: "#888",
    StressCategory.LOW: "#67B26F",
    StressCategory.MODERATE: "#F8D775",
    StressCategory.HIGH: "#E74C3C",
}

NO_DATA_MESSAGE = "Complete your first assessment to receive personalized insights"
ANALYZING_MESSAGE = (
    "Our AI is analyzing your data. Complete more assessments for personalized insights."
)
INSIGHTS_INTRO = (
    "Based on your responses and sensor data, our AI model has identified the "
    "following insights:"
)
CHART_PLACEHOLDER = "Complete more assessments to see your stress trend over time"


class ChartPoint(BaseModel):
    label: str
    score: float


class DashboardSummary(BaseModel):
    latest_score: float | None
    average_score: float
    category: StressCategory
    colour: str
    chart: list[ChartPoint] = Field(default_factory=list)
    show_chart: bool = False
    trend: TrendDirection | None = None
    message: str = NO_DATA_MESSAGE


class DashboardView(BaseModel):
    """Everything the dashboard renders for one load."""
    entries: list[StressEntry]
    insights: list[Insight]
    summary: DashboardSummary


def stress_category(score: float | None) -> StressCategory:
    if score is None:
        return StressCategory.NO_DATA
    if score < 3:
        return StressCategory.LOW
    if score < 7:
        return StressCategory.MODERATE
    return StressCategory.HIGH


def category_colour(category: StressCategory) -> str:
    return _CATEGORY_COLOURS[category]


def average_score(history: Sequence[StressEntry]) -> float:
    if not history:
        return 0.0
    return float(one_decimal(fmean(e.stress_score for e in history)))


def chart_series(history: Sequence[StressEntry], points: int = CHART_POINTS) -> list[ChartPoint]:
    """The last *points* entries in chronological order, labelled ``M/D``."""
    ordered = sorted(history, key=lambda e: e.timestamp)[-points:]
    return [
        ChartPoint(label=f"{e.timestamp.month}/{e.timestamp.day}", score=e.stress_score)
        for e in ordered
    ]


def summarize(
    history: Sequence[StressEntry],
    insights: Sequence[Insight],
    trend: TrendDirection | None = None,
) -> DashboardSummary:
    latest = latest_entry(history).stress_score if history else None
    category = stress_category(latest)

    if latest is None:
        message = NO_DATA_MESSAGE
    elif insights:
        message = INSIGHTS_INTRO
    else:
        message = ANALYZING_MESSAGE

    return DashboardSummary(
        latest_score=latest,
        average_score=average_score(history),
        category=category,
        colour=category_colour(category),
        chart=chart_series(history),
        show_chart=len(history) > 1,
        trend=trend,
        message=message,
    )
