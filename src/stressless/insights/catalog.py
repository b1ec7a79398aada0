"""Insight message catalogue, keyed by tag."""

from __future__ import annotations

from stressless.models import Insight, one_decimal

HIGH_STRESS = Insight(
    id="high-stress",
    title="🚨 High Stress Alert",
    text=(
        "Your stress levels are significantly elevated. Consider taking breaks "
        "and practicing deep breathing or meditation."
    ),
)

LOW_STRESS = Insight(
    id="low-stress",
    title="✅ Great Job!",
    text=(
        "Your stress levels are low. Keep up the good work with your stress "
        "management techniques!"
    ),
)

MODERATE_STRESS = Insight(
    id="moderate-stress",
    title="⚠️ Moderate Stress",
    text=(
        "Your stress is at a moderate level. Try to incorporate more relaxation "
        "activities in your daily routine."
    ),
)

POOR_SLEEP = Insight(
    id="poor-sleep",
    title="💤 Sleep Focus Needed",
    text=(
        "Your sleep quality appears to be affecting your stress levels. Try "
        "establishing a regular sleep schedule and avoiding screens before bedtime."
    ),
)

FOCUS_ISSUES = Insight(
    id="focus-issues",
    title="🎯 Concentration Challenges",
    text=(
        "You're having difficulty focusing. Try breaking tasks into smaller chunks "
        "and taking short breaks between focused work sessions."
    ),
)

ELEVATED_HEART_RATE = Insight(
    id="elevated-heart-rate",
    title="❤️ Elevated Heart Rate",
    text=(
        "Your heart rate is higher than usual. Consider incorporating more physical "
        "activity or relaxation techniques to help regulate it."
    ),
)

INCREASING_TREND = Insight(
    id="increasing-trend",
    title="📈 Increasing Stress Trend",
    text=(
        "Your stress levels have been rising over the past week. Try to identify "
        "any new stressors in your life and address them early."
    ),
)

DECREASING_TREND = Insight(
    id="decreasing-trend",
    title="📉 Improving Stress Trend",
    text=(
        "Great news! Your stress levels have been decreasing over the past week. "
        "Keep up with the positive changes you've made."
    ),
)

STABLE_TREND = Insight(
    id="stable-trend",
    title="➖ Steady Stress Levels",
    text=(
        "Your stress levels have held steady over the past week. Keep an eye on "
        "what helps you stay balanced."
    ),
)


def above_average(latest: float, average: float) -> Insight:
    return Insight(
        id="above-average",
        title="⚠️ Above Your Average",
        text=(
            f"Your current stress score ({one_decimal(latest)}) is significantly higher than "
            f"your overall average ({one_decimal(average)}). This might be a good time to use "
            "your proven stress reduction techniques."
        ),
    )


def below_average(latest: float, average: float) -> Insight:
    return Insight(
        id="below-average",
        title="🌟 Below Your Average",
        text=(
            f"Your current stress score ({one_decimal(latest)}) is significantly lower than "
            f"your overall average ({one_decimal(average)}). Whatever you're doing is working well!"
        ),
    )
