"""Stress scoring: survey catalogue and the linear score engine."""

from stressless.scoring.engine import ScoreEngine, process_sensor_data
from stressless.scoring.survey import STRESS_QUESTIONS, SurveyForm, SurveyQuestion

__all__ = [
    "STRESS_QUESTIONS",
    "ScoreEngine",
    "SurveyForm",
    "SurveyQuestion",
    "process_sensor_data",
]
