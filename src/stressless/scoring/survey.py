"""Survey question catalogue and the slider form state behind it."""

from __future__ import annotations

from pydantic import BaseModel

from stressless.models import RATING_MAX, RATING_MIN, SurveyResponses


class SurveyQuestion(BaseModel):
    """A single 0-10 slider question."""
    id: int
    question: str
    min: int = RATING_MIN
    max: int = RATING_MAX
    default_value: int = 5
    inverted: bool = False


STRESS_QUESTIONS: list[SurveyQuestion] = [
    SurveyQuestion(id=1, question="How would you rate your current stress level?"),
    SurveyQuestion(id=2, question="How difficult is it for you to relax today?"),
    SurveyQuestion(id=3, question="How well did you sleep last night?", inverted=True),
    SurveyQuestion(id=4, question="How irritable do you feel today?"),
    SurveyQuestion(id=5, question="How difficult is it to focus on tasks today?"),
]

_BY_ID = {q.id: q for q in STRESS_QUESTIONS}


def get_question(question_id: int) -> SurveyQuestion:
    """Return the question with *question_id*.

    Raises :class:`ValueError` for ids outside the catalogue.
    """
    question = _BY_ID.get(question_id)
    if question is None:
        raise ValueError(
            f"Unknown question id {question_id}. Available: {sorted(_BY_ID)}"
        )
    return question


def default_responses() -> SurveyResponses:
    return {q.id: q.default_value for q in STRESS_QUESTIONS}


class SurveyForm:
    """In-progress answers, initialised to every question's default."""

    def __init__(self) -> None:
        self._responses: SurveyResponses = default_responses()

    def set_answer(self, question_id: int, value: int) -> None:
        question = get_question(question_id)
        if value != int(value):
            raise ValueError(f"Slider values move in whole steps, got {value}")
        if not question.min <= value <= question.max:
            raise ValueError(
                f"Answer to question {question_id} must be in "
                f"[{question.min}, {question.max}], got {value}"
            )
        self._responses[question_id] = int(value)

    def responses(self) -> SurveyResponses:
        return dict(self._responses)
