"""Aggregated result schemas."""
from typing import Dict, List

from survey_backend.models.survey import QuestionType
from survey_backend.schemas.base import CamelModel


class ChartPoint(CamelModel):
    """One category of a chart, in presentation order."""
    label: str
    count: int


class QuestionSummary(CamelModel):
    """
    Aggregated answers for one question.

    ``tally`` holds raw counts keyed by the answer's string form.
    ``series`` is the chart-ready view: declared options or ratings 1-5,
    zero-filled. Text questions carry ``text_answers`` instead.
    """
    question_id: str
    type: QuestionType
    label: str
    answered: int
    tally: Dict[str, int] = {}
    series: List[ChartPoint] = []
    out_of_range: Dict[str, int] = {}
    text_answers: List[str] = []


class SurveySummary(CamelModel):
    """Per-question summaries for a survey."""
    survey_id: str
    title: str
    total_responses: int
    questions: List[QuestionSummary]
