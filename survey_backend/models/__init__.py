"""Database models."""
from survey_backend.models.survey import Survey, Question, QuestionType
from survey_backend.models.response import SurveyResponse

__all__ = [
    "Survey",
    "Question",
    "QuestionType",
    "SurveyResponse",
]
