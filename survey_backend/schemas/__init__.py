"""Pydantic schemas for API validation and serialization."""
from survey_backend.schemas.base import CreatedResponse, MessageResponse
from survey_backend.schemas.auth import TokenData
from survey_backend.schemas.survey import (
    QuestionCreate, SurveyCreate, QuestionResponse, SurveyDetail
)
from survey_backend.schemas.response import (
    SurveyResponseCreate, SurveyResponseDetail, SurveyResultsResponse
)
from survey_backend.schemas.results import ChartPoint, QuestionSummary, SurveySummary

__all__ = [
    "CreatedResponse",
    "MessageResponse",
    "TokenData",
    "QuestionCreate",
    "SurveyCreate",
    "QuestionResponse",
    "SurveyDetail",
    "SurveyResponseCreate",
    "SurveyResponseDetail",
    "SurveyResultsResponse",
    "ChartPoint",
    "QuestionSummary",
    "SurveySummary",
]
