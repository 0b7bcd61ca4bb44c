"""Repository layer for data access."""
from survey_backend.repositories.survey_repository import SurveyRepository
from survey_backend.repositories.response_repository import ResponseRepository

__all__ = [
    "SurveyRepository",
    "ResponseRepository",
]
