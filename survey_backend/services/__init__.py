"""Service layer for business logic."""
from survey_backend.services.survey_service import SurveyService
from survey_backend.services.response_service import ResponseService
from survey_backend.services.authorization import authorize

__all__ = [
    "SurveyService",
    "ResponseService",
    "authorize",
]
