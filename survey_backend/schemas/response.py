"""Survey response schemas."""
from datetime import datetime
from typing import Any, Dict, List

from survey_backend.schemas.base import CamelModel
from survey_backend.schemas.survey import SurveyDetail


class SurveyResponseCreate(CamelModel):
    """Submit a response: answers keyed by question id."""
    user_ref: str
    answers: Dict[str, Any]


class SurveyResponseDetail(CamelModel):
    """Stored response with deserialized answers."""
    id: str
    survey_id: str
    user_ref: str
    answers: Dict[str, Any]
    submitted_at: datetime


class SurveyResultsResponse(CamelModel):
    """Survey together with every response submitted to it."""
    survey: SurveyDetail
    total_responses: int
    responses: List[SurveyResponseDetail]
