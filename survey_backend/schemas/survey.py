"""Survey schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from survey_backend.models.survey import QuestionType
from survey_backend.schemas.base import CamelModel


class QuestionCreate(CamelModel):
    """Question as submitted by the survey builder."""
    type: QuestionType
    label: str
    options: Optional[List[str]] = None


class SurveyCreate(CamelModel):
    """Create survey with all of its questions."""
    title: str
    description: Optional[str] = None
    owner_group: Optional[str] = None
    templates: Optional[List[str]] = None
    questions: List[QuestionCreate]


class QuestionResponse(CamelModel):
    """Question with parsed options."""
    id: str
    survey_id: str
    type: QuestionType
    label: str
    options: Optional[List[str]] = None


class SurveyDetail(CamelModel):
    """Survey with nested questions in declared order."""
    id: str
    title: str
    description: str = ""
    owner_group: Optional[str] = None
    templates: List[str] = []
    created_at: datetime
    questions: List[QuestionResponse] = []

    @field_validator("templates", mode="before")
    @classmethod
    def default_templates(cls, value):
        return value or []

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value):
        return value or ""
