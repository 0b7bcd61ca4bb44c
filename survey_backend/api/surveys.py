"""Survey router."""
from typing import Annotated, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from survey_backend.core.database import get_db
from survey_backend.services.survey_service import SurveyService
from survey_backend.services.response_service import ResponseService
from survey_backend.schemas.base import CreatedResponse, MessageResponse
from survey_backend.schemas.survey import SurveyCreate, SurveyDetail
from survey_backend.schemas.response import (
    SurveyResponseCreate, SurveyResponseDetail, SurveyResultsResponse
)
from survey_backend.schemas.results import SurveySummary
from survey_backend.api.dependencies import (
    AnyUser, SurveyAuthor, Respondent, ResultsViewer, SurveyDeleter
)

router = APIRouter(prefix="/surveys", tags=["Surveys"])


@router.post("", response_model=CreatedResponse, status_code=201)
def create_survey(
    survey_data: SurveyCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: SurveyAuthor
):
    """
    Create a survey with its questions (Admin or Author).

    Returns the new survey id.
    """
    service = SurveyService(db)
    survey = service.create_survey(survey_data)
    return CreatedResponse(id=survey.id)


@router.get("", response_model=List[SurveyDetail])
def list_surveys(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyUser
):
    """
    List all surveys, newest first, with nested questions.
    """
    service = SurveyService(db)
    return service.list_surveys()


@router.get("/{survey_id}", response_model=SurveyDetail)
def get_survey(
    survey_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyUser
):
    """
    Get a survey with its questions.
    """
    service = SurveyService(db)
    return service.get_survey(survey_id)


@router.delete("/{survey_id}", response_model=MessageResponse)
def delete_survey(
    survey_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: SurveyDeleter
):
    """
    Delete a survey with all its questions and responses (Admin or Author).
    """
    service = SurveyService(db)
    service.delete_survey(survey_id)
    return MessageResponse(message=f"Survey {survey_id} deleted successfully")


@router.post("/{survey_id}/response", response_model=CreatedResponse, status_code=201)
def submit_response(
    survey_id: str,
    response_data: SurveyResponseCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Respondent
):
    """
    Submit a response to a survey (Admin or Respondent).

    Answers are validated against the survey's questions.
    """
    service = ResponseService(db)
    response = service.submit_response(survey_id, response_data, caller=current_user)
    return CreatedResponse(id=response.id)


@router.get("/{survey_id}/responses", response_model=List[SurveyResponseDetail])
def list_responses(
    survey_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: ResultsViewer
):
    """
    Get all responses for a survey (Admin or Author).
    """
    service = ResponseService(db)
    return service.list_responses(survey_id)


@router.get("/{survey_id}/results", response_model=SurveyResultsResponse)
def get_results(
    survey_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: ResultsViewer
):
    """
    Get a survey with its response count and every response (Admin or Author).
    """
    service = SurveyService(db)
    return service.get_results(survey_id)


@router.get("/{survey_id}/summary", response_model=SurveySummary)
def get_summary(
    survey_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: ResultsViewer
):
    """
    Get per-question tallies and chart series (Admin or Author).
    """
    service = SurveyService(db)
    return service.get_summary(survey_id)
