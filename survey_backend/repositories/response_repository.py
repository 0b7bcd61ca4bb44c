"""Response repository."""
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from survey_backend.models.response import SurveyResponse


class ResponseRepository:
    """Data access for survey responses."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_survey(self, survey_id: str) -> List[SurveyResponse]:
        """Responses for a survey in submission order."""
        return (
            self.db.query(SurveyResponse)
            .filter(SurveyResponse.survey_id == survey_id)
            .order_by(SurveyResponse.submitted_at.asc())
            .all()
        )

    def count_by_survey(self, survey_id: str) -> int:
        return self.db.query(SurveyResponse).filter(SurveyResponse.survey_id == survey_id).count()

    def exists_for_user(self, survey_id: str, user_ref: str) -> bool:
        return (
            self.db.query(SurveyResponse.id)
            .filter(SurveyResponse.survey_id == survey_id, SurveyResponse.user_ref == user_ref)
            .first()
            is not None
        )

    def create(self, survey_id: str, user_ref: str, answers: Dict[str, Any]) -> SurveyResponse:
        response = SurveyResponse(survey_id=survey_id, user_ref=user_ref, answers=answers)
        self.db.add(response)
        self.db.flush()
        return response

    def delete_by_survey(self, survey_id: str) -> int:
        return (
            self.db.query(SurveyResponse)
            .filter(SurveyResponse.survey_id == survey_id)
            .delete(synchronize_session=False)
        )
