"""Survey response service."""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from survey_backend.core.config import settings
from survey_backend.core.exceptions import (
    ConflictError, NotFoundError, PermissionDeniedError, ValidationError
)
from survey_backend.core.permissions import UserRole
from survey_backend.models.response import SurveyResponse
from survey_backend.repositories.response_repository import ResponseRepository
from survey_backend.repositories.survey_repository import SurveyRepository
from survey_backend.schemas.auth import TokenData
from survey_backend.schemas.response import SurveyResponseCreate
from survey_backend.services.answer_validation import validate_answers

logger = logging.getLogger(__name__)


class ResponseService:
    """Response submission and retrieval."""

    def __init__(
        self,
        db: Session,
        strict: Optional[bool] = None,
        single_response_per_user: Optional[bool] = None,
    ):
        self.db = db
        self.survey_repo = SurveyRepository(db)
        self.response_repo = ResponseRepository(db)
        self.strict = settings.STRICT_ANSWER_VALIDATION if strict is None else strict
        self.single_response_per_user = (
            settings.SINGLE_RESPONSE_PER_USER
            if single_response_per_user is None
            else single_response_per_user
        )

    def submit_response(
        self,
        survey_id: str,
        response_data: SurveyResponseCreate,
        caller: Optional[TokenData] = None,
    ) -> SurveyResponse:
        """
        Store one submission for a survey.

        When ``caller`` is given, ``user_ref`` must be the caller's own
        identity unless the caller is an admin.

        The single-response check reads before inserting and is best-effort:
        there is no unique constraint on (survey_id, user_ref), so concurrent
        submissions by the same user can both be stored.

        Raises:
            NotFoundError: If survey not found
            ValidationError: If user_ref is blank or answers do not fit the questions
            PermissionDeniedError: If user_ref names someone other than the caller
            ConflictError: If the user already has a stored response and only one is allowed
        """
        survey = self.survey_repo.get_by_id(survey_id)
        if not survey:
            raise NotFoundError(f"Survey with id {survey_id} not found")

        user_ref = (response_data.user_ref or "").strip()
        if not user_ref:
            raise ValidationError(
                "Invalid response", [{"field": "userRef", "message": "userRef is required"}]
            )

        if caller is not None and caller.role != UserRole.ADMIN and user_ref != caller.sub:
            logger.warning("%s tried to respond to survey %s as %s", caller.sub, survey_id, user_ref)
            raise PermissionDeniedError("userRef must match the authenticated caller")

        answers = response_data.answers
        if self.strict:
            answers = validate_answers(survey.questions, answers)

        if self.single_response_per_user and self.response_repo.exists_for_user(survey_id, user_ref):
            raise ConflictError(f"{user_ref} has already responded to survey {survey_id}")

        response = self.response_repo.create(survey_id=survey_id, user_ref=user_ref, answers=answers)
        self.db.commit()
        self.db.refresh(response)

        logger.info("Stored response %s for survey %s from %s", response.id, survey_id, user_ref)
        return response

    def list_responses(self, survey_id: str) -> List[SurveyResponse]:
        """
        Get all responses for a survey.

        Raises:
            NotFoundError: If survey not found
        """
        if not self.survey_repo.exists(survey_id):
            raise NotFoundError(f"Survey with id {survey_id} not found")

        return self.response_repo.get_by_survey(survey_id)
