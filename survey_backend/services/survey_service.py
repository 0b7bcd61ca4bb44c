"""Survey service."""
import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from survey_backend.core.exceptions import NotFoundError, TransactionError, ValidationError
from survey_backend.models.survey import Survey, QuestionType
from survey_backend.repositories.response_repository import ResponseRepository
from survey_backend.repositories.survey_repository import SurveyRepository
from survey_backend.schemas.response import SurveyResponseDetail, SurveyResultsResponse
from survey_backend.schemas.results import SurveySummary
from survey_backend.schemas.survey import SurveyCreate, SurveyDetail
from survey_backend.services.aggregation import summarize_survey

logger = logging.getLogger(__name__)


def _clean_options(options: Optional[List[str]]) -> List[str]:
    """Trimmed, non-blank options with duplicates removed, first occurrence kept."""
    cleaned = [option.strip() for option in (options or []) if option and option.strip()]
    return list(dict.fromkeys(cleaned))


class SurveyService:
    """Survey business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.survey_repo = SurveyRepository(db)
        self.response_repo = ResponseRepository(db)

    def _validate(self, survey_data: SurveyCreate) -> List[Dict]:
        """Return normalized question rows, or raise with every problem found."""
        errors = []
        if not (survey_data.title or "").strip():
            errors.append({"field": "title", "message": "Survey title is required"})

        questions = []
        for index, question_data in enumerate(survey_data.questions):
            field = f"questions.{index}"
            label = (question_data.label or "").strip()
            if not label:
                errors.append({"field": f"{field}.label", "message": "Question label is required"})

            try:
                question_type = QuestionType(question_data.type)
            except ValueError:
                errors.append({"field": f"{field}.type", "message": f"Unknown question type '{question_data.type}'"})
                continue

            options = None
            if question_type == QuestionType.MULTIPLE_CHOICE:
                options = _clean_options(question_data.options)
                if not options:
                    errors.append({
                        "field": f"{field}.options",
                        "message": "Multiple choice questions need at least one option",
                    })

            questions.append({"question_type": question_type, "label": label, "options": options})

        if errors:
            raise ValidationError("Invalid survey", errors)

        return questions

    def create_survey(self, survey_data: SurveyCreate) -> Survey:
        """
        Create a survey together with all of its questions.

        Survey and questions are committed in a single transaction.

        Raises:
            ValidationError: If the title, a label, a type or the options are invalid
        """
        questions = self._validate(survey_data)

        try:
            survey = self.survey_repo.create(
                title=survey_data.title.strip(),
                description=(survey_data.description or "").strip(),
                owner_group=(survey_data.owner_group or "").strip() or None,
                templates=survey_data.templates,
            )
            for position, question in enumerate(questions):
                self.survey_repo.create_question(survey_id=survey.id, position=position, **question)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create survey '%s'", survey_data.title)
            raise

        logger.info("Created survey %s with %d questions", survey.id, len(questions))
        return self.get_survey(survey.id)

    def get_survey(self, survey_id: str) -> Survey:
        """
        Get survey by ID with its questions.

        Raises:
            NotFoundError: If survey not found
        """
        survey = self.survey_repo.get_by_id(survey_id)

        if not survey:
            raise NotFoundError(f"Survey with id {survey_id} not found")

        return survey

    def list_surveys(self) -> List[Survey]:
        """All surveys, newest first."""
        return self.survey_repo.get_all()

    def get_results(self, survey_id: str) -> SurveyResultsResponse:
        """
        Survey, response count and every response.

        Raises:
            NotFoundError: If survey not found
        """
        survey = self.get_survey(survey_id)
        responses = self.response_repo.get_by_survey(survey_id)

        return SurveyResultsResponse(
            survey=SurveyDetail.model_validate(survey),
            total_responses=len(responses),
            responses=[SurveyResponseDetail.model_validate(response) for response in responses],
        )

    def get_summary(self, survey_id: str) -> SurveySummary:
        """
        Aggregated answers per question.

        Raises:
            NotFoundError: If survey not found
        """
        survey = self.get_survey(survey_id)
        return summarize_survey(survey, self.response_repo.get_by_survey(survey_id))

    def delete_survey(self, survey_id: str) -> None:
        """
        Delete a survey with its responses and questions.

        Rows are removed in dependency order inside one transaction; on any
        failure nothing is removed.

        Raises:
            NotFoundError: If survey not found
            TransactionError: If the delete was rolled back
        """
        if not self.survey_repo.exists(survey_id):
            raise NotFoundError(f"Survey with id {survey_id} not found")

        try:
            deleted_responses = self.response_repo.delete_by_survey(survey_id)
            deleted_questions = self.survey_repo.delete_questions(survey_id)
            deleted_surveys = self.survey_repo.delete(survey_id)
            if not deleted_surveys:
                # Removed by a concurrent delete after the existence check
                self.db.rollback()
                raise NotFoundError(f"Survey with id {survey_id} not found")
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Rolled back delete of survey %s: %s", survey_id, exc)
            raise TransactionError(f"Failed to delete survey {survey_id}") from exc

        logger.info(
            "Deleted survey %s (%d questions, %d responses)",
            survey_id, deleted_questions, deleted_responses
        )
