"""Survey repository."""
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from survey_backend.models.survey import Survey, Question, QuestionType


class SurveyRepository:
    """
    Data access for surveys and their questions.

    Write methods only add and flush; committing is left to the service so
    that several writes can share one transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, survey_id: str) -> Optional[Survey]:
        return (
            self.db.query(Survey)
            .options(selectinload(Survey.questions))
            .filter(Survey.id == survey_id)
            .first()
        )

    def exists(self, survey_id: str) -> bool:
        return self.db.query(Survey.id).filter(Survey.id == survey_id).first() is not None

    def get_all(self) -> List[Survey]:
        """All surveys, newest first, with questions eagerly loaded."""
        return (
            self.db.query(Survey)
            .options(selectinload(Survey.questions))
            .order_by(Survey.created_at.desc())
            .all()
        )

    def create(
        self,
        title: str,
        description: str = "",
        owner_group: Optional[str] = None,
        templates: Optional[List[str]] = None,
    ) -> Survey:
        survey = Survey(
            title=title,
            description=description,
            owner_group=owner_group,
            templates=templates,
        )
        self.db.add(survey)
        self.db.flush()
        return survey

    def create_question(
        self,
        survey_id: str,
        question_type: QuestionType,
        label: str,
        position: int,
        options: Optional[List[str]] = None,
    ) -> Question:
        question = Question(
            survey_id=survey_id,
            type=question_type,
            label=label,
            options=options,
            position=position,
        )
        self.db.add(question)
        self.db.flush()
        return question

    def delete_questions(self, survey_id: str) -> int:
        return (
            self.db.query(Question)
            .filter(Question.survey_id == survey_id)
            .delete(synchronize_session=False)
        )

    def delete(self, survey_id: str) -> int:
        return (
            self.db.query(Survey)
            .filter(Survey.id == survey_id)
            .delete(synchronize_session=False)
        )
