"""Survey and question models."""
import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime, Enum as SQLEnum, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from survey_backend.core.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestionType(str, Enum):
    """Supported question types."""
    TEXT = "text"
    RATING = "rating"
    MULTIPLE_CHOICE = "multiple-choice"


class Survey(Base):
    """
    Survey model - a titled set of questions.
    Questions and responses are removed together with the survey.
    """

    __tablename__ = "surveys"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    owner_group = Column(String, nullable=True)
    templates = Column(JSON, nullable=True)  # list of template entity refs
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    # Relationships
    questions = relationship(
        "Question",
        back_populates="survey",
        order_by="Question.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    responses = relationship(
        "SurveyResponse",
        back_populates="survey",
        order_by="SurveyResponse.submitted_at",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Survey(id={self.id}, title={self.title})>"


class Question(Base):
    """Question belonging to exactly one survey."""

    __tablename__ = "questions"

    id = Column(String(36), primary_key=True, default=generate_id)
    survey_id = Column(String(36), ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(
        SQLEnum(
            QuestionType,
            name="question_type",
            native_enum=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    label = Column(String, nullable=False)
    options = Column(JSON, nullable=True)  # only for multiple-choice
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    survey = relationship("Survey", back_populates="questions")

    def __repr__(self):
        return f"<Question(id={self.id}, survey_id={self.survey_id}, type={self.type})>"
