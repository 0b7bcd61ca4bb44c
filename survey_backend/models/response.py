"""Survey response model."""
from sqlalchemy import Column, DateTime, ForeignKey, JSON, String
from sqlalchemy.orm import relationship

from survey_backend.core.database import Base
from survey_backend.models.survey import generate_id, utcnow


class SurveyResponse(Base):
    """
    Survey response model - one submission by one respondent.
    Answers are stored as a JSON map of question id to answer value.
    Responses are immutable once submitted.
    """

    __tablename__ = "responses"

    id = Column(String(36), primary_key=True, default=generate_id)
    survey_id = Column(String(36), ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False, index=True)
    user_ref = Column(String, nullable=False, index=True)
    answers = Column(JSON, nullable=False)
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    survey = relationship("Survey", back_populates="responses")

    def __repr__(self):
        return f"<SurveyResponse(id={self.id}, survey_id={self.survey_id}, user_ref={self.user_ref})>"
