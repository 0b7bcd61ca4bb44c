"""Seed database with a sample survey and a few responses."""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sqlalchemy.exc import SQLAlchemyError

import survey_backend.models  # noqa: F401
from survey_backend.core.database import SessionLocal, engine, Base
from survey_backend.models.survey import Survey, QuestionType
from survey_backend.schemas.response import SurveyResponseCreate
from survey_backend.schemas.survey import QuestionCreate, SurveyCreate
from survey_backend.services.response_service import ResponseService
from survey_backend.services.survey_service import SurveyService

SAMPLE_TITLE = "CI Pipeline Survey"


def seed_survey():
    """Create one survey of each question type and three responses."""
    db = SessionLocal()

    try:
        # Check if the sample survey already exists
        if db.query(Survey).filter(Survey.title == SAMPLE_TITLE).first():
            print("Sample survey already exists. Skipping seed.")
            return

        survey = SurveyService(db).create_survey(SurveyCreate(
            title=SAMPLE_TITLE,
            description="How is the build pipeline working for your team?",
            owner_group="group:default/platform",
            templates=["template:default/python-service"],
            questions=[
                QuestionCreate(type=QuestionType.RATING, label="Rate the build speed"),
                QuestionCreate(
                    type=QuestionType.MULTIPLE_CHOICE,
                    label="Would you recommend the pipeline?",
                    options=["Yes", "No", "Not sure"],
                ),
                QuestionCreate(type=QuestionType.TEXT, label="What should we improve?"),
            ],
        ))
        rating, choice, comment = survey.questions

        responses = ResponseService(db)
        samples = [
            ("user:default/ada", 5, "Yes", "Cache dependencies between jobs"),
            ("user:default/grace", 3, "Not sure", "Flaky integration tests"),
            ("user:default/linus", 4, "Yes", "Faster artifact uploads"),
        ]
        for user_ref, score, answer, text in samples:
            responses.submit_response(survey.id, SurveyResponseCreate(
                user_ref=user_ref,
                answers={rating.id: score, choice.id: answer, comment.id: text},
            ))

        print(f"✅ Seeded survey {survey.id} with {len(samples)} responses")

    except SQLAlchemyError as e:
        print(f"❌ Error seeding data: {e}")
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":
    # Create tables if they don't exist
    Base.metadata.create_all(bind=engine)

    # Seed data
    seed_survey()
