import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from survey_backend.core.database import Base, get_db
from survey_backend.core.permissions import UserRole
from survey_backend.core.security import create_access_token
from survey_backend.main import app
from survey_backend.models.survey import QuestionType
from survey_backend.schemas.survey import QuestionCreate, SurveyCreate
from survey_backend.services.survey_service import SurveyService

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite://"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db

API = "/api/survey"


def auth_headers(sub: str, role: UserRole) -> dict:
    token = create_access_token({"sub": sub, "role": role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db():
    # Create the tables
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    # Drop the tables
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def author_headers():
    return auth_headers("user:default/author", UserRole.AUTHOR)


@pytest.fixture
def respondent_headers():
    return auth_headers("user:default/respondent", UserRole.RESPONDENT)


@pytest.fixture
def admin_headers():
    return auth_headers("user:default/admin", UserRole.ADMIN)


@pytest.fixture
def survey(db):
    """A survey with one question of each type."""
    return SurveyService(db).create_survey(SurveyCreate(
        title="Developer Experience",
        description="Quarterly check-in",
        owner_group="group:default/platform",
        templates=["template:default/python-service"],
        questions=[
            QuestionCreate(type=QuestionType.RATING, label="Rate the build"),
            QuestionCreate(
                type=QuestionType.MULTIPLE_CHOICE,
                label="Would you recommend it?",
                options=["Yes", "No", "Maybe"],
            ),
            QuestionCreate(type=QuestionType.TEXT, label="Anything else?"),
        ],
    ))
