"""FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import survey_backend.models  # noqa: F401  registers tables on Base.metadata
from survey_backend.api import surveys
from survey_backend.core.config import settings
from survey_backend.core.database import Base, engine
from survey_backend.core.exceptions import SurveyError, ValidationError
from survey_backend.core.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        # Local development only; deployed databases are managed by alembic
        Base.metadata.create_all(bind=engine)
    logger.info("Survey API started (%s)", settings.ENVIRONMENT)
    yield


app = FastAPI(title="Survey API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SurveyError)
async def survey_error_handler(request: Request, exc: SurveyError):
    content = {"detail": exc.message}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Request validation failed", "errors": errors},
    )


app.include_router(surveys.router, prefix=settings.API_PREFIX)


@app.get("/health")
def health():
    return {"status": "ok"}
