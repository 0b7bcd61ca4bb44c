"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the API layer renders them
through exception handlers registered in ``survey_backend.main``.
"""
from typing import Dict, List, Optional

from fastapi import status


class SurveyError(Exception):
    """Base class for survey domain errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SurveyError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(SurveyError):
    """Referenced survey does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(SurveyError):
    """Request conflicts with stored state."""

    status_code = status.HTTP_409_CONFLICT


class PermissionDeniedError(SurveyError):
    """Caller's role does not grant the requested permission."""

    status_code = status.HTTP_403_FORBIDDEN


class TransactionError(SurveyError):
    """A multi-statement write was rolled back."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
