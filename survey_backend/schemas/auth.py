"""Authentication schemas."""
from pydantic import BaseModel

from survey_backend.core.permissions import UserRole


class TokenData(BaseModel):
    """Caller identity decoded from the bearer token."""
    sub: str
    role: UserRole = UserRole.RESPONDENT
