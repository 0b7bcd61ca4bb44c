"""Shared API dependencies: caller identity and permission gates."""
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from survey_backend.core.permissions import SurveyPermission
from survey_backend.core.security import decode_access_token
from survey_backend.schemas.auth import TokenData
from survey_backend.services.authorization import authorize

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)]
) -> TokenData:
    """Decode the bearer token into the caller's identity."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise credentials_exception

    claims = {"sub": str(payload["sub"])}
    if payload.get("role"):
        claims["role"] = payload["role"]

    try:
        return TokenData(**claims)
    except PydanticValidationError:
        raise credentials_exception


def require_permission(permission: SurveyPermission):
    """Dependency factory checking the caller's role against the policy."""

    def dependency(current_user: Annotated[TokenData, Depends(get_current_user)]) -> TokenData:
        return authorize(current_user, permission)

    return dependency


# Type aliases for route signatures
AnyUser = Annotated[TokenData, Depends(require_permission(SurveyPermission.READ))]
SurveyAuthor = Annotated[TokenData, Depends(require_permission(SurveyPermission.CREATE))]
Respondent = Annotated[TokenData, Depends(require_permission(SurveyPermission.RESPOND))]
ResultsViewer = Annotated[TokenData, Depends(require_permission(SurveyPermission.VIEW_RESULTS))]
SurveyDeleter = Annotated[TokenData, Depends(require_permission(SurveyPermission.DELETE))]
