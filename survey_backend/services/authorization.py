"""Server-side permission checks run before each service operation."""
import logging

from survey_backend.core.exceptions import PermissionDeniedError
from survey_backend.core.permissions import SurveyPermission, is_allowed
from survey_backend.schemas.auth import TokenData

logger = logging.getLogger(__name__)


def authorize(principal: TokenData, permission: SurveyPermission) -> TokenData:
    """
    Ensure the caller's role grants ``permission``.

    Raises:
        PermissionDeniedError: If the role is not allowed
    """
    if not is_allowed(principal.role, permission):
        logger.warning(
            "Denied %s to %s (role=%s)", permission.value, principal.sub, principal.role.value
        )
        raise PermissionDeniedError(
            f"Role '{principal.role.value}' is not allowed to perform {permission.value}"
        )
    return principal
