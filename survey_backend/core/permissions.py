"""Survey permissions and the role policy that grants them."""
from enum import Enum
from typing import Dict, FrozenSet


class UserRole(str, Enum):
    """Roles carried in the caller's token."""
    ADMIN = "admin"
    AUTHOR = "author"
    RESPONDENT = "respondent"


class SurveyPermission(str, Enum):
    """Operations gated by the policy."""
    READ = "survey.read"
    CREATE = "survey.create"
    RESPOND = "survey.respond"
    VIEW_RESULTS = "survey.results.view"
    DELETE = "survey.delete"


# Authors build surveys and read results; respondents answer them.
POLICY: Dict[SurveyPermission, FrozenSet[UserRole]] = {
    SurveyPermission.READ: frozenset(UserRole),
    SurveyPermission.CREATE: frozenset({UserRole.ADMIN, UserRole.AUTHOR}),
    SurveyPermission.RESPOND: frozenset({UserRole.ADMIN, UserRole.RESPONDENT}),
    SurveyPermission.VIEW_RESULTS: frozenset({UserRole.ADMIN, UserRole.AUTHOR}),
    SurveyPermission.DELETE: frozenset({UserRole.ADMIN, UserRole.AUTHOR}),
}


def is_allowed(role: UserRole, permission: SurveyPermission) -> bool:
    return role in POLICY.get(permission, frozenset())
