"""Mint a development bearer token.

Usage: python scripts/create_token.py <user_ref> [admin|author|respondent] [minutes]
"""
import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from survey_backend.core.permissions import UserRole
from survey_backend.core.security import create_access_token


def main(argv):
    if not argv:
        print(__doc__)
        return 1

    user_ref = argv[0]
    role = UserRole(argv[1]) if len(argv) > 1 else UserRole.RESPONDENT
    minutes = int(argv[2]) if len(argv) > 2 else 60

    token = create_access_token(
        data={"sub": user_ref, "role": role.value},
        expires_delta=timedelta(minutes=minutes),
    )
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
