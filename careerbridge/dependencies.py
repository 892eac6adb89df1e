import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from careerbridge.core.errors import AuthError, PermissionDeniedError
from careerbridge.core.security import decode_access_token
from careerbridge.database import get_db
from careerbridge.models.account import ROLE_ADMIN, Account
from careerbridge.repos.user_repo import get_by_id

logger = logging.getLogger(__name__)
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str, reason: str) -> AuthError:
    logger.info("Auth failed: %s", reason)
    return AuthError(detail)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Account:
    """Resolve the bearer token to a stored account."""
    if not credentials:
        raise _unauthorized("Not authenticated", "missing bearer credentials")
    account_id = decode_access_token(credentials.credentials)
    if not account_id:
        raise _unauthorized("Invalid or expired token", "invalid or expired token")
    account = get_by_id(db, account_id)
    if account is None:
        raise _unauthorized("User not found", f"no account {account_id}")
    return account


def get_current_admin(account: Account = Depends(get_current_user)) -> Account:
    """Employer-only routes: job mutations, applicant listings, status changes, stats."""
    if account.role != ROLE_ADMIN:
        logger.info("Forbidden: %s is not an admin", account.email)
        raise PermissionDeniedError("Admin access required")
    return account
