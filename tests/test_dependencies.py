import pytest
from fastapi.security import HTTPAuthorizationCredentials

from careerbridge.core.errors import AuthError, PermissionDeniedError
from careerbridge.core.security import create_access_token
from careerbridge.dependencies import get_current_admin, get_current_user
from careerbridge.repos import user_repo


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_current_user_from_token(db):
    account = user_repo.signup(db, "u1@x.com", "Pw2!bbbb", "Uma", "user")
    assert get_current_user(db=db, credentials=_bearer(create_access_token(account.id))).email == "u1@x.com"


@pytest.mark.parametrize("credentials", [None, _bearer("garbage")])
def test_current_user_rejects_missing_or_bad_token(db, credentials):
    with pytest.raises(AuthError) as exc:
        get_current_user(db=db, credentials=credentials)
    assert exc.value.status_code == 401


def test_current_user_rejects_unknown_account(db):
    with pytest.raises(AuthError) as exc:
        get_current_user(db=db, credentials=_bearer(create_access_token("65a1b2c3d4e5f60718293a4b")))
    assert exc.value.message == "User not found"


def test_admin_requires_admin_role(db):
    user = user_repo.signup(db, "u1@x.com", "Pw2!bbbb", "Uma", "user")
    admin = user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "admin")
    assert get_current_admin(account=admin) is admin
    with pytest.raises(PermissionDeniedError) as exc:
        get_current_admin(account=user)
    assert exc.value.status_code == 403
    assert exc.value.kind == "auth_error"
