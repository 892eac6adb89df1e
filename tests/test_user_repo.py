import pytest

from careerbridge.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from careerbridge.core.ids import is_ref
from careerbridge.models.account import Account
from careerbridge.repos import user_repo


def test_signup_stores_hash_not_plaintext(db):
    account = user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "admin")
    assert is_ref(account.id)
    assert account.role == "admin"
    assert account.password_hash != "Pw1!aaaa"
    assert account.created_at is not None


def test_signup_twice_with_same_email_conflicts(db):
    user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "admin")
    with pytest.raises(ConflictError):
        user_repo.signup(db, "e1@x.com", "Other!pw1", "Alice Again", "user")
    assert db.query(Account).filter(Account.email == "e1@x.com").count() == 1


def test_signup_email_is_case_sensitive_key(db):
    user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "user")
    other = user_repo.signup(db, "E1@x.com", "Pw1!aaaa", "Alice", "user")
    assert other.email == "E1@x.com"


def test_signup_rejects_unknown_role(db):
    with pytest.raises(ValidationError):
        user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "superuser")


def test_login_paths(db):
    user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "user")
    assert user_repo.login(db, "e1@x.com", "Pw1!aaaa").name == "Alice"
    with pytest.raises(AuthError):
        user_repo.login(db, "e1@x.com", "wrong-password")
    with pytest.raises(NotFoundError):
        user_repo.login(db, "nobody@x.com", "Pw1!aaaa")


def test_change_password_soft_fails_for_unknown_account(db):
    result = user_repo.change_password(db, "nobody@x.com", "NewPass!9")
    assert result == {"success": False, "message": "User with this email does not exist."}


def test_change_password_replaces_credentials(db):
    user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "user")
    result = user_repo.change_password(db, "e1@x.com", "NewPass!9")
    assert result["success"] is True
    db.expire_all()
    assert user_repo.login(db, "e1@x.com", "NewPass!9").email == "e1@x.com"
    with pytest.raises(AuthError):
        user_repo.login(db, "e1@x.com", "Pw1!aaaa")


def test_set_role(db):
    user_repo.signup(db, "e1@x.com", "Pw1!aaaa", "Alice", "user")
    assert user_repo.set_role(db, "e1@x.com", "admin").role == "admin"
    with pytest.raises(NotFoundError):
        user_repo.set_role(db, "nobody@x.com", "admin")
