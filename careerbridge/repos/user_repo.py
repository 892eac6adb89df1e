import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from careerbridge.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from careerbridge.core.ids import generate_ref
from careerbridge.core.security import hash_password, verify_password
from careerbridge.models.account import Account, ROLES

logger = logging.getLogger(__name__)


def get_by_email(db: Session, email: str) -> Account | None:
    return db.query(Account).filter(Account.email == email).first()


def get_by_id(db: Session, account_id: str) -> Account | None:
    return db.query(Account).filter(Account.id == account_id).first()


def signup(db: Session, email: str, password: str, name: str, role: str) -> Account:
    if not email:
        raise ValidationError("Email is required")
    if role not in ROLES:
        raise ValidationError(f"Role must be one of {', '.join(ROLES)}")
    if get_by_email(db, email):
        raise ConflictError("Email already in use")
    account = Account(
        id=generate_ref(),
        email=email,
        password_hash=hash_password(password),
        name=name,
        role=role,
    )
    db.add(account)
    try:
        db.commit()
    except IntegrityError as e:
        # Concurrent signup won the unique index on email
        db.rollback()
        raise ConflictError("Email already in use") from e
    db.refresh(account)
    logger.info("Account created: %s (%s)", account.email, account.role)
    return account


def login(db: Session, email: str, password: str) -> Account:
    account = get_by_email(db, email)
    if not account:
        raise NotFoundError("User not found")
    if not verify_password(password, account.password_hash):
        raise AuthError("Invalid credentials")
    return account


def change_password(db: Session, email: str, new_password: str) -> dict:
    """
    Soft-failing password change: returns {"success", "message"} instead of raising,
    callers branch on `success`.
    """
    if not get_by_email(db, email):
        return {"success": False, "message": "User with this email does not exist."}
    try:
        updated = (
            db.query(Account)
            .filter(Account.email == email)
            .update({Account.password_hash: hash_password(new_password)}, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Password change failed for %s: %s", email, e)
        return {"success": False, "message": "Error changing password."}
    if updated != 1:
        return {"success": False, "message": "Failed to change password. Try again."}
    logger.info("Password changed: %s", email)
    return {"success": True, "message": "Password changed successfully."}


def set_role(db: Session, email: str, role: str) -> Account:
    if role not in ROLES:
        raise ValidationError(f"Role must be one of {', '.join(ROLES)}")
    account = get_by_email(db, email)
    if not account:
        raise NotFoundError("User not found")
    account.role = role
    db.commit()
    db.refresh(account)
    return account
