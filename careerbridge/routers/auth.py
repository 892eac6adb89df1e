import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from careerbridge.core.security import create_access_token
from careerbridge.database import get_db
from careerbridge.dependencies import get_current_user
from careerbridge.models.account import Account
from careerbridge.repos.user_repo import change_password as change_account_password, login as login_account, signup as signup_account
from careerbridge.schemas.auth import (
    AccountResponse,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    SignupRequest,
)
from careerbridge.schemas.common import ResponseMessage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    account = signup_account(db, data.email, data.password, data.name, data.role)
    return AccountResponse.model_validate(account)


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    account = login_account(db, data.email, data.password)
    logger.info("User logged in: %s", account.email)
    return LoginResponse(access_token=create_access_token(account.id), user=AccountResponse.model_validate(account))


@router.post("/change-password", response_model=ResponseMessage)
def change_password(data: ChangePasswordRequest, db: Session = Depends(get_db)):
    """Always 200; `success` tells the caller whether the password changed."""
    return ResponseMessage(**change_account_password(db, data.email, data.new_password))


@router.get("/me", response_model=AccountResponse)
def get_me(account: Account = Depends(get_current_user)):
    return AccountResponse.model_validate(account)
