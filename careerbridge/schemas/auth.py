from datetime import datetime
from typing import Literal

from pydantic import field_validator

from careerbridge.schemas.common import ApiInput, ApiModel, EmailAddress


def _password_min_length(v: str) -> str:
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    return v


class SignupRequest(ApiInput):
    email: EmailAddress
    password: str
    name: str
    role: Literal["admin", "user"] = "user"

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _password_min_length(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class LoginRequest(ApiInput):
    email: EmailAddress
    password: str


class ChangePasswordRequest(ApiInput):
    email: EmailAddress
    new_password: str

    @field_validator("new_password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _password_min_length(v)


class AccountResponse(ApiModel):
    id: str
    email: str
    name: str
    role: str
    created_at: datetime | None = None


class LoginResponse(ApiModel):
    access_token: str
    token_type: str = "bearer"
    user: AccountResponse
