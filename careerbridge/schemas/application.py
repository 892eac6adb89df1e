from datetime import datetime
from typing import Literal

from pydantic import Field

from careerbridge.schemas.common import ApiInput, ApiModel, EmailAddress


class ApplyRequest(ApiInput):
    user_email: EmailAddress
    job_id: str = Field(min_length=1)
    resume_ref: str | None = None
    cover_letter_ref: str | None = None


class StatusUpdateRequest(ApiInput):
    status: Literal["Pending", "Accepted", "Rejected"]


class ApplicantProfile(ApiModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    mobile: str = ""
    city: str = ""
    country: str = ""
    education_level: str = ""


class ApplicantResponse(ApiModel):
    id: str
    user_email: str
    user_profile: ApplicantProfile | None = None
    resume_ref: str | None = None
    cover_letter_ref: str | None = None
    applied_at: datetime | None = None
    status: str


class ApplicationResponse(ApiModel):
    id: str
    job_id: str
    user_email: str
    resume_ref: str | None = None
    cover_letter_ref: str | None = None
    applied_at: datetime | None = None
    status: str


class SaveJobRequest(ApiInput):
    user_email: EmailAddress
    job_id: str = Field(min_length=1)


class DashboardStats(ApiModel):
    total_jobs: int
    total_users: int
    pending_applications: int
