from datetime import datetime

from pydantic import Field

from careerbridge.schemas.common import ApiInput, ApiModel, EmailAddress


class JobInput(ApiInput):
    title: str = Field(min_length=1, max_length=500)
    description: str = Field(min_length=1)
    location: str | None = None
    salary: str | None = None
    employment_type: str | None = Field(default=None, alias="type")
    deadline: str | None = None
    about_job: str | None = None
    about_you: str | None = None
    what_we_look_for: str | None = None
    must_have: list[str] = Field(default_factory=list)
    benefits: str | None = None
    email: EmailAddress


class JobUpdate(ApiInput):
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, min_length=1)
    location: str | None = None
    salary: str | None = None
    employment_type: str | None = Field(default=None, alias="type")
    deadline: str | None = None
    about_job: str | None = None
    about_you: str | None = None
    what_we_look_for: str | None = None
    must_have: list[str] | None = None
    benefits: str | None = None
    email: EmailAddress | None = None


class ApplicationStatusView(ApiModel):
    status: str


class JobResponse(ApiModel):
    id: str
    title: str
    description: str
    location: str | None = None
    salary: str | None = None
    employment_type: str | None = Field(default=None, alias="type")
    deadline: str | None = None
    about_job: str | None = None
    about_you: str | None = None
    what_we_look_for: str | None = None
    must_have: list[str] = Field(default_factory=list)
    benefits: str | None = None
    email: str
    company_name: str
    created_at: datetime | None = None
    application: ApplicationStatusView | None = None
