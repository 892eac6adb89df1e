from datetime import datetime

from careerbridge.schemas.common import ApiInput, ApiModel, EmailAddress


class CompanyProfileInput(ApiInput):
    email: EmailAddress
    company_name: str
    industry: str | None = None
    registration_number: str | None = None
    founded_year: int | None = None
    team_size: str | None = None
    website: str | None = None
    phone: str | None = None
    address: str | None = None
    overview: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None


class CompanyProfileResponse(ApiModel):
    id: str
    email: str
    company_name: str
    industry: str | None = None
    registration_number: str | None = None
    founded_year: int | None = None
    team_size: str | None = None
    website: str | None = None
    phone: str | None = None
    address: str | None = None
    overview: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None


class CandidateProfileInput(ApiInput):
    email: EmailAddress
    first_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    mobile: str | None = None
    city: str | None = None
    country: str | None = None
    experience_level: str | None = None
    education_level: str | None = None
    custom_education: str | None = None
    custom_skills: str | None = None
    custom_jobs: str | None = None
    linkedin: str | None = None
    github: str | None = None
    resume_ref: str | None = None
    cover_letter_ref: str | None = None
    photo_ref: str | None = None
    intro_video_ref: str | None = None


class CandidateProfileResponse(ApiModel):
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    mobile: str = ""
    city: str = ""
    country: str = ""
    experience_level: str = ""
    education_level: str = ""
    custom_education: str = ""
    custom_skills: str = ""
    custom_jobs: str = ""
    linkedin: str = ""
    github: str = ""
    resume_ref: str = ""
    cover_letter_ref: str = ""
    photo_ref: str = ""
    intro_video_ref: str = ""
    updated_at: datetime | None = None
