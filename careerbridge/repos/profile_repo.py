"""Company and candidate profiles, both upserted by email."""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from careerbridge.core.errors import ValidationError
from careerbridge.core.ids import generate_ref
from careerbridge.models.profile import CandidateProfile, CompanyProfile

logger = logging.getLogger(__name__)

COMPANY_FIELDS = (
    "email",
    "company_name",
    "industry",
    "registration_number",
    "founded_year",
    "team_size",
    "website",
    "phone",
    "address",
    "overview",
    "linkedin",
    "twitter",
    "facebook",
    "instagram",
)

CANDIDATE_FIELDS = (
    "email",
    "first_name",
    "last_name",
    "gender",
    "mobile",
    "city",
    "country",
    "experience_level",
    "education_level",
    "custom_education",
    "custom_skills",
    "custom_jobs",
    "linkedin",
    "github",
    "resume_ref",
    "cover_letter_ref",
    "photo_ref",
    "intro_video_ref",
)

# Fields copied into an applicant listing
APPLICANT_FIELDS = ("first_name", "last_name", "email", "mobile", "city", "country", "education_level")


def _check_fields(data: dict, allowed: tuple[str, ...], kind: str) -> None:
    unknown = sorted(set(data) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown {kind} field(s): {', '.join(unknown)}")
    if not (data.get("email") or "").strip():
        raise ValidationError(f"Email is required to save {kind}")


def _upsert_by_email(db: Session, model, values: dict) -> None:
    """Single-statement insert-or-replace keyed on the unique email column."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        existing = db.execute(select(model).where(model.email == values["email"])).scalar_one_or_none()
        if existing is None:
            db.add(model(id=generate_ref(), **values))
        else:
            for key, value in values.items():
                setattr(existing, key, value)
        db.commit()
        return
    stmt = insert(model).values(id=generate_ref(), **values)
    stmt = stmt.on_conflict_do_update(index_elements=["email"], set_=values)
    db.execute(stmt)
    db.commit()


def save_company_profile(db: Session, data: dict) -> CompanyProfile:
    _check_fields(data, COMPANY_FIELDS, "company profile")
    if not (data.get("company_name") or "").strip():
        raise ValidationError("Company name is required")
    values = {field: data.get(field) for field in COMPANY_FIELDS}
    values["email"] = values["email"].strip()
    values["company_name"] = values["company_name"].strip()
    _upsert_by_email(db, CompanyProfile, values)
    logger.info("Company profile saved: %s", values["email"])
    return get_company_profile(db, values["email"])


def get_company_profile(db: Session, email: str) -> CompanyProfile | None:
    return db.query(CompanyProfile).filter(CompanyProfile.email == email).first()


def save_candidate_profile(db: Session, data: dict) -> CandidateProfile:
    _check_fields(data, CANDIDATE_FIELDS, "candidate profile")
    # Every optional field is stored as "" so readers always see the full shape
    values = {field: (data.get(field) or "") for field in CANDIDATE_FIELDS}
    values["email"] = values["email"].strip()
    values["updated_at"] = datetime.now(timezone.utc)
    _upsert_by_email(db, CandidateProfile, values)
    logger.info("Candidate profile saved: %s", values["email"])
    return get_candidate_profile(db, values["email"])


def get_candidate_profile(db: Session, email: str) -> CandidateProfile | None:
    return db.query(CandidateProfile).filter(CandidateProfile.email == email).first()


def candidate_snapshot(profile: CandidateProfile) -> dict:
    """Detached copy of a candidate profile, embedded in an application."""
    snapshot = {field: getattr(profile, field) or "" for field in CANDIDATE_FIELDS}
    snapshot["id"] = profile.id
    snapshot["updated_at"] = profile.updated_at.isoformat() if profile.updated_at else None
    return snapshot
