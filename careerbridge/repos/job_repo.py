import logging

from sqlalchemy.orm import Session

from careerbridge.core.errors import NotFoundError, ValidationError
from careerbridge.core.ids import coerce_record_id, generate_ref
from careerbridge.models.job_posting import JobPosting
from careerbridge.models.saved_job import SavedJob
from careerbridge.repos.profile_repo import get_company_profile

logger = logging.getLogger(__name__)

JOB_FIELDS = (
    "title",
    "description",
    "location",
    "salary",
    "employment_type",
    "deadline",
    "about_job",
    "about_you",
    "what_we_look_for",
    "must_have",
    "benefits",
    "email",
)


def _check_fields(data: dict) -> None:
    unknown = sorted(set(data) - set(JOB_FIELDS))
    if unknown:
        raise ValidationError(f"Unknown job field(s): {', '.join(unknown)}")
    must_have = data.get("must_have")
    if must_have is not None and not all(isinstance(item, str) for item in must_have):
        raise ValidationError("must_have must be a list of strings")


def create_job(db: Session, data: dict) -> JobPosting:
    _check_fields(data)
    for field in ("title", "description", "email"):
        if not (data.get(field) or "").strip():
            raise ValidationError(f"Job {field} is required")
    email = data["email"].strip()
    company = get_company_profile(db, email)
    if not company or not (company.company_name or "").strip():
        logger.info("Job create rejected: no resolvable company for %s", email)
        raise ValidationError(f"No resolvable company for {email}. Save a company profile first.")

    values = {field: data.get(field) for field in JOB_FIELDS}
    values["email"] = email
    values["must_have"] = list(data.get("must_have") or [])
    job = JobPosting(id=generate_ref(), company_name=company.company_name, **values)
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("Job created: %s (%s) by %s", job.id, job.title, job.email)
    return job


def get_job_by_id(db: Session, job_id: str) -> JobPosting | None:
    return db.query(JobPosting).filter(JobPosting.id == coerce_record_id(job_id)).first()


def get_jobs_by_ids(db: Session, job_ids: list[str]) -> list[JobPosting]:
    if not job_ids:
        return []
    return db.query(JobPosting).filter(JobPosting.id.in_(set(job_ids))).all()


def get_all_jobs(db: Session) -> list[JobPosting]:
    return db.query(JobPosting).order_by(JobPosting.created_at.asc(), JobPosting.id.asc()).all()


def update_job(db: Session, job_id: str, data: dict) -> JobPosting:
    """Apply the supplied fields. Owner email and the company name snapshot never change."""
    _check_fields(data)
    job = get_job_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")
    email = data.get("email")
    if email is not None and email.strip() != job.email:
        raise ValidationError("A job posting cannot be moved to another company")
    for field in JOB_FIELDS:
        if field == "email" or field not in data:
            continue
        value = data[field]
        if field in ("title", "description") and not (value or "").strip():
            raise ValidationError(f"Job {field} cannot be empty")
        if field == "must_have":
            value = list(value or [])
        setattr(job, field, value)
    db.commit()
    db.refresh(job)
    logger.info("Job updated: %s", job.id)
    return job


def delete_job(db: Session, job_id: str) -> bool:
    """Delete a posting and its bookmarks. Applications are kept. Returns False when already gone."""
    job = get_job_by_id(db, job_id)
    if not job:
        return False
    db.query(SavedJob).filter(SavedJob.job_id == job.id).delete(synchronize_session=False)
    db.delete(job)
    db.commit()
    logger.info("Job deleted: %s", job.id)
    return True
