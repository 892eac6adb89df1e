import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from careerbridge.core.errors import ValidationError
from careerbridge.core.ids import coerce_record_id, generate_ref
from careerbridge.models.job_posting import JobPosting
from careerbridge.models.saved_job import SavedJob
from careerbridge.repos.job_repo import get_job_by_id, get_jobs_by_ids

logger = logging.getLogger(__name__)


def get_saved_job(db: Session, user_email: str, job_id: str) -> SavedJob | None:
    return (
        db.query(SavedJob)
        .filter(SavedJob.user_email == user_email, SavedJob.job_id == job_id)
        .first()
    )


def save_job(db: Session, user_email: str, job_id: str) -> dict:
    """Bookmark a job. Returns {"success", "message"}; a duplicate is a soft failure."""
    if not user_email:
        raise ValidationError("User email is required")
    job = get_job_by_id(db, job_id)
    if not job:
        return {"success": False, "message": "Job not found."}
    if get_saved_job(db, user_email, job.id):
        return {"success": False, "message": "Job already saved."}
    db.add(SavedJob(id=generate_ref(), user_email=user_email, job_id=job.id, saved_at=datetime.now(timezone.utc)))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Concurrent save of job %s for %s resolved by unique index", job.id, user_email)
        return {"success": False, "message": "Job already saved."}
    logger.info("Job %s saved for %s", job.id, user_email)
    return {"success": True, "message": "Job saved successfully."}


def delete_saved_job(db: Session, user_email: str, job_id: str) -> bool:
    deleted = (
        db.query(SavedJob)
        .filter(SavedJob.user_email == user_email, SavedJob.job_id == coerce_record_id(job_id))
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def get_saved_jobs_by_user(db: Session, user_email: str) -> list[JobPosting]:
    saved = db.query(SavedJob.job_id).filter(SavedJob.user_email == user_email).all()
    return get_jobs_by_ids(db, [row.job_id for row in saved])
