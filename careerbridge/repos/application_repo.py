"""
Application ledger: one application per (job, candidate), with a status that moves
Pending -> Accepted or Pending -> Rejected and then stays put.

Applications and job postings are matched in Python (two queries, joined on job_id)
rather than with a SQL join; job_id is indexed on both sides.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from careerbridge.core.errors import ConflictError, NotFoundError, ValidationError
from careerbridge.core.ids import coerce_record_id, generate_ref
from careerbridge.models.application import (
    APPLICATION_STATUSES,
    STATUS_PENDING,
    TERMINAL_STATUSES,
    Application,
)
from careerbridge.models.job_posting import JobPosting
from careerbridge.repos.job_repo import get_job_by_id, get_jobs_by_ids
from careerbridge.repos.profile_repo import APPLICANT_FIELDS, candidate_snapshot, get_candidate_profile

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "You have already applied for this job."


@dataclass
class AppliedJob:
    job: JobPosting
    status: str


def get_application(db: Session, job_id: str, user_email: str) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.job_id == job_id, Application.user_email == user_email)
        .first()
    )


def get_by_id(db: Session, application_id: str) -> Application | None:
    return db.query(Application).filter(Application.id == coerce_record_id(application_id)).first()


def apply_for_job(
    db: Session,
    user_email: str,
    job_id: str,
    resume_ref: str | None = None,
    cover_letter_ref: str | None = None,
) -> Application:
    if not user_email:
        raise ValidationError("User email is required")
    job = get_job_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")
    profile = get_candidate_profile(db, user_email)
    if not profile:
        raise NotFoundError("Candidate profile not found. Complete your profile before applying.")
    if get_application(db, job.id, user_email):
        raise ConflictError(ALREADY_APPLIED)

    application = Application(
        id=generate_ref(),
        job_id=job.id,
        user_email=user_email,
        candidate_snapshot=candidate_snapshot(profile),
        resume_ref=resume_ref or profile.resume_ref or None,
        cover_letter_ref=cover_letter_ref or profile.cover_letter_ref or None,
        applied_at=datetime.now(timezone.utc),
        status=STATUS_PENDING,
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost the race to a concurrent apply; the unique (job_id, user_email) index decides
        db.rollback()
        raise ConflictError(ALREADY_APPLIED) from e
    db.refresh(application)
    logger.info("Application recorded: %s applied to job %s", user_email, job.id)
    return application


def get_applicants_by_job(db: Session, job_id: str) -> list[Application]:
    return (
        db.query(Application)
        .filter(Application.job_id == coerce_record_id(job_id))
        .order_by(Application.applied_at.asc(), Application.id.asc())
        .all()
    )


def applicant_view(application: Application) -> dict:
    """Listing shape for employers: contact fields from the snapshot taken at apply time."""
    snapshot = application.candidate_snapshot or {}
    return {
        "id": application.id,
        "user_email": application.user_email,
        "user_profile": {field: snapshot.get(field) or "" for field in APPLICANT_FIELDS} if snapshot else None,
        "resume_ref": application.resume_ref,
        "cover_letter_ref": application.cover_letter_ref,
        "applied_at": application.applied_at,
        "status": application.status,
    }


def get_applied_jobs_by_user(db: Session, user_email: str) -> list[AppliedJob]:
    applications = db.query(Application).filter(Application.user_email == user_email).all()
    if not applications:
        return []
    status_by_job = {a.job_id: a.status for a in applications}
    jobs = get_jobs_by_ids(db, list(status_by_job))
    # Postings deleted after the application simply drop out
    return [AppliedJob(job=job, status=status_by_job.get(job.id) or STATUS_PENDING) for job in jobs]


def update_applicant_status(db: Session, application_id: str, status: str) -> Application:
    if status not in APPLICATION_STATUSES:
        raise ValidationError(f"Status must be one of {', '.join(APPLICATION_STATUSES)}")
    application = get_by_id(db, application_id)
    if not application:
        raise NotFoundError("Application not found")
    if application.status == status:
        return application
    if application.status in TERMINAL_STATUSES:
        raise ConflictError(f"Application is already {application.status}; its status can no longer change")

    # Conditional write so two reviewers cannot both decide the same pending application
    updated = (
        db.query(Application)
        .filter(Application.id == application.id, Application.status == STATUS_PENDING)
        .update({Application.status: status}, synchronize_session=False)
    )
    db.commit()
    db.refresh(application)
    if updated != 1 and application.status != status:
        raise ConflictError(f"Application is already {application.status}; its status can no longer change")
    logger.info("Application %s status -> %s", application.id, application.status)
    return application
