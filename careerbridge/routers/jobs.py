import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from careerbridge.core.errors import PermissionDeniedError
from careerbridge.database import get_db
from careerbridge.dependencies import get_current_admin
from careerbridge.models.account import Account
from careerbridge.repos import job_repo
from careerbridge.schemas.job import JobInput, JobResponse, JobUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def _require_owner(email: str, admin: Account) -> None:
    # A posting belongs to the company whose email it carries
    if email != admin.email:
        logger.info("Forbidden: %s tried to manage a posting owned by %s", admin.email, email)
        raise PermissionDeniedError("Job postings can only be managed by the owning company")


@router.get("", response_model=list[JobResponse])
def get_all_jobs(db: Session = Depends(get_db)):
    return job_repo.get_all_jobs(db)


@router.get("/{job_id}", response_model=JobResponse | None)
def get_job_by_id(job_id: str, db: Session = Depends(get_db)):
    return job_repo.get_job_by_id(db, job_id)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    data: JobInput,
    db: Session = Depends(get_db),
    admin: Account = Depends(get_current_admin),
):
    _require_owner(data.email, admin)
    return job_repo.create_job(db, data.model_dump())


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    data: JobUpdate,
    db: Session = Depends(get_db),
    admin: Account = Depends(get_current_admin),
):
    job = job_repo.get_job_by_id(db, job_id)
    if job is not None:
        _require_owner(job.email, admin)
    return job_repo.update_job(db, job_id, data.model_dump(exclude_unset=True))


@router.delete("/{job_id}", response_model=bool)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    admin: Account = Depends(get_current_admin),
):
    job = job_repo.get_job_by_id(db, job_id)
    if job is not None:
        _require_owner(job.email, admin)
    deleted = job_repo.delete_job(db, job_id)
    if deleted:
        logger.info("Job %s deleted by %s", job_id, admin.email)
    return deleted
