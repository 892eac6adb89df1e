from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from careerbridge.database import get_db
from careerbridge.repos import saved_job_repo
from careerbridge.schemas.application import SaveJobRequest
from careerbridge.schemas.common import ResponseMessage
from careerbridge.schemas.job import JobResponse

router = APIRouter(prefix="/saved-jobs", tags=["saved-jobs"])


@router.post("", response_model=ResponseMessage)
def save_job(data: SaveJobRequest, db: Session = Depends(get_db)):
    return ResponseMessage(**saved_job_repo.save_job(db, data.user_email, data.job_id))


@router.delete("", response_model=bool)
def delete_saved_job(
    user_email: str = Query(..., alias="userEmail", min_length=1),
    job_id: str = Query(..., alias="jobId", min_length=1),
    db: Session = Depends(get_db),
):
    return saved_job_repo.delete_saved_job(db, user_email, job_id)


@router.get("", response_model=list[JobResponse])
def get_saved_jobs_by_user(
    user_email: str = Query(..., alias="userEmail", min_length=1),
    db: Session = Depends(get_db),
):
    return saved_job_repo.get_saved_jobs_by_user(db, user_email)
