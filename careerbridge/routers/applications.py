from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from careerbridge.database import get_db
from careerbridge.dependencies import get_current_admin
from careerbridge.models.account import Account
from careerbridge.repos import application_repo
from careerbridge.schemas.application import (
    ApplicantResponse,
    ApplicationResponse,
    ApplyRequest,
    StatusUpdateRequest,
)
from careerbridge.schemas.job import ApplicationStatusView, JobResponse

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_for_job(data: ApplyRequest, db: Session = Depends(get_db)):
    return application_repo.apply_for_job(
        db,
        data.user_email,
        data.job_id,
        resume_ref=data.resume_ref,
        cover_letter_ref=data.cover_letter_ref,
    )


@router.get("/job/{job_id}", response_model=list[ApplicantResponse])
def get_applicants_by_job(
    job_id: str,
    db: Session = Depends(get_db),
    admin: Account = Depends(get_current_admin),
):
    return [application_repo.applicant_view(a) for a in application_repo.get_applicants_by_job(db, job_id)]


@router.get("/user", response_model=list[JobResponse])
def get_applied_jobs_by_user(
    user_email: str = Query(..., alias="userEmail", min_length=1),
    db: Session = Depends(get_db),
):
    return [
        JobResponse.model_validate(item.job).model_copy(update={"application": ApplicationStatusView(status=item.status)})
        for item in application_repo.get_applied_jobs_by_user(db, user_email)
    ]


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
def update_applicant_status(
    application_id: str,
    data: StatusUpdateRequest,
    db: Session = Depends(get_db),
    admin: Account = Depends(get_current_admin),
):
    return application_repo.update_applicant_status(db, application_id, data.status)
