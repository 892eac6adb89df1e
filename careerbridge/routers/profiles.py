from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from careerbridge.database import get_db
from careerbridge.repos import profile_repo
from careerbridge.schemas.profile import (
    CandidateProfileInput,
    CandidateProfileResponse,
    CompanyProfileInput,
    CompanyProfileResponse,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("/company", response_model=CompanyProfileResponse)
def save_company_profile(data: CompanyProfileInput, db: Session = Depends(get_db)):
    return profile_repo.save_company_profile(db, data.model_dump())


@router.get("/company", response_model=CompanyProfileResponse | None)
def get_company_profile(email: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return profile_repo.get_company_profile(db, email)


@router.post("/candidate", response_model=CandidateProfileResponse)
def save_candidate_profile(data: CandidateProfileInput, db: Session = Depends(get_db)):
    return profile_repo.save_candidate_profile(db, data.model_dump())


@router.put("/candidate", response_model=CandidateProfileResponse)
def update_candidate_profile(data: CandidateProfileInput, db: Session = Depends(get_db)):
    """Same upsert as POST; kept for clients that edit an existing profile."""
    return profile_repo.save_candidate_profile(db, data.model_dump())


@router.get("/candidate", response_model=CandidateProfileResponse | None)
def get_candidate_profile(email: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return profile_repo.get_candidate_profile(db, email)
