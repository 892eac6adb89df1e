import pytest

from careerbridge.core.errors import ValidationError
from careerbridge.models.profile import CandidateProfile, CompanyProfile
from careerbridge.repos import profile_repo


def test_save_company_profile_requires_email_and_name(db):
    with pytest.raises(ValidationError):
        profile_repo.save_company_profile(db, {"company_name": "Acme"})
    with pytest.raises(ValidationError):
        profile_repo.save_company_profile(db, {"email": "e1@x.com", "company_name": "  "})


def test_save_company_profile_rejects_unknown_fields(db):
    with pytest.raises(ValidationError) as ex:
        profile_repo.save_company_profile(db, {"email": "e1@x.com", "company_name": "Acme", "ceo": "Bob"})
    assert "ceo" in ex.value.message


def test_company_profile_upsert_replaces_in_place(db):
    first = profile_repo.save_company_profile(
        db, {"email": "e1@x.com", "company_name": "Acme", "industry": "Tools", "founded_year": 1999}
    )
    second = profile_repo.save_company_profile(db, {"email": "e1@x.com", "company_name": "Acme Corp"})
    assert second.id == first.id
    assert second.company_name == "Acme Corp"
    assert second.industry is None
    assert db.query(CompanyProfile).count() == 1
    assert profile_repo.get_company_profile(db, "e1@x.com").company_name == "Acme Corp"
    assert profile_repo.get_company_profile(db, "none@x.com") is None


def test_candidate_profile_upsert_is_idempotent_and_fully_defaulted(db):
    first = profile_repo.save_candidate_profile(db, {"email": "u1@x.com", "first_name": "Uma", "city": "Oslo"})
    assert first.last_name == ""
    assert first.photo_ref == ""
    first_updated_at = first.updated_at
    assert first_updated_at is not None

    second = profile_repo.save_candidate_profile(db, {"email": "u1@x.com", "first_name": "Uma", "city": "Bergen"})
    assert second.city == "Bergen"
    assert db.query(CandidateProfile).filter(CandidateProfile.email == "u1@x.com").count() == 1
    assert second.updated_at >= first_updated_at


def test_save_candidate_profile_requires_email(db):
    with pytest.raises(ValidationError):
        profile_repo.save_candidate_profile(db, {"first_name": "Uma"})


def test_candidate_snapshot_is_a_detached_copy(db, candidate):
    snapshot = profile_repo.candidate_snapshot(candidate)
    assert snapshot["email"] == "u1@x.com"
    assert snapshot["resume_ref"] == "/user_uploads/1700000000000-cv.pdf"
    assert snapshot["id"] == candidate.id
    assert isinstance(snapshot["updated_at"], str)
    profile_repo.save_candidate_profile(db, {"email": "u1@x.com", "first_name": "Changed"})
    assert snapshot["first_name"] == "Uma"
