import pytest

from careerbridge.core.errors import NotFoundError, ValidationError
from careerbridge.models.job_posting import JobPosting
from careerbridge.repos import job_repo, profile_repo, saved_job_repo


def _job(**overrides):
    data = {"email": "e1@x.com", "title": "Engineer", "description": "Build things", "must_have": ["Python"]}
    data.update(overrides)
    return data


def test_create_job_requires_resolvable_company(db):
    with pytest.raises(ValidationError) as ex:
        job_repo.create_job(db, _job())
    assert "no resolvable company" in ex.value.message.lower()
    assert db.query(JobPosting).count() == 0


def test_create_job_freezes_company_name(db, company):
    job = job_repo.create_job(db, _job())
    assert job.company_name == "Acme"
    assert job.must_have == ["Python"]
    assert job.created_at is not None

    profile_repo.save_company_profile(db, {"email": "e1@x.com", "company_name": "Renamed Inc"})
    db.expire_all()
    assert job_repo.get_job_by_id(db, job.id).company_name == "Acme"


def test_create_job_validates_input(db, company):
    with pytest.raises(ValidationError):
        job_repo.create_job(db, _job(title=""))
    with pytest.raises(ValidationError):
        job_repo.create_job(db, _job(headcount=3))


def test_update_job_by_ref_and_legacy_form(db, company):
    job = job_repo.create_job(db, _job())
    updated = job_repo.update_job(db, job.id.upper(), {"salary": "100k", "employment_type": "Full-time"})
    assert updated.salary == "100k"
    assert updated.employment_type == "Full-time"
    updated = job_repo.update_job(db, f'ObjectId("{job.id}")', {"title": "Senior Engineer"})
    assert updated.title == "Senior Engineer"
    assert updated.company_name == "Acme"


def test_update_job_errors(db, company):
    job = job_repo.create_job(db, _job())
    with pytest.raises(NotFoundError):
        job_repo.update_job(db, "65a1b2c3d4e5f60718293a4b", {"title": "X"})
    with pytest.raises(ValidationError):
        job_repo.update_job(db, job.id, {"email": "someone-else@x.com"})
    with pytest.raises(ValidationError):
        job_repo.update_job(db, job.id, {"description": ""})


def test_delete_job_is_idempotent_and_drops_bookmarks(db, company):
    job = job_repo.create_job(db, _job())
    saved_job_repo.save_job(db, "u1@x.com", job.id)
    assert job_repo.delete_job(db, job.id) is True
    assert job_repo.delete_job(db, job.id) is False
    assert saved_job_repo.get_saved_jobs_by_user(db, "u1@x.com") == []


def test_get_all_jobs_in_creation_order(db, company):
    first = job_repo.create_job(db, _job(title="First"))
    second = job_repo.create_job(db, _job(title="Second"))
    assert [j.id for j in job_repo.get_all_jobs(db)] == [first.id, second.id]
    assert job_repo.get_job_by_id(db, "65a1b2c3d4e5f60718293a4b") is None
