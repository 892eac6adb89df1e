import pytest

from careerbridge.repos import job_repo


@pytest.fixture
def job_id(db, company):
    return job_repo.create_job(db, {"email": "e1@x.com", "title": "Engineer", "description": "Build things"}).id


def _apply(client, job_id, email="u1@x.com"):
    return client.post("/applications", json={"userEmail": email, "jobId": job_id})


def test_apply_without_candidate_profile_is_not_found(client, job_id):
    resp = _apply(client, job_id)
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_apply_twice_scenario(client, job_id):
    resp = client.post("/profiles/candidate", json={"email": "u1@x.com", "firstName": "Uma"})
    assert resp.status_code == 200
    assert resp.json()["lastName"] == ""

    first = _apply(client, job_id)
    assert first.status_code == 201
    assert first.json()["status"] == "Pending"

    second = _apply(client, job_id)
    assert second.status_code == 409
    assert "already applied" in second.json()["detail"]


def test_applicants_and_status_flow(client, job_id, candidate, admin_headers):
    application_id = _apply(client, job_id).json()["id"]

    applicants = client.get(f"/applications/job/{job_id}", headers=admin_headers).json()
    assert len(applicants) == 1
    assert applicants[0]["userProfile"]["firstName"] == "Uma"
    assert applicants[0]["resumeRef"] == "/user_uploads/1700000000000-cv.pdf"

    resp = client.patch(f"/applications/{application_id}/status", json={"status": "Accepted"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "Accepted"

    resp = client.patch(f"/applications/{application_id}/status", json={"status": "Rejected"}, headers=admin_headers)
    assert resp.status_code == 409

    applied = client.get("/applications/user", params={"userEmail": "u1@x.com"}).json()
    assert applied[0]["id"] == job_id
    assert applied[0]["application"] == {"status": "Accepted"}


def test_status_update_requires_admin_and_valid_status(client, job_id, candidate, user_headers, admin_headers):
    application_id = _apply(client, job_id).json()["id"]
    resp = client.patch(f"/applications/{application_id}/status", json={"status": "Accepted"}, headers=user_headers)
    assert resp.status_code == 403
    assert resp.json()["error"] == "auth_error"
    resp = client.patch(f"/applications/{application_id}/status", json={"status": "Hired"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"


def test_saved_jobs_flow(client, job_id):
    payload = {"userEmail": "u1@x.com", "jobId": job_id}
    assert client.post("/saved-jobs", json=payload).json()["success"] is True
    second = client.post("/saved-jobs", json=payload).json()
    assert second == {"success": False, "message": "Job already saved."}

    saved = client.get("/saved-jobs", params={"userEmail": "u1@x.com"}).json()
    assert [j["id"] for j in saved] == [job_id]

    params = {"userEmail": "u1@x.com", "jobId": job_id}
    assert client.delete("/saved-jobs", params=params).json() is True
    assert client.delete("/saved-jobs", params=params).json() is False


def test_dashboard_stats(client, job_id, candidate, admin_headers, user_headers):
    _apply(client, job_id)
    resp = client.get("/admin/stats", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"totalJobs": 1, "totalUsers": 2, "pendingApplications": 1}
    assert client.get("/admin/stats", headers=user_headers).status_code == 403


def test_mixed_case_email_round_trips(client, job_id):
    payload = {"userEmail": "U1@X.COM", "jobId": job_id}
    assert client.post("/saved-jobs", json=payload).json()["success"] is True
    saved = client.get("/saved-jobs", params={"userEmail": "U1@X.COM"}).json()
    assert [j["id"] for j in saved] == [job_id]
    assert client.delete("/saved-jobs", params={"userEmail": "U1@X.COM", "jobId": job_id}).json() is True

    client.post("/profiles/candidate", json={"email": "U1@X.COM", "firstName": "Uma"})
    assert _apply(client, job_id, email="U1@X.COM").status_code == 201
    applied = client.get("/applications/user", params={"userEmail": "U1@X.COM"}).json()
    assert [j["id"] for j in applied] == [job_id]


def test_snake_case_query_params_are_not_accepted(client):
    resp = client.get("/saved-jobs", params={"user_email": "u1@x.com"})
    assert resp.status_code == 400
    assert "userEmail" in resp.json()["detail"]
