import pytest
from fastapi.testclient import TestClient

from careerbridge.core.rate_limiter import rate_limiter
from careerbridge.core.security import create_access_token
from careerbridge.database import Database
from careerbridge.main import app
from careerbridge.repos import profile_repo, user_repo
from careerbridge.services.blob_store import ObjectStore, StagedStore, get_object_store, get_staged_store

ADMIN_EMAIL = "e1@x.com"
CANDIDATE_EMAIL = "u1@x.com"


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def staged_store(tmp_path) -> StagedStore:
    return StagedStore(tmp_path / "public", max_bytes=1024 * 1024, chunk_size=16)


@pytest.fixture
def object_store() -> ObjectStore:
    # Tiny chunks so multi-chunk payloads are exercised
    return ObjectStore(chunk_size=8, max_bytes=1024 * 1024)


@pytest.fixture
def company(db):
    return profile_repo.save_company_profile(db, {"email": ADMIN_EMAIL, "company_name": "Acme"})


@pytest.fixture
def candidate(db):
    return profile_repo.save_candidate_profile(
        db,
        {
            "email": CANDIDATE_EMAIL,
            "first_name": "Uma",
            "last_name": "Lee",
            "city": "Toronto",
            "resume_ref": "/user_uploads/1700000000000-cv.pdf",
        },
    )


@pytest.fixture
def client(database, staged_store, object_store):
    app.state.database = database
    app.dependency_overrides[get_staged_store] = lambda: staged_store
    app.dependency_overrides[get_object_store] = lambda: object_store
    rate_limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.database = None


@pytest.fixture
def admin_headers(db) -> dict:
    account = user_repo.signup(db, ADMIN_EMAIL, "Pw1!aaaa", "Alice", "admin")
    return {"Authorization": f"Bearer {create_access_token(account.id)}"}


@pytest.fixture
def user_headers(db) -> dict:
    account = user_repo.signup(db, CANDIDATE_EMAIL, "Pw2!bbbb", "Uma", "user")
    return {"Authorization": f"Bearer {create_access_token(account.id)}"}
