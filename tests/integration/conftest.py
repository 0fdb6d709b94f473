"""
Integration test fixtures. Overrides get_db with the in-memory DB, and get_tutor
and get_content_generator with fakes, for API tests.
"""
import pytest


@pytest.fixture
def override_get_db(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def tutor(make_tutor):
    return make_tutor()


@pytest.fixture
def generator(make_generator):
    return make_generator()


@pytest.fixture
def api_client(override_get_db, tutor, generator):
    """FastAPI TestClient with in-memory DB, fake tutor and fake generator overrides."""
    from fastapi.testclient import TestClient
    from api.api import app
    from api.bootstrap import get_content_generator, get_tutor
    from api.config import get_db
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_tutor] = lambda: tutor
    app.dependency_overrides[get_content_generator] = lambda: generator
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def student_client(api_client):
    """API client logged in as a freshly registered student (cookie kept on the client)."""
    response = api_client.post(
        "/auth/register",
        json={
            "email": "amani@example.com",
            "password": "securepass123",
            "confirmPassword": "securepass123",
            "firstName": "Amani",
        },
    )
    assert response.status_code == 200
    return api_client


@pytest.fixture
def teacher_client(api_client, db_session):
    from api.utils.auth import create_user
    create_user("mwalimu@example.com", "teachpass", db_session, first_name="Mwalimu", role="teacher")
    response = api_client.post("/auth/login", json={"email": "mwalimu@example.com", "password": "teachpass"})
    assert response.status_code == 200
    return api_client


@pytest.fixture
def seeded(db_session):
    from api.seed import seed_initial_data
    seed_initial_data(db_session)
    return db_session
