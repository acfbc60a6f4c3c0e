import os

# Must be set before the app (and its engine) is imported
os.environ["TESTING"] = "1"
# In-memory so the startup hook's init_db leaves no file behind
os.environ["TEST_DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from healthbook.main import app
from healthbook.core.config import get_settings, settings
from healthbook.core.database import get_db, Base

# In-memory database shared across connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

DEFAULT_PASSWORD = "pw123456"

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def override_settings():
    """Swap settings for the duration of a test: override_settings(STRICT_APPOINTMENT_UPDATES=False)."""
    def _override(**changes):
        patched = settings.model_copy(update=changes)
        app.dependency_overrides[get_settings] = lambda: patched
        return patched

    yield _override
    app.dependency_overrides.pop(get_settings, None)

@pytest.fixture
def register(client):
    def _register(email, role="patient", password=DEFAULT_PASSWORD):
        return client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "role": role}
        )
    return _register

@pytest.fixture
def login(client):
    def _login(email, password=DEFAULT_PASSWORD, **extra):
        return client.post("/api/auth/login", json={"email": email, "password": password, **extra})
    return _login

@pytest.fixture
def auth_headers(register, login):
    """Register (if needed) and log in, returning an Authorization header."""
    def _auth_headers(email, role="patient", password=DEFAULT_PASSWORD):
        register(email, role=role, password=password)
        response = login(email, password=password)
        assert response.status_code == 200, response.json()
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _auth_headers
