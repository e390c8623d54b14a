"""
Shared fixtures for the Event Hub API tests.

The application reads its settings when first imported, so the test
environment (upload directory, missing frontend directory, cheap bcrypt
cost) is set up here BEFORE the app is imported.  Every test gets a
fresh in-memory ``mongomock`` database with the production indexes,
injected through the ``get_db`` dependency.
"""

import os
import tempfile

_TMP_ROOT = tempfile.mkdtemp(prefix="event_hub_tests_")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_ROOT, "uploads")
os.environ["PUBLIC_DIR"] = os.path.join(_TMP_ROOT, "no-frontend")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["MONGO_URI"] = "mongodb://localhost:27017/event_hub_test"

import mongomock  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from event_hub_api.app.core.config import settings  # noqa: E402
from event_hub_api.app.core.db import get_db, init_db  # noqa: E402
from event_hub_api.app.main import app  # noqa: E402


@pytest.fixture
def db():
    """Fresh in-memory database with the application's indexes."""
    mongo = mongomock.MongoClient()
    database = mongo["event_hub_test"]
    init_db(database)
    yield database
    mongo.close()


@pytest.fixture
def client(db):
    """Test client whose routes all talk to the ``db`` fixture."""
    app.dependency_overrides[get_db] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def upload_dir():
    """The directory uploads are written to (and served from)."""
    path = settings.upload_dir
    os.makedirs(path, exist_ok=True)
    return path


@pytest.fixture
def registered_user(client):
    """Sign up a user through the API and return its credentials and id."""
    credentials = {"name": "Ada", "email": "ada@example.com", "password": "s3cret"}
    resp = client.post("/signup", json=credentials)
    assert resp.status_code == 201
    login = client.post("/login", json={"email": credentials["email"], "password": credentials["password"]})
    return {**credentials, "id": login.json()["user"]["id"]}
