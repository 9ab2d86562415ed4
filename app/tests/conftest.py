import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.memory_store import StudentStore
from app.main import create_app


@pytest.fixture
def store():
    return StudentStore()


@pytest.fixture
def client():
    """Client over a fresh, unseeded store."""
    app = create_app(Settings(seed_sample_data=False))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client():
    app = create_app(Settings(seed_sample_data=True))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def john():
    return {
        "name": "John Doe",
        "rollNumber": "R1001",
        "email": "john.doe@example.com",
        "mobile": "1234567890",
    }


@pytest.fixture
def jane():
    return {
        "name": "Jane Smith",
        "rollNumber": "R2001",
        "email": "jane.smith@example.com",
        "mobile": "9876543210",
    }
