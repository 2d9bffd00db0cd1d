import os

# the app reads its settings at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from shared.core.auth import create_access_token
from shared.core.database import Base, RentalSessionLocal, rental_engine
from rental_service.app.main import app


def auth_headers(user_id: str) -> dict:
    token = create_access_token({"user_id": user_id, "name": "Test Owner"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def clean_database():
    Base.metadata.drop_all(bind=rental_engine)
    Base.metadata.create_all(bind=rental_engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = RentalSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def headers():
    return auth_headers("owner-1")


@pytest.fixture
def other_headers():
    return auth_headers("owner-2")
