import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["UPLOAD_RATE_LIMIT"] = "1000/minute"
os.environ.pop("PARAMETER_STORE_REGION", None)

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from main import app
from photobooth.db.base import Base
from photobooth.db.models.Admin import Admin
from photobooth.db.models.Event import Event
from photobooth.db.models.Photo import Photo
from photobooth.db.session import engine, SessionLocal
from photobooth.security.auth import create_access_token


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def auth_headers(email, device_id=None):
    token = create_access_token({"sub": email, "email": email})
    headers = {"Authorization": f"Bearer {token}"}
    if device_id:
        headers["X-Device-Id"] = device_id
    return headers


@pytest.fixture
def seeded(db):
    """
    Admin 7 (owner@example.com) owns events 1 "gala" and 2 "launch";
    admin 8 (other@example.com) owns event 3 "retreat". Event 1 has two
    photos, event 3 has one.
    """
    db.add_all([
        Admin(id=7, email="owner@example.com"),
        Admin(id=8, email="other@example.com"),
    ])
    db.add_all([
        Event(id=1, event_title="gala", event_date=datetime(2025, 3, 1, 19, 0), admin_id=7,
              created_at=datetime(2025, 1, 6, 15, 4)),
        Event(id=2, event_title="launch", event_date=datetime(2025, 4, 12, 9, 30), admin_id=7,
              created_at=datetime(2025, 1, 7, 8, 0)),
        Event(id=3, event_title="retreat", event_date=datetime(2025, 5, 20, 12, 0), admin_id=8,
              created_at=datetime(2025, 1, 8, 8, 0)),
    ])
    db.add_all([
        Photo(id=1, blob_id="blob-a", object_id="0xa", event_id=1, user="guest-1"),
        Photo(id=2, blob_id="blob-b", object_id="0xb", event_id=1),
        Photo(id=3, blob_id="blob-c", object_id="0xc", event_id=3),
    ])
    db.commit()
    return db


@pytest.fixture
def headers_for():
    return auth_headers
