import os

# keep the test run away from the real database and disk
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401  (registers tables)
from app.core.rate_limit import limiter
from app.db import Base, get_db
from app.dependencies import get_storage_service
from app.domain.enums import JobStatus
from app.main import app
from app.services.gateway import Gateway
from app.services.storage import LocalStorage, Storage
from app.workflow.status import LifecycleManager

limiter.enabled = False


class RecordingStorage(Storage):
    """In-memory backend that remembers every write."""

    def __init__(self):
        super().__init__("uploads/")
        self.saved = {}

    def save_bytes(self, key, data, content_type):
        self.saved[key] = (data, content_type)

    def public_url(self, key):
        return f"https://files.example.com/{key}"

    def exists(self, key):
        return key in self.saved

    def delete(self, key):
        return self.saved.pop(key, None) is not None


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def gateway(db):
    return Gateway(db)


@pytest.fixture
def lifecycle(gateway):
    return LifecycleManager(gateway)


@pytest.fixture
def recording_storage():
    return RecordingStorage()


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(base_path=str(tmp_path / "files"), base_url="http://testserver")


@pytest.fixture
def client(engine, local_storage):
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def _get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage_service] = lambda: local_storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_listing(gateway):
    def _make(status=JobStatus.PUBLISHED, **fields):
        data = {
            "title": {"en": "CNC Machinist", "fr": "Machiniste CNC"},
            "description": {"en": "Run and set up CNC mills."},
            "department": "Production",
            "status": status,
        }
        data.update(fields)
        return gateway.create(models.JobListing, data)

    return _make


@pytest.fixture
def quote_payload():
    return {
        "firstName": "Ana",
        "lastName": "Lee",
        "email": "ana@x.com",
        "description": "Need a bracket machined",
        "serviceType": "Machining",
        "urgency": "Medium",
    }


@pytest.fixture
def application_payload():
    def _payload(job_id):
        return {
            "fullName": "Sam Ortiz",
            "email": "sam@x.com",
            "phone": "+1 234 567 890",
            "cvUrl": "https://files.example.com/uploads/cv.pdf",
            "jobId": job_id,
        }

    return _payload
