import os

# Must be set before connectagrapher modules read settings
os.environ.setdefault("PYTEST_RUN", "1")
os.environ.setdefault("SKIP_DB_BOOTSTRAP", "1")
os.environ["ADMIN_API_TOKEN"] = "test-admin-token"
os.environ["EMAIL_TRANSPORT"] = ""
os.environ["RESEND_API_KEY"] = ""
os.environ["ENV_FILE"] = os.path.join(os.path.dirname(__file__), ".env.test")

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from connectagrapher.database import get_db
from connectagrapher.main import app
from connectagrapher.models.base import BaseModel
from connectagrapher.notifications import dispatcher
from connectagrapher.utils import background_worker

ADMIN_HEADERS = {"X-Admin-Token": "test-admin-token"}


def _run_inline(func, *args, retries=3, backoff=1, keep_result=True, **kwargs):
    try:
        background_worker._run_with_retry(func, *args, retries=retries, backoff=0, **kwargs)
    except Exception:
        # The worker logs and drops a job that exhausted its retries
        pass
    return "inline-task"


@pytest.fixture(autouse=True)
def sent_emails(monkeypatch):
    """Run email jobs inline and capture them instead of sending."""
    sent = []

    def fake_send(recipient, subject, html, sender, text=None):
        sent.append({"to": recipient, "subject": subject, "html": html, "from": sender})
        return True

    monkeypatch.setattr(dispatcher, "background_worker", SimpleNamespace(enqueue=_run_inline))
    monkeypatch.setattr(dispatcher, "send_email", fake_send)
    return sent


@pytest.fixture
def Session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BaseModel.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def client(Session):
    def override_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)


def _booking_payload(**overrides):
    payload = {
        "client_name": "Jane Brown",
        "email": "Jane@Example.com",
        "contact_number": "876-555-0101",
        "service_type": "photoshoot",
        "package_type": "gold",
        "parish": "Manchester",
        "has_photo_package": True,
        "has_video_package": False,
        "number_of_people": 1,
        "addons": [],
        "shoot_date": "2026-12-05",
        "shoot_time": "10:00",
        "location": "Treasure Beach",
        "referral_source": ["instagram"],
        "client_initials": "JB",
        "contract_accepted": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def booking_payload():
    """Builder for a valid booking request body; keyword args override fields."""
    return _booking_payload
