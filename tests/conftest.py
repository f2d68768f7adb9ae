"""
Shared fixtures. The environment is set BEFORE any app code is imported so
the module-level engine binds to an in-memory SQLite database.
"""
import os

import pytest

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENFORCE_SKILL_VOCABULARY"] = "false"

from app import create_app  # noqa: E402
from db.database import SessionLocal, drop_db  # noqa: E402


@pytest.fixture
def app():
    """Fresh application and empty employees table for every test."""
    drop_db()
    application = create_app({"TESTING": True})
    with application.app_context():
        yield application
    SessionLocal.remove()
    drop_db()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ann():
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "mobile_no": "12345",
        "skills": ["php", "mysql"],
    }


@pytest.fixture
def bob():
    return {
        "name": "Bob",
        "email": "bob@x.com",
        "mobile_no": "67890",
        "skills": ["react"],
    }
