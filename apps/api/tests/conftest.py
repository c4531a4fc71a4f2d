"""
Pytest configuration and fixtures

Tests run against a throwaway SQLite file. The schema is dropped and
recreated for every test, so nothing leaks between tests.
"""
import os
import sys
import tempfile

import pytest

# Add the parent directory to the path so we can import app modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Environment must be in place before core.config is imported
_TEST_DB_DIR = tempfile.mkdtemp(prefix="fittrack-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-at-least-32-chars")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

from fastapi.testclient import TestClient
from sqlalchemy import event

from core.database import Base, SessionLocal, engine
from core.security import create_user_token, get_password_hash
from main import app
from models import User, PresetExercise


# Test code reads through its own session while the app writes through another
@event.listens_for(engine, "connect")
def _sqlite_wal(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


@pytest.fixture(scope="function")
def db_session():
    """Fresh schema per test, plus a session for arranging and checking rows."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    return TestClient(app)


def make_user(db, username: str = "alice", password: str = "s3cret-pass", email: str = None) -> User:
    user = User(
        username=username,
        email=email or f"{username}@example.com",
        password_hash=get_password_hash(password),
        display_name=username.title(),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_user_token(user.id, user.username)}"}


@pytest.fixture
def test_user(db_session):
    """
    Create a test user.

    No cleanup needed - the schema is rebuilt for the next test.
    """
    return make_user(db_session)


@pytest.fixture
def other_user(db_session):
    return make_user(db_session, username="bob")


@pytest.fixture
def presets(db_session):
    rows = [
        PresetExercise(name="Push-ups", category="strength", duration=10),
        PresetExercise(name="Easy Run", category="cardio", duration=30),
        PresetExercise(name="Yoga Flow", category="mobility", duration=20),
    ]
    db_session.add_all(rows)
    db_session.commit()
    for row in rows:
        db_session.refresh(row)
    return rows
