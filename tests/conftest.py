"""
- Spins up temp test DB
- Create tables before tests run
- Provide a db_session fixture and override FastAPI's get_db so routes use the test session.
- Provide a client fixture (TestClient(app)) that already has the DB override applied.
- Provide engine-level fixtures: a game id, the standard secret/pegs, a started game.
"""
import os
import pytest
from typing import Generator
from uuid import uuid4

# Ensure the app does NOT run dev-only startup hooks and never calls random.org
os.environ.setdefault("APP_ENV", "test")
os.environ["RANDOM_ORG_ENABLED"] = "false"
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from codebreaker.db import Base, get_db
from codebreaker.main import app
from codebreaker import models  # noqa: F401
from codebreaker.domain import Code, GameStarted, set_of_pegs

# Use SQLite in-memory for tests (fast, isolated)
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"

ALL_PEGS = ("Red", "Green", "Blue", "Yellow", "Purple", "Pink")


@pytest.fixture(scope="session")
def engine():
    # StaticPool + check_same_thread=False lets Starlette's TestClient and SQLAlchemy
    # share ONE in-memory SQLite database across threads. Otherwise each thread would
    # see a different empty DB.
    engine = create_engine(
        TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(engine) -> Generator:
    """Provide a clean session per test with rollback."""
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
        db.rollback()
    finally:
        db.close()


@pytest.fixture(autouse=True)
def _clean_db(engine):
    """The store commits on every append, so wipe the log before each test."""
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM events"))
    yield


@pytest.fixture(autouse=True)
def override_dep(db_session):
    """Force the app to use our test session for every request."""
    def _get_db_for_tests():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _get_db_for_tests
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


# --- engine fixtures ---

@pytest.fixture
def game_id() -> str:
    return str(uuid4())


@pytest.fixture
def secret() -> Code:
    return Code.of("Red", "Green", "Blue", "Yellow")


@pytest.fixture
def available_pegs():
    return set_of_pegs(*ALL_PEGS)


@pytest.fixture
def started_game(game_id, secret, available_pegs):
    return [GameStarted(game_id, secret, 12, available_pegs)]
