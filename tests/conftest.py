"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from typing import Optional, Tuple
from uuid import UUID, uuid4

# keep the app from writing log files while tests import it
os.environ.setdefault("LOG_DIR", "null")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from notekeeper.config import Settings, get_settings
from notekeeper.database import Database, get_db_session
from notekeeper.main import app
from notekeeper.security import PasswordHasher, TokenService

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings():
    """Override settings for testing using SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        debug=True,
        password_hash_rounds=4,  # bcrypt minimum, keeps tests fast
        create_tables_on_startup=False,
        log_dir=None,
    )


@pytest.fixture
async def test_db(test_settings):
    """Fresh in-memory database per test."""
    db = Database(
        test_settings.database_url,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # Ensure SQLite enforces foreign key constraints (required for CASCADE)
    @event.listens_for(db.engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
async def test_session(test_db):
    """Session for tests that talk to repositories/services directly."""
    async with test_db.session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def hasher(test_settings):
    return PasswordHasher(rounds=test_settings.password_hash_rounds)


@pytest.fixture
def token_service(test_settings):
    return TokenService(
        secret_key=test_settings.secret_key,
        algorithm=test_settings.algorithm,
        expire_minutes=test_settings.access_token_expire_minutes,
    )


@pytest.fixture
def test_app(test_db, test_settings):
    """FastAPI app wired to the test database and settings."""

    async def _override_get_db():
        async for session in test_db.session():
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Async test client (the lifespan is not run)."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def signup_and_login(client, token_service):
    """Create an account through the API and return ``(user_id, headers)``."""

    async def _signup_and_login(
        name: str = "Test User", email: Optional[str] = None, password: str = "TestPassword123!"
    ) -> Tuple[UUID, dict]:
        email = email or f"user_{uuid4().hex[:8]}@example.com"
        resp = await client.post(
            "/auth/signup", json={"name": name, "email": email, "password": password}
        )
        assert resp.status_code == 201, resp.text

        resp = await client.post("/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]

        identity = token_service.verify(token)
        return identity.user_id, {"Authorization": f"Bearer {token}"}

    return _signup_and_login


@pytest.fixture
def note_payload():
    """Sample note data for testing."""

    def _note_payload(user_id: UUID, **overrides) -> dict:
        data = {
            "userId": str(user_id),
            "heading": "Groceries",
            "description": "Milk, eggs, bread",
            "tag": "home",
        }
        data.update(overrides)
        return data

    return _note_payload
