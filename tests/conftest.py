"""Shared pytest fixtures. Each test gets its own SQLite file database."""

import logging
import os
import tempfile
from uuid import uuid4

# settings are read once at import, so the environment must be ready first
_TEST_ROOT = tempfile.mkdtemp(prefix="notethread-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT}/bootstrap.db"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_DIR"] = os.path.join(_TEST_ROOT, "logs")
os.environ["NOTETHREAD_SKIP_LIFESPAN_DB"] = "1"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.notethread.core.models import BaseModel, User
from src.notethread.database import get_db_session
from src.notethread.main import app
from src.notethread.security.jwt import create_access_token
from src.notethread.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
async def test_engine(tmp_path):
    """Fresh file-backed SQLite engine with all tables created."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )

    # SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Session for tests that talk to repositories directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app, with one session per request like production."""

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory):
    """Insert a user row and return it."""

    async def _make(username: str = None, password: str = "password123") -> User:
        username = username or f"user_{uuid4().hex[:8]}"
        async with session_factory() as session:
            user = User(
                username=username,
                email=f"{username}@example.com",
                password_hash=hash_password(password),
            )
            session.add(user)
            await session.commit()
            return user

    return _make


def auth_headers(user: User) -> dict:
    token = create_access_token(user.id, user.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return auth_headers
