"""Pytest configuration for brain tests."""
import os
import tempfile
from pathlib import Path

# Settings are read once at import time; configure the process before brain loads
os.environ.setdefault('JWT_SECRET', 'test-secret-key-that-is-at-least-32-bytes')
os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('LOG_LEVEL', 'WARNING')
os.environ.setdefault(
    'DATABASE_URL',
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'brain-test-unused.db'}",
)

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from brain.api.dependencies.database import get_db
from brain.api.main import app as brain_app
from brain.shared.models import Base
from brain.shared.repositories.user_repository import UserRepository


TEST_SECRET = os.environ['JWT_SECRET']
PASSWORD = 'secret1'


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Fresh SQLite database with the full schema for each test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'brain.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory):
    """A single session for service and repository tests."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def user_factory(session):
    """Create users directly in the database, bypassing bcrypt."""
    counter = {'n': 0}

    async def create(username=None):
        counter['n'] += 1
        username = username or f"user{counter['n']}@example.com"
        return await UserRepository(session).create(username=username, password_hash='x')

    return create


@pytest_asyncio.fixture
async def app(session_factory):
    """The real application with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    brain_app.dependency_overrides[get_db] = override_get_db
    yield brain_app
    brain_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as client:
        yield client


@pytest.fixture
def api_prefix():
    from brain.config.settings import settings
    return settings.API_PREFIX


@pytest_asyncio.fixture
async def signed_in(client, api_prefix):
    """Sign up and sign in a user through the API; returns auth headers."""

    async def login(username='alice@example.com', password=PASSWORD):
        credentials = {'username': username, 'password': password}
        response = await client.post(f'{api_prefix}/signup', json=credentials)
        assert response.status_code == 200
        response = await client.post(f'{api_prefix}/signin', json=credentials)
        assert response.status_code == 200
        return {'Authorization': response.json()['token']}

    return login
