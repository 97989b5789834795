"""Shared test fixtures."""

import os

# Keep the application engine off the on-disk database during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import portfolio_api.models.database  # noqa: F401
from portfolio_api.api.middleware import wait_for_pending_usage
from portfolio_api.core.storage.database import Base
from portfolio_api.core.storage.database_storage import DatabaseStorage
from portfolio_api.models.schemas import (
    AgentCreate,
    AgentIntegrationCreate,
    ApiKeyCreate,
)


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """SQLite engine on a per-test database file; each session gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await wait_for_pending_usage()
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Database session for direct model tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage(session_factory):
    """DatabaseStorage over the test database."""
    return DatabaseStorage(session_factory)


@pytest_asyncio.fixture
async def api_key(storage):
    """An active API key."""
    return await storage.create_api_key(
        ApiKeyCreate(user_id="user-1", name="Test key", key="pk_test_active_key")
    )


@pytest_asyncio.fixture
async def admin_api_key(storage):
    """An active key allowed on the admin routes."""
    return await storage.create_api_key(
        ApiKeyCreate(user_id="admin", name="Admin key", key="pk_test_admin_key", is_admin=True)
    )


@pytest_asyncio.fixture
async def inactive_api_key(storage):
    """A deactivated API key."""
    created = await storage.create_api_key(
        ApiKeyCreate(user_id="user-1", name="Old key", key="pk_test_inactive_key")
    )
    return await storage.deactivate_api_key(created.id)


@pytest_asyncio.fixture
async def sample_agent(storage):
    """A registered agent."""
    return await storage.create_agent(
        AgentCreate(agent_id="agent-1", user_id="user-1", name="Support Bot")
    )


@pytest_asyncio.fixture
async def integration(storage, api_key, sample_agent):
    """Integration allowing example.com to use ``api_key``."""
    return await storage.create_agent_integration(
        AgentIntegrationCreate(
            agent_id=sample_agent.agent_id,
            api_key_id=api_key.id,
            domain="example.com",
        )
    )


@pytest.fixture
def auth_headers(api_key):
    """Headers authenticating with ``api_key``."""
    return {"Authorization": f"Bearer {api_key.key}"}


@pytest.fixture
def admin_headers(admin_api_key):
    """Headers authenticating with ``admin_api_key``."""
    return {"Authorization": f"Bearer {admin_api_key.key}"}
