"""
Pytest configuration and fixtures following kkb_fastapi pattern.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.config import ConfigFile, get_config
from app.create_app import get_app
from app.database import Base
from app.database.base import get_db_url, get_engine_kw
from app.database.session_manager.db_session import Database
from app.test.factory.activity import OWNER_A, OWNER_B
from app.utils.constants import OWNER_ID_HEADER

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration with test database settings.
    """
    return get_config(ConfigFile.TEST)


@pytest_asyncio.fixture(scope="function")
async def test_async_engine(test_config):
    """
    Create async database engine for testing.
    """
    async_db_url = get_db_url(test_config)
    test_engine = create_async_engine(async_db_url, **get_engine_kw(async_db_url))

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function", autouse=True)
async def db_cleanup(test_async_engine):
    """
    Clean database before and after each test.

    Drops all tables, recreates them, then drops again after test.
    """
    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_db_session(test_config, db_cleanup):
    """
    Initialize Database singleton for testing.

    Disposed before the tables are dropped.
    """
    async_db_url = get_db_url(test_config)
    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))

    yield

    await Database.close()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_config):
    """
    Create FastAPI application with test configuration.
    """
    app = get_app(ConfigFile.TEST)
    app.state.config = test_config

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_async_client(test_app):
    """
    Create async HTTP client for API testing.

    Uses httpx AsyncClient with ASGITransport for testing FastAPI endpoints.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def test_db_session():
    """
    Provide database session for tests.

    Creates async session using Database context manager.
    """
    async with Database() as session:
        yield session


@pytest.fixture
def owner_a_headers():
    return {OWNER_ID_HEADER: OWNER_A}


@pytest.fixture
def owner_b_headers():
    return {OWNER_ID_HEADER: OWNER_B}
