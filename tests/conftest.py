"""Fixtures de test / Test fixtures.

Chaque test utilise une base SQLite neuve / Each test gets a fresh SQLite database.
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from companies_info.database import build_engine, get_db, init_db
from companies_info.main import app
from companies_info.persistence import DataContext
from companies_info.rate_limit import limiter


@pytest.fixture
async def engine(tmp_path):
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def context(session_factory):
    async with session_factory() as session:
        yield DataContext(session)


@asynccontextmanager
async def _api_client(session_factory, raise_app_exceptions: bool = True):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
async def client(session_factory):
    async with _api_client(session_factory) as ac:
        yield ac


@pytest.fixture
async def server_error_client(session_factory):
    """Client qui recoit la reponse 500 au lieu de l'exception / Receives the 500 response, not the exception."""
    async with _api_client(session_factory, raise_app_exceptions=False) as ac:
        yield ac
