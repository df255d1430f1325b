"""Shared fixtures: a throwaway SQLite database per test and an ASGI client."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from app.infra import database
from app.infra.database import create_schema, make_session_factory
from app.main import app


@pytest_asyncio.fixture(name="engine")
async def engine_fixture(tmp_path) -> AsyncEngine:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'vufs.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # pysqlite's own BEGIN handling breaks SAVEPOINT; SQLAlchemy emits it instead
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(engine: AsyncEngine) -> AsyncSession:
    factory = make_session_factory(engine)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(engine: AsyncEngine, monkeypatch) -> AsyncClient:
    """HTTP client whose requests use the test database through the real get_db."""
    monkeypatch.setattr(database, "_engine", engine)
    monkeypatch.setattr(database, "_session_factory", make_session_factory(engine))

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
