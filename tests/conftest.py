import os

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Test config before any app import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_DEBUG"] = "false"

from incidentdesk.db.base import Base  # noqa: E402
from incidentdesk.dependencies import get_db  # noqa: E402
from incidentdesk.main import app  # noqa: E402

INCIDENT_PAYLOAD = {
    "title": "Unusual outbound traffic",
    "type": "Network",
    "severity": "High",
    "description": "Detected anomalous traffic to unknown host",
    "reporter": "J. Doe",
}


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def create_incident(client):
    async def _create(**overrides):
        res = await client.post("/api/incidents", json={**INCIDENT_PAYLOAD, **overrides})
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _create
