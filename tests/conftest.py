from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.session import Base, get_db
from app.storage.base import ScheduleStorage
from app.storage.database import SqlAlchemyStorage
from app.storage.dependencies import get_storage
from app.storage.memory import MemoryStorage


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture()
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory SQLite database with all tables, one per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async_session = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session
    await engine.dispose()


@pytest.fixture(params=["memory", "database"])
async def storage(request, db_session: AsyncSession) -> ScheduleStorage:
    """Both storage backends; API tests run once against each."""
    if request.param == "memory":
        return MemoryStorage()
    return SqlAlchemyStorage(db_session)


@pytest.fixture()
async def client(storage: ScheduleStorage, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app, with storage overridden for the test."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture()
async def teacher(client: AsyncClient) -> dict:
    response = await client.post("/api/teachers", json={"name": "Ahmad Saleh", "subject": "Mathematics"})
    assert response.status_code == 201
    return response.json()
