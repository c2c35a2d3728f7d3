import asyncio
import os
import sys
from collections.abc import Iterable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Register every model with the declarative Base before create_all runs.
from golf_trip import db, models  # noqa: F401


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def session_maker():
    """Fresh in-memory database with the full schema for one test."""

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async def init_schema() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(db.Base.metadata.create_all)

    asyncio.run(init_schema())
    yield maker
    asyncio.run(engine.dispose())


@pytest.fixture()
def api_client(session_maker):
    from fastapi.testclient import TestClient

    from golf_trip.main import app

    async def override_get_session() -> Iterable[AsyncSession]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[db.get_session] = override_get_session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def seed(session_maker):
    """Persist ORM objects into the test database, in order."""

    def add(*objects) -> None:
        async def run() -> None:
            async with session_maker() as session:
                for obj in objects:
                    session.add(obj)
                    await session.flush()
                await session.commit()

        asyncio.run(run())

    return add
