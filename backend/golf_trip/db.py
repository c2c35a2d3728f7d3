import os
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool, StaticPool


engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[sessionmaker] = None
Base = declarative_base()


def database_url() -> str:
    """``DATABASE_URL`` with plain ``postgresql://`` upgraded to ``asyncpg``.

    Shared by the application engine and the Alembic environment.
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # Deleting a round only cascades to its scores and bets with this on.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> AsyncEngine:
    """Return the engine, creating it from ``DATABASE_URL`` on first use."""

    global engine, AsyncSessionLocal

    if engine is None:
        url = database_url()
        engine_kwargs = {"echo": False}
        is_sqlite = url.startswith("sqlite+aiosqlite://")

        if is_sqlite:
            # An in-memory database lives only as long as its one connection.
            engine_kwargs["poolclass"] = StaticPool if ":memory:" in url else NullPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        engine = create_async_engine(url, **engine_kwargs)
        if is_sqlite:
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        AsyncSessionLocal = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )

    return engine


async def get_session() -> AsyncSession:
    """Provide a database session for FastAPI dependencies."""

    if AsyncSessionLocal is None:
        get_engine()

    assert AsyncSessionLocal is not None  # for type checkers
    async with AsyncSessionLocal() as session:
        yield session
