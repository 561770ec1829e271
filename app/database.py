"""Database engines and session management."""

from collections.abc import AsyncGenerator

from sqlalchemy import create_engine, pool, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.config import settings


def _driver_url(url: str, driver: str) -> str:
    """Point a PostgreSQL URL (``postgres://`` or ``postgresql[+x]://``) at ``driver``."""
    parsed = make_url(url.replace("postgres://", "postgresql://", 1))
    return parsed.set(drivername=f"postgresql+{driver}").render_as_string(hide_password=False)


DATABASE_URL = _driver_url(settings.database_url, "asyncpg")
SYNC_DATABASE_URL = _driver_url(settings.database_url, "psycopg2")

engine: AsyncEngine = create_async_engine(
    DATABASE_URL,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    pool_recycle=3600,
    connect_args={
        "server_settings": {
            "application_name": settings.app_name,
            "statement_timeout": str(settings.database_statement_timeout_ms),
        },
    },
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    One session per request.

    Repositories commit their own writes; anything left open when the
    request fails is rolled back here.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# Alembic and scripts run synchronously
sync_engine: Engine = create_engine(SYNC_DATABASE_URL, poolclass=pool.NullPool)


async def check_database_connection() -> bool:
    """Check if database connection is healthy."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
