"""
Database Engine and Sessions

Async SQLAlchemy wiring for the whole API.

Per-request unit of work:
=========================
    request ──► get_db() opens AsyncSession
                  │
                  ├─ handler / services / repositories (flush only)
                  │
                  ├─ no exception  → COMMIT
                  ├─ exception     → ROLLBACK, re-raise
                  └─ always        → close, connection back to the pool

Pool settings (from Settings):
==============================
    DATABASE_POOL_SIZE      persistent connections
    DATABASE_MAX_OVERFLOW   extra connections under burst
    DATABASE_POOL_TIMEOUT   seconds a request waits for a connection
    pool_pre_ping           stale connections are replaced transparently
"""

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from brain.config.settings import Settings, settings
from brain.shared.core.logging import logger


# ═══════════════════════════════════════════════════════════════════════════════
# ENGINE
# ═══════════════════════════════════════════════════════════════════════════════


def create_engine_from_settings(config: Settings) -> AsyncEngine:
    """Async engine for config.DATABASE_URL with the configured pool limits."""
    return create_async_engine(
        config.DATABASE_URL,
        echo=config.DEBUG,
        pool_size=config.DATABASE_POOL_SIZE,
        max_overflow=config.DATABASE_MAX_OVERFLOW,
        pool_timeout=config.DATABASE_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


engine = create_engine_from_settings(settings)

# expire_on_commit=False keeps loaded rows readable after commit;
# repositories flush explicitly, so autoflush is off
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


# ═══════════════════════════════════════════════════════════════════════════════
# REQUEST SESSION
# ═══════════════════════════════════════════════════════════════════════════════


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request; commit on success, roll back on error."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ═══════════════════════════════════════════════════════════════════════════════
# LIFECYCLE
# ═══════════════════════════════════════════════════════════════════════════════


async def init_db() -> None:
    """
    Startup connectivity check (SELECT 1).

    Raises:
        Exception: Whatever the driver raises; startup is aborted
    """
    logger.info("Checking database connection")
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database is unreachable", error=str(e))
        raise
    logger.info("Database connection ok")


async def close_db() -> None:
    """Dispose the engine's pool on shutdown."""
    await engine.dispose()
    logger.info("Database pool disposed")
