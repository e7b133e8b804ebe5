"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed on success and rolled back on error. The
dependency is function scoped, so the commit finishes before the response
starts.

Usage:
======
    from brain.api.dependencies.database import DbSession

    @router.get("/contents")
    async def list_contents(db: DbSession):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Tests override this dependency to point at their own database.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures. Function scope commits before
# the response is sent.
DbSession = Annotated[AsyncSession, Depends(get_db, scope="function")]
