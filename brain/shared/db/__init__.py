"""
Database Module

Database connectivity and session management for Brain.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to services / repositories
        ▼
    Repositories (UserRepository, ContentRepository, TagRepository, ShareLinkRepository)
        │  SQL
        ▼
    PostgreSQL

Usage in FastAPI:
=================
    from fastapi import Depends
    from brain.shared.db import get_db

    @app.get("/contents")
    async def list_contents(db: AsyncSession = Depends(get_db, scope="function")):
        ...
"""

from brain.shared.db.session import (
    get_db,
    init_db,
    close_db,
    create_engine_from_settings,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Initialize database on app startup
    "close_db",  # Close database on app shutdown
    "create_engine_from_settings",  # Engine factory
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
