"""
Brain Backend

Bookmarking "second brain" API: save tagged links, list them, and publish
a read-only share link of your collection.

Package Structure:
==================
    brain/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    python -m brain
    uvicorn brain.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
