"""
Shared Module

Domain code used by the API:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── migrations/     ← Alembic environment and revisions
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Password hashing, JWT primitives

Usage:
======
    from brain.shared.models import User, Content, ShareLink
    from brain.shared.services import ShareLinkService
    from brain.shared.core import logger, BrainException
"""
