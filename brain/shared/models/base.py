"""
Base Model Classes

Declarative base and the timestamp mixin shared by every table.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from brain.shared.models.base import Base, TimestampMixin

    class User(Base, TimestampMixin):
        __tablename__ = "users"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
        username: Mapped[str] = mapped_column(String(255), unique=True)

Primary keys use the generic ``sqlalchemy.Uuid`` type: native UUID on
PostgreSQL, CHAR(32) on SQLite (used by the test suite).
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or together with TimestampMixin.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
