"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── contents (Content[])     - Links the user saved
       └── share_link (ShareLink?)  - Public link to the user's brain, if enabled

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "user@example.com"                                        │
│ password_hash    │ "$2b$10$..."                                              │
│ created_at       │ 2026-01-01T00:00:00Z                                      │
│ updated_at       │ 2026-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brain.shared.models.base import Base, TimestampMixin


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from brain.shared.models.content import Content
    from brain.shared.models.share_link import ShareLink


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Email address used to sign in (unique, indexed)
        password_hash: Bcrypt hashed password

    Relationships:
        contents: All content saved by this user
        share_link: The user's public share link, if sharing is enabled
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    # Email address - used for sign in
    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Bcrypt hashed password
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    contents: Mapped[list["Content"]] = relationship(
        "Content",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    share_link: Mapped[Optional["ShareLink"]] = relationship(
        "ShareLink",
        back_populates="user",
        cascade="all, delete-orphan",
        uselist=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
