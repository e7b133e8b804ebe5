"""
ShareLink Entity Model

Public, read-only link to one user's whole brain.

Invariants:
===========
- hash is globally unique and unguessable (uuid4 hex, 122 random bits)
- user_id is unique: at most one active link per owner. The unique
  constraint is what serializes concurrent "enable sharing" calls.
- Disabling sharing deletes the row; re-enabling mints a new hash.

SAMPLE SHARE_LINK RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ hash             │ "9f1c2b7e4a6d4f0e8b3a5c7d9e1f2a3b"                        │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2026-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, ForeignKey, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brain.shared.models.base import Base


if TYPE_CHECKING:
    from brain.shared.models.user import User


class ShareLink(Base):
    """
    ShareLink model - maps a public token to its owner.

    Attributes:
        id: Unique identifier (UUID v4)
        hash: Opaque public token used in /brain/{hash}
        user_id: Owner of the shared brain (unique)
        created_at: When sharing was enabled
    """

    __tablename__ = "share_links"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    hash: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="share_link",
    )

    def __repr__(self) -> str:
        # hash is a bearer secret for read access; keep it out of reprs
        return f"<ShareLink(id={self.id}, user_id={self.user_id})>"
