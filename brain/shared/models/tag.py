"""
Tag Entity Model

A label that can be attached to any number of content items.
Tags are global: two users tagging with "music" share one row.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from brain.shared.models.base import Base


class Tag(Base):
    """
    Tag model.

    Attributes:
        id: Unique identifier (UUID v4)
        title: Tag text (unique)
    """

    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, title={self.title})>"
