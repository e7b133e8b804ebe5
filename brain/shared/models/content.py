"""
Content Entity Model

A link a user saved into their brain, with its tags.

SAMPLE CONTENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "How to build a second brain"                             │
│ type             │ article                                                   │
│ link             │ "https://example.com/second-brain"                        │
│ tags             │ [productivity, notes]  (via content_tags)                 │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import Column, Enum as SQLEnum, ForeignKey, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brain.shared.models.base import Base, TimestampMixin
from brain.shared.models.enums import ContentType


if TYPE_CHECKING:
    from brain.shared.models.user import User
    from brain.shared.models.tag import Tag


# Junction table: Content <-> Tag (many-to-many)
content_tags = Table(
    "content_tags",
    Base.metadata,
    Column(
        "content_id",
        Uuid,
        ForeignKey("contents.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Uuid,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Content(Base, TimestampMixin):
    """
    Content model - one saved link.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner. Always taken from the authenticated identity.
        title: User supplied title
        type: image / video / article / audio
        link: The saved URL

    Relationships:
        user: The owner
        tags: Tags attached to this content (eager loaded with selectin,
              async sessions cannot lazy load)
    """

    __tablename__ = "contents"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT DATA
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    type: Mapped[ContentType] = mapped_column(
        SQLEnum(
            ContentType,
            name="contenttype",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )

    link: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="contents",
    )

    tags: Mapped[list["Tag"]] = relationship(
        "Tag",
        secondary=content_tags,
        lazy="selectin",
        order_by="Tag.title",
    )

    @property
    def tag_titles(self) -> list[str]:
        """Tag titles in alphabetical order."""
        return [tag.title for tag in self.tags]

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Content(id={self.id}, user_id={self.user_id}, type={self.type})>"
