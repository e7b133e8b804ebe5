# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00

Tables created:
- users: Accounts (username unique)
- tags: Global tag titles (title unique)
- contents: Saved links
- content_tags: Junction table contents <-> tags
- share_links: Public share tokens (hash unique, user_id unique)

Enums created:
- contenttype: image, video, article, audio
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


content_type_enum = postgresql.ENUM(
    "image",
    "video",
    "article",
    "audio",
    name="contenttype",
    create_type=False,
)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.execute("CREATE TYPE contenttype AS ENUM ('image', 'video', 'article', 'audio')")

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )

    op.create_table(
        "tags",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(100), nullable=False, unique=True, index=True),
    )

    op.create_table(
        "contents",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("type", content_type_enum, nullable=False),
        sa.Column("link", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )

    op.create_table(
        "content_tags",
        sa.Column(
            "content_id",
            sa.Uuid(),
            sa.ForeignKey("contents.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "tag_id",
            sa.Uuid(),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "share_links",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("hash", sa.String(64), nullable=False, unique=True, index=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        _timestamp("created_at"),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_table("share_links")
    op.drop_table("content_tags")
    op.drop_table("contents")
    op.drop_table("tags")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS contenttype")
