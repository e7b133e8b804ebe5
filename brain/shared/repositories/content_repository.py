"""
Content Repository

Database operations specific to the Content model.

Every query here is scoped by owner.

Common Operations:
==================
- list_by_user()   → All content of one owner, newest first, tags loaded
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.repositories.base import BaseRepository
from brain.shared.models.content import Content


class ContentRepository(BaseRepository[Content]):
    """Repository for Content database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Content, session)

    async def list_by_user(self, user_id: UUID) -> list[Content]:
        """
        Get every content item owned by a user.

        Args:
            user_id: Owner's UUID

        Returns:
            Content items, newest first

        SQL Generated:
            SELECT * FROM contents WHERE user_id = '...' ORDER BY created_at DESC
        """
        result = await self.session.execute(
            select(Content)
            .where(Content.user_id == user_id)
            .order_by(Content.created_at.desc(), Content.id)
        )
        return list(result.scalars().all())
