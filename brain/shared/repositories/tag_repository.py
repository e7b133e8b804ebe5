"""
Tag Repository

Database operations for the global Tag table.

Common Operations:
==================
- get_or_create_many()   → Resolve tag titles to Tag rows, creating missing ones
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.repositories.base import BaseRepository
from brain.shared.models.tag import Tag


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tag, session)

    async def get_or_create_many(self, titles: list[str]) -> list[Tag]:
        """
        Resolve tag titles to Tag rows.

        Missing titles are inserted with ON CONFLICT (title) DO NOTHING, so
        two requests introducing the same new tag both end up with the one
        row that won.

        Args:
            titles: Distinct, normalized tag titles

        Returns:
            Tag rows ordered by title
        """
        if not titles:
            return []

        # Sorted, so concurrent requests lock index entries in one order.
        for title in sorted(titles):
            await self.insert_ignoring_conflicts(["title"], title=title)

        result = await self.session.execute(
            select(Tag).where(Tag.title.in_(titles)).order_by(Tag.title)
        )
        return list(result.scalars().all())
