"""
ShareLink Repository

Database operations specific to the ShareLink model.

Common Operations:
==================
- get_by_user()        → The owner's active link, if any
- get_by_hash()        → Public lookup by token
- create_for_user()    → Insert unless the owner already has a link
- delete_by_user()     → Remove the owner's link (idempotent)
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.repositories.base import BaseRepository
from brain.shared.models.share_link import ShareLink


class ShareLinkRepository(BaseRepository[ShareLink]):
    """
    Repository for ShareLink database operations.

    share_links.user_id is unique, so create_for_user() can never leave an
    owner with two live links, whatever the interleaving of callers.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ShareLink, session)

    async def get_by_user(self, user_id: UUID) -> Optional[ShareLink]:
        """Get the active share link of an owner."""
        result = await self.session.execute(
            select(ShareLink).where(ShareLink.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_hash(self, link_hash: str) -> Optional[ShareLink]:
        """Get a share link by its public token."""
        result = await self.session.execute(
            select(ShareLink).where(ShareLink.hash == link_hash)
        )
        return result.scalar_one_or_none()

    async def create_for_user(self, user_id: UUID, link_hash: str) -> Optional[ShareLink]:
        """
        Atomic lookup-or-create of the owner's link.

        Inserts (user_id, link_hash) unless a row for user_id already exists,
        then reads back whichever row is live. The returned link's hash
        differs from link_hash when another caller got there first.

        Args:
            user_id: Owner's UUID
            link_hash: Freshly minted candidate token

        Returns:
            The owner's live ShareLink
        """
        await self.insert_ignoring_conflicts(["user_id"], user_id=user_id, hash=link_hash)
        return await self.get_by_user(user_id)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """
        Delete the owner's share link.

        Returns:
            True if a link was deleted, False if there was none
        """
        result = await self.session.execute(
            delete(ShareLink).where(ShareLink.user_id == user_id)
        )
        return (result.rowcount or 0) > 0
