"""
Content Service

Business logic for a user's saved content.

Ownership rules:
================
- The owner is always the authenticated user, never a value from the body.
- Listing is filtered strictly by owner.
- Deleting checks the owner before anything is removed.

Usage:
======
    from brain.shared.services.content_service import ContentService

    service = ContentService(db)
    content = await service.create_content(user_id, link=..., type=..., title=..., tags=[...])
"""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.core.exceptions import AuthorizationError, ContentNotFoundError
from brain.shared.core.logging import logger
from brain.shared.models.content import Content
from brain.shared.models.enums import ContentType
from brain.shared.repositories.content_repository import ContentRepository
from brain.shared.repositories.tag_repository import TagRepository


class ContentService:
    """
    Service for content-related business logic.

    Handles:
    - Saving new content with tags
    - Listing the owner's content
    - Owner-checked deletion
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ContentService.

        Args:
            session: Async database session
        """
        self.session = session
        self.content_repo = ContentRepository(session)
        self.tag_repo = TagRepository(session)

    async def create_content(
        self,
        user_id: UUID,
        *,
        link: str,
        type: ContentType,
        title: str,
        tags: List[str],
    ) -> Content:
        """
        Save a content item for a user.

        Args:
            user_id: Authenticated owner
            link: URL being saved
            type: Content kind
            title: Display title
            tags: Normalized, distinct tag titles

        Returns:
            The created content with its tags loaded
        """
        tag_rows = await self.tag_repo.get_or_create_many(tags)

        content = await self.content_repo.create(
            user_id=user_id,
            link=link,
            type=type,
            title=title,
            tags=tag_rows,
        )

        logger.info(
            "Content created",
            user_id=str(user_id),
            content_id=str(content.id),
            content_type=type.value,
            tag_count=len(tag_rows),
        )
        return content

    async def list_own(self, user_id: UUID) -> List[Content]:
        """Get all content owned by the user, newest first."""
        return await self.content_repo.list_by_user(user_id)

    async def delete_own(self, user_id: UUID, content_id: str) -> None:
        """
        Delete one of the user's content items.

        Args:
            user_id: Authenticated owner
            content_id: Raw id from the URL path

        Raises:
            ContentNotFoundError: Unknown or malformed id
            AuthorizationError: The content belongs to another user
        """
        try:
            parsed_id = UUID(content_id)
        except ValueError as e:
            raise ContentNotFoundError(content_id) from e

        content = await self.content_repo.get(parsed_id)
        if not content:
            raise ContentNotFoundError(content_id)

        if content.user_id != user_id:
            logger.warning(
                "Refused to delete content of another user",
                user_id=str(user_id),
                content_id=content_id,
            )
            raise AuthorizationError("You can only delete your own content")

        await self.content_repo.delete(parsed_id)
        logger.info("Content deleted", user_id=str(user_id), content_id=content_id)
