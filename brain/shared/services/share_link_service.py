"""
Share Link Service

Lifecycle of the public, read-only link to a user's brain.

State Machine (per owner):
==========================
    ┌──────────┐   enable()    ┌──────────────────┐
    │ no link  │ ────────────► │ active(token)    │ ◄─┐ enable() returns
    └──────────┘               └──────────────────┘ ──┘ the same token
         ▲                              │
         └────────── disable() ─────────┘
    disable() with no link is a no-op.
    enable() after disable() mints a new token.

Concurrency:
============
The one-link-per-owner rule lives in the share_links.user_id unique index.
enable() inserts with ON CONFLICT DO NOTHING and reads back the winner, so
concurrent callers (in one process or many) all return the same token.

Usage:
======
    from brain.shared.services.share_link_service import ShareLinkService

    service = ShareLinkService(db)
    token = await service.enable(user_id)
    brain = await service.resolve(token)
"""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.core.exceptions import ConflictError, ShareLinkNotFoundError
from brain.shared.core.logging import logger
from brain.shared.models.content import Content
from brain.shared.repositories.content_repository import ContentRepository
from brain.shared.repositories.share_link_repository import ShareLinkRepository
from brain.shared.repositories.user_repository import UserRepository


def generate_share_token() -> str:
    """Opaque share token: uuid4 hex, 122 bits of randomness."""
    return uuid4().hex


@dataclass(frozen=True)
class SharedBrain:
    """A resolved share link: the owner and everything they saved."""

    owner_id: UUID
    username: str
    contents: List[Content]


class ShareLinkService:
    """
    Service for share link business logic.

    Handles:
    - Enabling sharing (idempotent, reuses the active token)
    - Disabling sharing (idempotent)
    - Public resolution of a token into the owner's content
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ShareLinkService.

        Args:
            session: Async database session
        """
        self.session = session
        self.link_repo = ShareLinkRepository(session)
        self.user_repo = UserRepository(session)
        self.content_repo = ContentRepository(session)

    async def enable(self, user_id: UUID) -> str:
        """
        Make sure the user has an active share link and return its token.

        Args:
            user_id: Authenticated owner

        Returns:
            The active token (existing one if sharing was already enabled)
        """
        existing = await self.link_repo.get_by_user(user_id)
        if existing:
            return existing.hash

        candidate = generate_share_token()
        link = await self.link_repo.create_for_user(user_id, candidate)
        if link is None:
            raise ConflictError("Share link could not be created")

        if link.hash == candidate:
            logger.info("Share link created", user_id=str(user_id))
        else:
            logger.info("Share link reused after concurrent create", user_id=str(user_id))
        return link.hash

    async def disable(self, user_id: UUID) -> None:
        """Delete the user's share link, if any."""
        deleted = await self.link_repo.delete_by_user(user_id)
        if deleted:
            logger.info("Share link deleted", user_id=str(user_id))

    async def set_sharing(self, user_id: UUID, share: bool) -> Optional[str]:
        """
        Toggle sharing.

        Returns:
            The active token when share is True, None when sharing was disabled
        """
        if share:
            return await self.enable(user_id)
        await self.disable(user_id)
        return None

    async def resolve(self, token: str) -> SharedBrain:
        """
        Public lookup of a share token.

        Args:
            token: Token from the share URL

        Returns:
            SharedBrain with the owner's username and all of their content

        Raises:
            ShareLinkNotFoundError: Unknown token, or a link whose owner is gone
        """
        link = await self.link_repo.get_by_hash(token)
        if not link:
            raise ShareLinkNotFoundError()

        owner = await self.user_repo.get(link.user_id)
        if not owner:
            logger.warning(
                "Share link points to a missing user",
                share_link_id=str(link.id),
                user_id=str(link.user_id),
            )
            raise ShareLinkNotFoundError()

        contents = await self.content_repo.list_by_user(owner.id)
        return SharedBrain(owner_id=owner.id, username=owner.username, contents=contents)
