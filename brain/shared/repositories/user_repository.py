"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_username()   → Find user by username (email)
- username_exists()   → Check if username is already registered
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brain.shared.repositories.base import BaseRepository
from brain.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by username
    - Checking username availability
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Email address the user signed up with

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE username = 'user@example.com'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """
        Check if username already exists.

        Used to validate uniqueness when signing up. The unique index on
        users.username remains the final arbiter under concurrency.
        """
        return await self.count({"username": username}) > 0
