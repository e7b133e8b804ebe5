"""
Authentication Service

Business logic for sign up and sign in.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (bcrypt)
- TokenService (JWT issuance)

Usage:
======
    from brain.shared.services.auth_service import AuthService

    service = AuthService(db, token_service)
    user = await service.signup(username, password)
    token = await service.signin(username, password)
"""

from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from brain.shared.core.exceptions import DuplicateResourceError, InvalidCredentialsError
from brain.shared.core.logging import logger
from brain.shared.models.user import User
from brain.shared.repositories.user_repository import UserRepository
from brain.shared.services.token_service import TokenService
from brain.shared.utils.security import SecurityUtils


@lru_cache
def _unknown_user_digest() -> str:
    """bcrypt digest checked against when the username is unknown."""
    return SecurityUtils.hash_password("no-such-user")


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with username/password
    - User authentication (sign in) and token issuance

    bcrypt is CPU bound, so hashing and verification run in the threadpool
    instead of on the event loop.

    Attributes:
        session: Database session
        repo: UserRepository instance
        tokens: TokenService used to sign session tokens
    """

    def __init__(self, session: AsyncSession, token_service: TokenService) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            token_service: Configured token service
        """
        self.session = session
        self.repo = UserRepository(session)
        self.tokens = token_service

    async def signup(self, username: str, password: str) -> User:
        """
        Register a new user.

        Args:
            username: Email address (already validated by the schema)
            password: Plain text password (will be hashed)

        Returns:
            The created user

        Raises:
            DuplicateResourceError: If the username is taken
        """
        if await self.repo.username_exists(username):
            raise DuplicateResourceError("User already exists")

        password_hash = await run_in_threadpool(SecurityUtils.hash_password, password)

        try:
            user = await self.repo.create(
                username=username,
                password_hash=password_hash,
            )
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same username
            raise DuplicateResourceError("User already exists") from e

        logger.info("User registered", user_id=str(user.id))
        return user

    async def signin(self, username: str, password: str) -> str:
        """
        Authenticate user and issue a session token.

        Args:
            username: Email address
            password: Plain text password

        Returns:
            Signed session token

        Raises:
            InvalidCredentialsError: Unknown username or wrong password
        """
        user = await self.repo.get_by_username(username)
        if not user:
            # Unknown users pay the same bcrypt cost as a wrong password.
            await run_in_threadpool(
                SecurityUtils.verify_password, password, _unknown_user_digest()
            )
            raise InvalidCredentialsError()

        matches = await run_in_threadpool(
            SecurityUtils.verify_password, password, user.password_hash
        )
        if not matches:
            logger.info("Sign in rejected", user_id=str(user.id))
            raise InvalidCredentialsError()

        logger.info("User signed in", user_id=str(user.id))
        return self.tokens.issue(user.id)
