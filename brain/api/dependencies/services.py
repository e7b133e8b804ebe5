"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with the request's db session. The
TokenService is the exception: it only holds configuration, so it is built
once from the frozen settings and cached.

Usage:
======
    from brain.api.dependencies.services import get_auth_service

    @router.post("/signup")
    async def signup(
        data: SignupRequest,
        auth_service: AuthService = Depends(get_auth_service),
    ):
        ...
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from brain.api.dependencies.database import get_db
from brain.config.settings import get_settings
from brain.shared.services.auth_service import AuthService
from brain.shared.services.content_service import ContentService
from brain.shared.services.share_link_service import ShareLinkService
from brain.shared.services.token_service import TokenService


@lru_cache
def get_token_service() -> TokenService:
    """
    Dependency to get the process-wide TokenService.

    Raises:
        ConfigurationError: If the signing secret is empty. The app calls
            this at startup so the error surfaces before serving traffic.
    """
    return TokenService.from_settings(get_settings())


async def get_auth_service(
    db: AsyncSession = Depends(get_db, scope="function"),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    """
    Dependency to get AuthService instance.
    """
    return AuthService(db, token_service)


async def get_content_service(
    db: AsyncSession = Depends(get_db, scope="function"),
) -> ContentService:
    """
    Dependency to get ContentService instance.
    """
    return ContentService(db)


async def get_share_link_service(
    db: AsyncSession = Depends(get_db, scope="function"),
) -> ShareLinkService:
    """
    Dependency to get ShareLinkService instance.
    """
    return ShareLinkService(db)
