"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser, AuthContext
- Services: get_*_service() functions

Type Aliases:
=============
    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db, scope="function"),
        user: AuthContext = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):
"""

from brain.api.dependencies.database import (
    get_db,
    DbSession,
)
from brain.api.dependencies.auth import (
    AuthContext,
    get_current_user,
    CurrentUser,
)
from brain.api.dependencies.services import (
    get_token_service,
    get_auth_service,
    get_content_service,
    get_share_link_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "AuthContext",
    "get_current_user",
    "CurrentUser",
    # Services
    "get_token_service",
    "get_auth_service",
    "get_content_service",
    "get_share_link_service",
]
