"""
Authentication Dependencies

The auth gate every protected route goes through.

Request States:
===============
    no Authorization header ───────────────► 401
    header present ──► TokenService.verify ─┬─ valid ───► AuthContext, handler runs
                                            └─ invalid ─► 401

The token travels raw in the Authorization header. A "Bearer " prefix is
accepted and stripped. If the signing secret is unusable the TokenService
dependency fails with ConfigurationError (500), so a broken configuration
rejects requests rather than letting them through.

Usage:
======
    from brain.api.dependencies.auth import CurrentUser

    @router.get("/contents")
    async def list_contents(current_user: CurrentUser):
        return await service.list_own(current_user.user_id)
"""

from dataclasses import dataclass
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import APIKeyHeader

from brain.api.dependencies.services import get_token_service
from brain.shared.core.exceptions import AuthenticationError, InvalidTokenError
from brain.shared.core.logging import log_context, logger
from brain.shared.services.token_service import TokenService


# Raw token in the Authorization header; shows up as an API key in /docs
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

BEARER_SCHEME = "bearer"


@dataclass(frozen=True)
class AuthContext:
    """Identity resolved from a verified token."""

    user_id: UUID


def extract_token(header_value: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    Returns:
        The token, or None if the header is missing or blank
    """
    if not header_value:
        return None
    token = header_value.strip()
    scheme, _, rest = token.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        token = rest.strip()
    return token or None


async def get_current_user(
    authorization: Annotated[Optional[str], Depends(authorization_header)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthContext:
    """
    Resolve the authenticated user for this request.

    Args:
        authorization: Raw Authorization header value
        token_service: Configured token service

    Returns:
        AuthContext with the verified user id

    Raises:
        AuthenticationError: Missing or invalid token
    """
    token = extract_token(authorization)
    if token is None:
        raise AuthenticationError("Authorization required")

    try:
        user_id = token_service.verify(token)
    except InvalidTokenError as e:
        logger.info("Rejected token", reason=str(e))
        raise AuthenticationError("Invalid token") from e

    log_context(user_id=str(user_id))
    return AuthContext(user_id=user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[AuthContext, Depends(get_current_user)]
