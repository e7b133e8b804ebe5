"""
Token Service

Issues and verifies the signed, stateless session tokens handed out at
sign in.

Token Format:
=============
    HS256 JWT, payload {"id": "<user uuid>"}
    + {"iat", "exp"} only when JWT_EXPIRE_MINUTES is configured

Tokens without exp stay valid until JWT_SECRET is rotated.

Usage:
======
    from brain.shared.services.token_service import TokenService

    tokens = TokenService.from_settings(settings)
    token = tokens.issue(user.id)
    user_id = tokens.verify(token)   # raises InvalidTokenError
"""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from brain.config.settings import Settings
from brain.shared.core.exceptions import ConfigurationError, InvalidTokenError
from brain.shared.utils.security import SecurityUtils


USER_ID_CLAIM = "id"


class TokenService:
    """
    Signs and verifies session tokens with the server secret.

    Attributes:
        algorithm: JWT signing algorithm
        expires_delta: Token lifetime, or None for non-expiring tokens
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: Optional[int] = None,
    ) -> None:
        """
        Args:
            secret: Signing secret
            algorithm: JWT algorithm
            expire_minutes: Optional token lifetime

        Raises:
            ConfigurationError: If the secret is empty
        """
        if not secret or not secret.strip():
            raise ConfigurationError("JWT secret is not configured")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes) if expire_minutes else None

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenService":
        return cls(
            secret=config.JWT_SECRET,
            algorithm=config.JWT_ALGORITHM,
            expire_minutes=config.JWT_EXPIRE_MINUTES,
        )

    def issue(self, user_id: UUID) -> str:
        """Issue a signed token carrying the user id."""
        return SecurityUtils.create_access_token(
            data={USER_ID_CLAIM: str(user_id)},
            secret_key=self._secret,
            expires_delta=self.expires_delta,
            algorithm=self.algorithm,
        )

    def verify(self, token: Optional[str]) -> UUID:
        """
        Verify a token and extract the user id.

        Args:
            token: Raw token string

        Returns:
            The user id the token was issued for

        Raises:
            InvalidTokenError: Bad signature, malformed or expired token,
                or a payload without a valid "id" claim
        """
        if not token:
            raise InvalidTokenError("Token is empty")

        try:
            payload = SecurityUtils.decode_access_token(token, self._secret, self.algorithm)
        except ValueError as e:
            raise InvalidTokenError(str(e)) from e

        raw_user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(raw_user_id, str) or not raw_user_id:
            raise InvalidTokenError("Token payload has no user id")

        try:
            return UUID(raw_user_id)
        except ValueError as e:
            raise InvalidTokenError("Token user id is not a UUID") from e
