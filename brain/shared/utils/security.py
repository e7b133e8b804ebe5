"""
Security Primitives

bcrypt password digests and raw JWT signing. Higher level token rules
(which claims, when to expire) live in services/token_service.py.

Passwords:
==========
passlib's bcrypt handler at a fixed cost of 10. The salt and cost are
embedded in every digest ("$2b$10$..."), so a digest alone is enough to
verify against.

JWT:
====
PyJWT. No "exp" claim is written unless a lifetime is passed.

Usage:
======
    from brain.shared.utils.security import SecurityUtils

    digest = SecurityUtils.hash_password("secret1")
    SecurityUtils.verify_password("secret1", digest)          # True

    token = SecurityUtils.create_access_token({"id": user_id}, secret_key=secret)
    SecurityUtils.decode_access_token(token, secret)           # {"id": user_id}
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext


BCRYPT_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


class SecurityUtils:
    """Stateless hashing and signing helpers."""

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORDS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """Salted bcrypt digest of password."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Check a password against a stored digest.

        Returns:
            False on mismatch, and also when the stored digest is empty,
            truncated or not bcrypt at all
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Sign data as a JWT.

        Args:
            data: Claims to sign
            secret_key: HMAC secret
            expires_delta: When given, "iat" and "exp" claims are added
            algorithm: Signing algorithm
        """
        claims = dict(data)

        if expires_delta is not None:
            issued_at = datetime.now(timezone.utc)
            claims["iat"] = issued_at
            claims["exp"] = issued_at + expires_delta

        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Verify the signature (and "exp" if present) and return the claims.

        Raises:
            ValueError: "Token has expired" or "Invalid token: <reason>"
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
