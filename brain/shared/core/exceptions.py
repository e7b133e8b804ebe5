"""
Domain Exceptions

Every error a Brain request can end with, each carrying the HTTP status
and machine-readable code the API reports for it.

Hierarchy:
==========
    BrainException
       │
       ├── ValidationError (400)           ← bad input
       │      └── InvalidCredentialsError  ← sign in rejected
       ├── AuthenticationError (401)       ← no token / bad token
       ├── AuthorizationError (403)        ← someone else's content
       ├── NotFoundError (404)
       │      ├── ContentNotFoundError
       │      └── ShareLinkNotFoundError
       ├── ConflictError (409)
       │      └── DuplicateResourceError   ← username taken
       └── ConfigurationError (500)        ← unusable signing secret

    InvalidTokenError                      ← TokenService internal, mapped to 401 by the auth gate

Wire format (see api/middleware/error_handler.py):
==================================================
    {
        "success": false,
        "error": {"code": "NOT_FOUND", "message": "Share link not found", "details": {}}
    }

Usage:
======
    from brain.shared.core.exceptions import ContentNotFoundError

    raise ContentNotFoundError(content_id)
"""

from typing import Any, Optional


class BrainException(Exception):
    """
    Root of the Brain error tree.

    Attributes:
        message: Text shown to the client
        status_code: HTTP status the handler responds with
        error_code: Stable code clients can branch on
        details: Extra JSON-safe context, empty by default
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body for this error."""
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }


# ═══════════════════════════════════════════════════════════════════════════════
# 400
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(BrainException):
    """Input rejected by a domain rule (schema errors are handled separately)."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidCredentialsError(ValidationError):
    """
    Sign in failed.

    Raised for an unknown username and for a wrong password alike, with
    the same message, so callers cannot tell which usernames exist.
    """

    def __init__(self) -> None:
        super().__init__(
            message="Invalid username or password",
            error_code="INVALID_CREDENTIALS",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# 401 / 403
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(BrainException):
    """The auth gate could not establish who is calling."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(BrainException):
    """Caller is known but does not own the target resource."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


class InvalidTokenError(Exception):
    """Token signature, format or payload is invalid."""


# ═══════════════════════════════════════════════════════════════════════════════
# 404
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(BrainException):
    """
    A referenced resource does not exist.

    Message is "<resource> not found", or "<resource> with id '<id>' not
    found" when an id is given.
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ContentNotFoundError(NotFoundError):
    def __init__(self, content_id: str) -> None:
        super().__init__(resource="Content", resource_id=content_id)


class ShareLinkNotFoundError(NotFoundError):
    """The token is never echoed back."""

    def __init__(self) -> None:
        super().__init__(resource="Share link")


# ═══════════════════════════════════════════════════════════════════════════════
# 409
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(BrainException):
    """Write refused because it clashes with existing state."""

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """A unique value (e.g. username) is already taken."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# 500
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigurationError(BrainException):
    """Process configuration is unusable, e.g. an empty signing secret."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="CONFIGURATION_ERROR",
        )
