"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from brain.shared.core.logging import logger, get_logger
    from brain.shared.core.exceptions import BrainException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from brain.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from brain.shared.core.exceptions import (
    BrainException,
    ValidationError,
    InvalidCredentialsError,
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
    NotFoundError,
    ContentNotFoundError,
    ShareLinkNotFoundError,
    ConflictError,
    DuplicateResourceError,
    ConfigurationError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "BrainException",
    "ValidationError",
    "InvalidCredentialsError",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidTokenError",
    "NotFoundError",
    "ContentNotFoundError",
    "ShareLinkNotFoundError",
    "ConflictError",
    "DuplicateResourceError",
    "ConfigurationError",
]
