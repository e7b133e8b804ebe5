"""
API Handlers

Route handlers for the Brain API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from brain.api.handlers import (
    auth_handler,
    content_handler,
    brain_handler,
    health_handler,
)

__all__ = [
    "auth_handler",
    "content_handler",
    "brain_handler",
    "health_handler",
]
