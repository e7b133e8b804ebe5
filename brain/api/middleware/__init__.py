"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_context: Request id / structured log context

Usage:
======
    from brain.api.middleware import setup_exception_handlers, RequestContextMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)
"""

from brain.api.middleware.error_handler import setup_exception_handlers
from brain.api.middleware.request_context import RequestContextMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestContextMiddleware",
]
