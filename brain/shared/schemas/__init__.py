"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, message / error / health responses
- user: Sign up and sign in
- content: Content create and list
- brain: Share link toggle and public brain view

Usage:
======
    from brain.shared.schemas.user import SignupRequest, SigninResponse
    from brain.shared.schemas.common import MessageResponse
"""

from brain.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from brain.shared.schemas.user import (
    Credentials,
    SignupRequest,
    SigninRequest,
    SigninResponse,
)
from brain.shared.schemas.content import (
    CreateContentRequest,
    ContentResponse,
    CreateContentResponse,
    ContentListResponse,
)
from brain.shared.schemas.brain import (
    ShareRequest,
    ShareResponse,
    SharedBrainResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "Credentials",
    "SignupRequest",
    "SigninRequest",
    "SigninResponse",
    # Content
    "CreateContentRequest",
    "ContentResponse",
    "CreateContentResponse",
    "ContentListResponse",
    # Brain
    "ShareRequest",
    "ShareResponse",
    "SharedBrainResponse",
]
