"""
Authentication Handler

Handles sign up and sign in endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Domain errors (DuplicateResourceError, InvalidCredentialsError) propagate
to the global exception handlers, which turn them into 409 / 400.
"""

from fastapi import APIRouter, Depends, status

from brain.shared.schemas.common import MessageResponse
from brain.shared.schemas.user import SigninRequest, SigninResponse, SignupRequest
from brain.shared.services.auth_service import AuthService
from brain.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def signup(
    user_data: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        400: Invalid email or password
        409: Username already registered
    """
    await auth_service.signup(
        username=str(user_data.username),
        password=user_data.password,
    )
    return MessageResponse(message="New user created successfully")


@router.post("/signin", response_model=SigninResponse)
async def signin(
    credentials: SigninRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return a session token.

    Raises:
        400: Invalid input, unknown username or wrong password
    """
    token = await auth_service.signin(
        username=str(credentials.username),
        password=credentials.password,
    )
    return SigninResponse(token=token)
