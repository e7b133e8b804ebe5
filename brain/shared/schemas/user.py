"""
User Schemas

Request/response models for sign up and sign in.
"""

from pydantic import BaseModel, EmailStr, Field


class Credentials(BaseModel):
    """Username (an email address) and password."""

    username: EmailStr
    password: str = Field(
        min_length=6,
        max_length=72,
        description="Password (6 to 72 characters, bcrypt's input limit)",
    )


class SignupRequest(Credentials):
    """Schema for user registration."""


class SigninRequest(Credentials):
    """Schema for user sign in."""


class SigninResponse(BaseModel):
    """Schema for a successful sign in."""

    success: bool = True
    message: str = "Signed in successfully"
    token: str
