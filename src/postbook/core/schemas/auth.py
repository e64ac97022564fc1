"""
Authentication schemas.

API contracts for registration, login and the JWT access token.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _check_username(v: str) -> str:
    if not v.replace('_', '').replace('-', '').isalnum():
        raise ValueError('Username can only contain letters, numbers, hyphens, and underscores')
    return v


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(min_length=3, max_length=50, description="Username")
    password: str = Field(min_length=8, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john_doe",
                "password": "securepassword123",
            }
        }
    )


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=50, description="Unique username")
    password: str = Field(min_length=8, max_length=128, description="User password")
    confirm_password: str = Field(min_length=8, max_length=128, description="Password confirmation")
    full_name: Optional[str] = Field(default=None, max_length=100, description="Full name (optional)")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        return _check_username(v)

    @model_validator(mode='after')
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError('Passwords do not match')
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "new_user",
                "password": "securepassword123",
                "confirm_password": "securepassword123",
                "full_name": "New User"
            }
        }
    )


class UserResponse(BaseModel):
    """User information response schema."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    full_name: Optional[str] = Field(default=None, description="Full name")
    is_active: bool = Field(description="Whether user account is active")
    created_at: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "pippo",
                "full_name": "Pippo The Ippo",
                "is_active": True,
                "created_at": "2025-09-13T10:30:00Z",
            }
        },
    )


class TokenResponse(BaseModel):
    """JWT token response schema."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token expiration time in seconds")
    user: UserResponse = Field(description="User information")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "user123",
                    "full_name": "User Name",
                    "is_active": True,
                    "created_at": "2025-09-13T10:30:00Z"
                }
            }
        }
    )
