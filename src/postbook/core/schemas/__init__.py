"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from .common import HealthCheckResponse, MessageResponse
from .posts import (
    DeleteResponse,
    FieldError,
    PostFilters,
    PostResponse,
    PostWrite,
    ValidationErrorResponse,
)

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
    # Post schemas
    "PostWrite",
    "PostResponse",
    "PostFilters",
    "DeleteResponse",
    "FieldError",
    "ValidationErrorResponse",
    # Common schemas
    "MessageResponse",
    "HealthCheckResponse",
]
