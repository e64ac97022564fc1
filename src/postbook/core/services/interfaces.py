"""
Service interfaces for Postbook.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.posts import DeleteResponse, PostFilters, PostResponse, PostWrite


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a JWT."""

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""

    @abstractmethod
    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Revoke the presented access token."""


class IPostService(ABC):
    """Post service for owner-scoped CRUD, filtering and aggregates."""

    @abstractmethod
    async def list_posts(self, owner_id: UUID, filters: PostFilters) -> List[PostResponse]:
        """List owned posts matching the filters, newest first."""

    @abstractmethod
    async def list_categories(self, owner_id: UUID) -> List[str]:
        """Distinct categories; empty on read failure."""

    @abstractmethod
    async def list_tags(self, owner_id: UUID) -> List[str]:
        """Distinct tags; empty on read failure."""

    @abstractmethod
    async def get_post(self, post_id: str, owner_id: UUID) -> PostResponse:
        """Get one owned post."""

    @abstractmethod
    async def create_post(self, owner_id: UUID, request: PostWrite) -> PostResponse:
        """Create new post."""

    @abstractmethod
    async def update_post(self, post_id: str, owner_id: UUID, request: PostWrite) -> PostResponse:
        """Replace an owned post's fields."""

    @abstractmethod
    async def delete_post(self, post_id: str, owner_id: UUID) -> DeleteResponse:
        """Delete an owned post."""


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
