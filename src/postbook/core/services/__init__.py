"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, IHealthService, IPostService

from .auth_service import AuthService
from .health_service import HealthService
from .post_service import PostService

__all__ = [
    # Interfaces
    "IAuthService",
    "IPostService",
    "IHealthService",

    # Implementations
    "AuthService",
    "PostService",
    "HealthService",
]
