"""Repository layer for data access."""

from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = ["UserRepository", "PostRepository"]
