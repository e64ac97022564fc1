"""
Database models for Postbook.

SQLAlchemy ORM models, all async-friendly:
    - User: account with username/password authentication
    - Post: personal post with category and an ordered tag sequence
    - PostTag: one tag entry of a post
"""

from .base import BaseModel
from .post import Post, PostTag
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Post",
    "PostTag",
]
