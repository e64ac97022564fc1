"""
Unit tests for User model.
"""

import uuid
from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from postbook.core.models.post import Post, PostTag
from postbook.core.models.user import User


class TestUserModel:
    """Test User model functionality."""

    @pytest.mark.asyncio
    async def test_create_user(self, test_session):
        user = User(
            username="testuser",
            password_hash="hashed_password",
            full_name="Test User",
        )

        test_session.add(user)
        await test_session.commit()
        await test_session.refresh(user)

        assert isinstance(user.id, uuid.UUID)
        assert user.username == "testuser"
        assert user.is_active is True
        assert isinstance(user.created_at, datetime)
        assert isinstance(user.updated_at, datetime)

    def test_display_name_and_can_login(self):
        assert User(username="u", password_hash="h", full_name="John Doe").display_name == "John Doe"
        assert User(username="u", password_hash="h").display_name == "u"
        assert User(username="u", password_hash="h", is_active=False).can_login() is False
        assert repr(User(username="repruser", password_hash="h")) == "<User(username='repruser')>"

    @pytest.mark.asyncio
    async def test_user_unique_username(self, test_session):
        test_session.add(User(username="duplicate", password_hash="hash1"))
        await test_session.commit()

        test_session.add(User(username="duplicate", password_hash="hash2"))
        with pytest.raises(IntegrityError):
            await test_session.commit()

    @pytest.mark.asyncio
    async def test_deleting_user_removes_their_posts(self, test_session):
        user = User(username="tobedeleted", password_hash="hash")
        test_session.add(user)
        await test_session.commit()

        post = Post(title="Gone", content="Content", owner_id=user.id)
        post.set_tags(["a", "b"])
        test_session.add(post)
        await test_session.commit()
        post_id = post.id

        await test_session.delete(user)
        await test_session.commit()
        test_session.expunge_all()

        remaining = await test_session.execute(select(Post).where(Post.id == post_id))
        assert remaining.scalar_one_or_none() is None
        tags = await test_session.execute(select(PostTag).where(PostTag.post_id == post_id))
        assert tags.scalars().all() == []
