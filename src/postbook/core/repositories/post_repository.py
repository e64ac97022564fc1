"""Post repository for database operations."""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, desc, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from ..exceptions import StoreError
from ..models.post import Post, PostTag
from ..schemas.posts import PostFilters

logger = logging.getLogger(__name__)


def _like_pattern(text: str) -> str:
    """Substring pattern with LIKE wildcards in ``text`` taken literally."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_list_statement(owner_id: UUID, filters: PostFilters) -> Select:
    """Build the owner-scoped listing query for the given filters.

    Filters are ANDed; the search filter itself is an OR over title, content
    and tag names.
    """
    stmt = select(Post).where(Post.owner_id == owner_id)

    category = filters.category_filter
    if category is not None:
        stmt = stmt.where(Post.category == category)

    if filters.tag is not None:
        tagged = select(PostTag.post_id).where(PostTag.name == filters.tag)
        stmt = stmt.where(Post.id.in_(tagged))

    if filters.search is not None:
        pattern = _like_pattern(filters.search)
        tag_match = select(PostTag.post_id).where(PostTag.name.ilike(pattern, escape="\\"))
        stmt = stmt.where(
            or_(
                Post.title.ilike(pattern, escape="\\"),
                Post.content.ilike(pattern, escape="\\"),
                Post.id.in_(tag_match),
            )
        )

    return stmt.order_by(desc(Post.created_at))


class PostRepository:
    """Repository for post database operations.

    SQLAlchemy failures are rolled back, logged and re-raised as StoreError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _store_errors(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Store failure during {operation}", exc_info=e)
            await self.session.rollback()
            raise StoreError(operation) from e

    async def create_post(self, post_data: dict, tags: List[str]) -> Post:
        """Create new post with its tag sequence."""
        async with self._store_errors("create_post"):
            post = Post(**post_data)
            post.set_tags(tags)
            self.session.add(post)
            await self.session.commit()
            await self.session.refresh(post, ["tag_entries"])
            return post

    async def get_by_id_and_owner(self, post_id: UUID, owner_id: UUID) -> Optional[Post]:
        """Get post by ID if owned by the given user."""
        async with self._store_errors("get_post"):
            stmt = select(Post).where(and_(Post.id == post_id, Post.owner_id == owner_id))
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def update_post(
        self, post_id: UUID, owner_id: UUID, update_data: dict, tags: List[str]
    ) -> Optional[Post]:
        """Replace the editable fields of an owned post."""
        post = await self.get_by_id_and_owner(post_id, owner_id)
        if not post:
            return None

        async with self._store_errors("update_post"):
            for key, value in update_data.items():
                setattr(post, key, value)
            post.set_tags(tags)
            post.touch()
            await self.session.commit()
            await self.session.refresh(post, ["tag_entries"])
            return post

    async def delete_post(self, post_id: UUID, owner_id: UUID) -> bool:
        """Delete post if owned by user."""
        post = await self.get_by_id_and_owner(post_id, owner_id)
        if not post:
            logger.warning(f"Post {post_id} not found or not owned by user {owner_id}")
            return False

        async with self._store_errors("delete_post"):
            await self.session.delete(post)
            await self.session.commit()
            logger.info(f"Deleted post {post_id}")
            return True

    async def list_owner_posts(self, owner_id: UUID, filters: PostFilters) -> List[Post]:
        """List an owner's posts matching the filters, newest first."""
        async with self._store_errors("list_posts"):
            result = await self.session.execute(build_list_statement(owner_id, filters))
            return list(result.scalars().all())

    async def get_owner_categories(self, owner_id: UUID) -> List[str]:
        """Distinct categories across the owner's posts."""
        async with self._store_errors("list_categories"):
            stmt = (
                select(Post.category)
                .where(Post.owner_id == owner_id)
                .distinct()
                .order_by(Post.category)
            )
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    async def get_owner_tags(self, owner_id: UUID) -> List[str]:
        """Distinct tag names across all of the owner's posts."""
        async with self._store_errors("list_tags"):
            stmt = (
                select(PostTag.name)
                .join(Post, Post.id == PostTag.post_id)
                .where(Post.owner_id == owner_id)
                .distinct()
                .order_by(PostTag.name)
            )
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
