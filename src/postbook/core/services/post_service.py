"""Post service implementation."""

import functools
import logging
from typing import Awaitable, Callable, List, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..cache import CacheClass, ResponseCache, request_signature
from ..exceptions import (
    InvalidIdentifierError,
    PostNotFoundError,
    PostValidationError,
    StoreError,
)
from ..repositories.post_repository import PostRepository
from ..schemas.posts import DeleteResponse, PostFilters, PostResponse, PostWrite
from ..validation import validate_post
from .interfaces import IPostService

logger = logging.getLogger(__name__)

LIST_PATH = "/posts"

T = TypeVar("T")


def empty_on_store_failure(func: Callable[..., Awaitable[List[T]]]) -> Callable[..., Awaitable[List[T]]]:
    """Aggregate-read policy: a failed store read yields an empty list.

    Keeps category/tag pickers usable while the store is degraded. Callers
    cannot tell "no data" from "read failed"; the failure is only logged.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs) -> List[T]:
        try:
            return await func(*args, **kwargs)
        except StoreError as e:
            logger.warning(f"{func.__name__} failed, returning empty result", exc_info=e)
            return []

    return wrapper


def parse_post_id(raw_id) -> UUID:
    """Turn a path parameter into a post id, or raise InvalidIdentifierError."""
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(str(raw_id))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError() from None


class PostService(IPostService):
    """Owner-scoped post CRUD with response caching."""

    def __init__(self, session: AsyncSession, cache: ResponseCache):
        self.session = session
        self.cache = cache
        self.post_repo = PostRepository(session)

    async def list_posts(self, owner_id: UUID, filters: PostFilters) -> List[PostResponse]:
        """List the owner's posts matching the filters, newest first."""
        signature = request_signature("GET", LIST_PATH, filters.as_query_params())
        cached = self.cache.get(owner_id, CacheClass.POSTS, signature)
        if cached is not None:
            logger.debug(f"Cache HIT for {signature}")
            return list(cached)

        logger.debug(f"Cache MISS for {signature}")
        generation = self.cache.generation(owner_id)
        posts = await self.post_repo.list_owner_posts(owner_id, filters)
        result = [PostResponse.model_validate(post) for post in posts]
        self.cache.put(owner_id, CacheClass.POSTS, result, signature, generation=generation)
        return list(result)

    @empty_on_store_failure
    async def list_categories(self, owner_id: UUID) -> List[str]:
        """Distinct categories across the owner's posts."""
        cached = self.cache.get(owner_id, CacheClass.CATEGORIES)
        if cached is not None:
            return list(cached)

        generation = self.cache.generation(owner_id)
        categories = await self.post_repo.get_owner_categories(owner_id)
        self.cache.put(owner_id, CacheClass.CATEGORIES, categories, generation=generation)
        return list(categories)

    @empty_on_store_failure
    async def list_tags(self, owner_id: UUID) -> List[str]:
        """Distinct tags across the owner's posts."""
        cached = self.cache.get(owner_id, CacheClass.TAGS)
        if cached is not None:
            return list(cached)

        generation = self.cache.generation(owner_id)
        tags = await self.post_repo.get_owner_tags(owner_id)
        self.cache.put(owner_id, CacheClass.TAGS, tags, generation=generation)
        return list(tags)

    async def get_post(self, post_id, owner_id: UUID) -> PostResponse:
        """Get one owned post; someone else's post is reported as missing."""
        post = await self.post_repo.get_by_id_and_owner(parse_post_id(post_id), owner_id)
        if not post:
            raise PostNotFoundError()
        return PostResponse.model_validate(post)

    async def create_post(self, owner_id: UUID, request: PostWrite) -> PostResponse:
        """Create new post."""
        self._ensure_valid(request)

        post = await self.post_repo.create_post(
            {
                "title": request.title,
                "content": request.content,
                "category": request.category,
                "owner_id": owner_id,
            },
            tags=request.tags or [],
        )
        self.cache.invalidate_owner(owner_id)
        logger.info(f"Created post {post.id} for user {owner_id}")
        return PostResponse.model_validate(post)

    async def update_post(self, post_id, owner_id: UUID, request: PostWrite) -> PostResponse:
        """Replace title, content, category and tags of an owned post."""
        self._ensure_valid(request)
        parsed_id = parse_post_id(post_id)

        post = await self.post_repo.update_post(
            parsed_id,
            owner_id,
            {
                "title": request.title,
                "content": request.content,
                "category": request.category,
            },
            tags=request.tags or [],
        )
        if not post:
            raise PostNotFoundError()

        self.cache.invalidate_owner(owner_id)
        logger.info(f"Updated post {parsed_id} for user {owner_id}")
        return PostResponse.model_validate(post)

    async def delete_post(self, post_id, owner_id: UUID) -> DeleteResponse:
        """Delete an owned post."""
        deleted = await self.post_repo.delete_post(parse_post_id(post_id), owner_id)
        if not deleted:
            raise PostNotFoundError()

        self.cache.invalidate_owner(owner_id)
        return DeleteResponse()

    @staticmethod
    def _ensure_valid(request: PostWrite) -> None:
        errors = validate_post(request)
        if errors:
            raise PostValidationError(errors)
