"""Posts API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.cache import ResponseCache
from ..core.schemas.common import MessageResponse
from ..core.schemas.posts import (
    DeleteResponse,
    PostFilters,
    PostResponse,
    PostWrite,
    ValidationErrorResponse,
)
from ..core.services import PostService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id
from .dependencies import get_post_filters, get_response_cache

router = APIRouter(prefix="/posts", tags=["posts"])

VALIDATION_RESPONSES = {400: {"model": ValidationErrorResponse}}
NOT_FOUND_RESPONSES = {404: {"model": MessageResponse}}


def get_post_service(
    session: AsyncSession = Depends(get_db_session),
    cache: ResponseCache = Depends(get_response_cache),
) -> PostService:
    return PostService(session, cache)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    filters: PostFilters = Depends(get_post_filters),
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """List the caller's posts, newest first."""
    return await post_service.list_posts(current_user_id, filters)


# Declared before /{post_id} so these paths are not taken for ids
@router.get("/categories", response_model=List[str])
async def list_categories(
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """Distinct categories of the caller's posts."""
    return await post_service.list_categories(current_user_id)


@router.get("/tags", response_model=List[str])
async def list_tags(
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """Distinct tags of the caller's posts."""
    return await post_service.list_tags(current_user_id)


@router.get("/{post_id}", response_model=PostResponse, responses=NOT_FOUND_RESPONSES)
async def get_post(
    post_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """Get a specific post."""
    return await post_service.get_post(post_id, current_user_id)


@router.post(
    "", response_model=PostResponse, status_code=status.HTTP_201_CREATED, responses=VALIDATION_RESPONSES
)
async def create_post(
    request: PostWrite,
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """Create a new post."""
    return await post_service.create_post(current_user_id, request)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={**VALIDATION_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def update_post(
    post_id: str,
    request: PostWrite,
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """Update a post."""
    return await post_service.update_post(post_id, current_user_id, request)


@router.delete("/{post_id}", response_model=DeleteResponse, responses=NOT_FOUND_RESPONSES)
async def delete_post(
    post_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    post_service: PostService = Depends(get_post_service),
):
    """Delete a post."""
    return await post_service.delete_post(post_id, current_user_id)
