"""Shared FastAPI dependencies for the API routers."""

from typing import Optional

from fastapi import Query, Request

from ..core.cache import ResponseCache
from ..core.schemas.posts import PostFilters


def get_response_cache(request: Request) -> ResponseCache:
    """The application's response cache, created in the lifespan."""
    return request.app.state.response_cache


def get_optional_response_cache(request: Request) -> Optional[ResponseCache]:
    return getattr(request.app.state, "response_cache", None)


def get_post_filters(
    category: Optional[str] = Query(None, description="Exact category; 'All' disables the filter"),
    tag: Optional[str] = Query(None, description="Exact tag"),
    search: Optional[str] = Query(None, description="Case-insensitive text in title, content or tags"),
) -> PostFilters:
    return PostFilters(category=category, tag=tag, search=search)
