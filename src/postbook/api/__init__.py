"""API routers for Postbook."""

from .auth import router as auth_router
from .errors import register_exception_handlers
from .health import router as health_router
from .posts import router as posts_router

__all__ = ["auth_router", "posts_router", "health_router", "register_exception_handlers"]
