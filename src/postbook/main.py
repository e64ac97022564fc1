# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .api import auth_router, health_router, posts_router, register_exception_handlers
from .config import get_settings
from .core.cache import ResponseCache
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Postbook application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    app.state.response_cache = ResponseCache.from_settings(settings)

    # Redis only backs the token blacklist, so the app runs without it
    redis_client = get_redis_client()
    try:
        await redis_client.connect()
        logger.info("Redis connection established")
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without Redis...")

    if os.getenv("POSTBOOK_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to POSTBOOK_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Postbook application")
    app.state.response_cache.invalidate_all()
    await redis_client.disconnect()
    await dispose_engine()


app = FastAPI(
    title=settings.app_name,
    description="Personal notes organised by category and tags",
    version=settings.app_version,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Compress larger responses
app.add_middleware(GZipMiddleware, minimum_size=1000)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": settings.app_name}


@app.get("/api/")
async def api_root():
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        },
        "endpoints": {
            "authentication": "/api/auth/",
            "posts": "/api/posts",
            "health": "/api/health/"
        }
    }


# Unprefixed liveness probe
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("postbook.main:app", host=settings.host, port=settings.port, reload=settings.reload)
