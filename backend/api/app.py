"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging import configure_logging
from .error_handling import register_exception_handlers
from .models.errors import AUTH_ERROR_RESPONSES, ADMIN_ERROR_RESPONSES
from .routes import health
from modules.auth.routes import router as auth_router
from modules.api_keys.routes import router as api_keys_router
from modules.daily_todo.routes import router as daily_todo_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY is not set; login codes cannot be emailed")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Passwordless auth, API keys and daily todos",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
    )

    @app.middleware("http")
    async def answer_options(request: Request, call_next):
        """Any OPTIONS request that is not a CORS preflight gets an empty 200."""
        if request.method == "OPTIONS":
            return Response(status_code=200)
        return await call_next(request)

    # Configure CORS (outermost; answers preflights itself)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    prefix = settings.api_prefix
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["auth"])
    app.include_router(
        api_keys_router,
        prefix=f"{prefix}/admin/api-keys",
        tags=["api-keys"],
        responses=ADMIN_ERROR_RESPONSES,
    )
    app.include_router(
        daily_todo_router,
        prefix=f"{prefix}/daily-todo",
        tags=["daily-todo"],
        responses=AUTH_ERROR_RESPONSES,
    )

    return app


# Application instance for uvicorn
app = create_app()
