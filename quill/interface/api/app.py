"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill.config import Settings
from quill.interface.api.routes import comments, health, posts, relations, users
from quill.interface.error import register_error_handlers
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Quill Engagement API",
        description="Likes, bookmarks, follows and comment threads for Quill",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Credentials are required: the session travels in a cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(relations.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(users.router)
    app_instance.include_router(posts.router)

    return app_instance
