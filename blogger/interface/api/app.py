"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogger.config import Settings
from blogger.interface.api.routes import (
    auth,
    blogs,
    comments,
    health,
    posts,
    testing,
    users,
)
from blogger.interface.error import register_error_handlers
from blogger.util.di.container import create_container, setup_di
from blogger.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    ``scripts/start_app.py`` does so in production and ``tests/conftest.py``
    in tests.

    Args:
        container: DI container to serve requests from. The production
            container is built when omitted.

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blogger API",
        description="Blogs, posts and comments with likes and dislikes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(blogs.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    if settings.environment != "production":
        app_instance.include_router(testing.router)

    return app_instance


# Module-level instance for uvicorn
app = create_app()
