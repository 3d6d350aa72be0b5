"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from api.config import Settings, get_settings
from api.errors import register_exception_handlers
from api.middleware import setup_middleware
from api.routes import api_router, health_router
from fastapi import FastAPI
from rich.console import Console

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application without starting a server.

    Args:
        settings: Application settings, loaded from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        logger.info(f"{settings.app_name} v{settings.app_version} started")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"User directory: {settings.user_api_base_url}")

        yield

        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="Test app for the dependency update bot",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    setup_middleware(app)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router)

    return app


def main() -> None:
    """Composition root: load settings, build the app and serve it."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = create_app(settings)

    console = Console()
    console.print(f"[green]Test app running on[/green] [bold]http://{settings.host}:{settings.port}[/bold]")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
