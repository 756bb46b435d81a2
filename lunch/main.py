"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lunch import __version__
from lunch.api import restaurants
from lunch.config import Settings, get_settings
from lunch.services.restaurant_store import RestaurantStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Set up root logging and apply the configured level to the app loggers."""
    level = settings.log_level.upper()
    # No-op when the server already installed root handlers
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("lunch").setLevel(level)


def create_app(store: RestaurantStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around a store.

    Logging is configured at startup. When no store is given one is opened
    from settings at startup and closed at shutdown. A store that cannot be
    opened aborts startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        configure_logging(settings)
        owns_store = store is None
        app.state.store = RestaurantStore.open(settings) if owns_store else store
        yield
        if owns_store:
            app.state.store.close()

    app = FastAPI(
        title="Lunch API",
        description="Pick a lunch spot without repeating yesterday's",
        version=__version__,
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:1420",
                "tauri://localhost",
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(restaurants.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app
