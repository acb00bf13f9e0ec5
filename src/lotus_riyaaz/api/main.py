"""Lotus Riyaaz — FastAPI application serving the rāga catalog and practice API."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lotus_riyaaz import __version__
from lotus_riyaaz.api.routes import health, practice, ragas
from lotus_riyaaz.settings import Settings, configure_logging, load_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the catalog once on startup; stop the metronome on shutdown."""
        from lotus_riyaaz.raga.catalog import CatalogLoader
        from lotus_riyaaz.session.state import PracticeState

        resolved = settings or load_settings()
        configure_logging(resolved.log_level)

        loader = CatalogLoader(resolved.catalog_source, resolved.catalog_fallback)
        app.state.settings = resolved
        app.state.practice = PracticeState(await loader.load())
        try:
            yield
        finally:
            app.state.practice.shutdown()

    app = FastAPI(
        title="Lotus Riyaaz",
        description="Rāga library and riyaaz practice API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(ragas.router, prefix="/api/v1", tags=["ragas"])
    app.include_router(practice.router, prefix="/api/v1", tags=["practice"])

    return app


app = create_app()
