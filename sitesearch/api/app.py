"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sitesearch.api.dependencies import get_config
from sitesearch.api.routes import search
from sitesearch.pipeline.config import Config
from sitesearch.query.presenter import ResultPresenter
from sitesearch.search.base import SearchClient
from sitesearch.search.orama import OramaCloudClient

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    client: SearchClient | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Configuration (defaults to the packaged config.yaml)
        client: Search client (built from ``config.search`` when omitted)

    Returns:
        Configured FastAPI application
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the search client on startup and close it on shutdown."""
        search_client = client or OramaCloudClient(
            endpoint=config.search.endpoint,
            api_key=config.search.api_key,
            heartbeat_interval=config.search.heartbeat_interval,
            timeout=config.search.timeout,
        )
        search_client.open()
        app.state.search_client = search_client
        logger.info("Search API started")

        try:
            yield
        finally:
            search_client.close()
            logger.info("Search API shutdown complete")

    app = FastAPI(
        title="Site Search API",
        description="Faceted full-text search over site section documents",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.presenter = ResultPresenter.from_config(config.presenter)

    app.include_router(search.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        search_client = getattr(app.state, "search_client", None)
        if search_client is None:
            return {"status": "starting"}
        return {"status": "healthy"}

    return app
