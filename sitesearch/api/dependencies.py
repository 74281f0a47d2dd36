"""FastAPI dependencies for dependency injection."""

from functools import lru_cache

from fastapi import Request

from sitesearch.pipeline.config import Config
from sitesearch.query.presenter import ResultPresenter
from sitesearch.search.base import SearchClient


@lru_cache
def get_config() -> Config:
    """Configuration from ``SITESEARCH_CONFIG`` or the packaged config.yaml, cached."""
    return Config.load()


def get_search_client(request: Request) -> SearchClient:
    """Get the search client opened by the application lifespan."""
    return request.app.state.search_client


def get_presenter(request: Request) -> ResultPresenter:
    """Get the result presenter configured for the application."""
    return request.app.state.presenter
